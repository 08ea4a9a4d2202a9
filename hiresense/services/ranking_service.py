"""
Candidate ranking for recruiters.

Orders a job's applications by one of three keys, highest first:
- overall:    the AI match score stored on the application
- experience: the first "<n> years" / "<n>+ yrs" found in the resume
- skills:     how many of the job's requirements appear in the resume

Python's sort is stable, so ties keep their original order.
"""

import re
from typing import Dict, List, Optional

from hiresense.schemas.schemas import SortMode

YEARS_PATTERN = re.compile(r"(\d+)\+?\s*(years|yrs)", re.IGNORECASE)


def extract_years(resume_text: Optional[str]) -> int:
    match = YEARS_PATTERN.search(resume_text or "")
    return int(match.group(1)) if match else 0


def count_skill_overlap(resume_text: Optional[str], requirements: List[str]) -> int:
    lower_text = (resume_text or "").lower()
    return sum(1 for req in requirements if req and req.lower() in lower_text)


def rank_applications(
    applications: List[dict],
    users: Dict[str, dict],
    jobs: Dict[str, dict],
    sort_by: SortMode = SortMode.overall
) -> List[dict]:
    """
    Return a new list of applications sorted for display.

    users and jobs are lookups by id; an applicant without a resume (or an
    application whose job is gone) scores 0 on the resume-based keys.
    """
    def resume_of(application: dict) -> str:
        return users.get(application["userId"], {}).get("resumeText") or ""

    if sort_by == SortMode.experience:
        def key(a):
            return extract_years(resume_of(a))
    elif sort_by == SortMode.skills:
        def key(a):
            requirements = jobs.get(a["jobId"], {}).get("requirements", [])
            return count_skill_overlap(resume_of(a), requirements)
    else:
        def key(a):
            return a.get("matchScore") or 0

    return sorted(applications, key=key, reverse=True)
