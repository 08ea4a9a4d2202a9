"""
AI Matching Service - resume/job matching through the language model.

Three operations:
1. analyze_resume_match - score a resume against one job description
2. review_resume_quality - general feedback on a resume
3. recommend_jobs - pick the best matching job ids from a list

A failed request or an unusable answer never fails the caller: each
operation returns a fixed fallback value instead. No retries, no caching.
"""

import json
from typing import List, Optional

from hiresense.core.log import get_logger
from hiresense.schemas.schemas import MatchResult, ResumeReview
from hiresense.services.llm_client import LLMClient, get_llm_client

logger = get_logger(__name__)

# Resume characters sent with a recommendation request
RECOMMEND_RESUME_LIMIT = 3000
RECOMMEND_DEFAULT_LIMIT = 3


def match_fallback() -> MatchResult:
    return MatchResult(
        score=0,
        missing_skills=["Error connecting to AI service"],
        analysis="Could not perform analysis. Please check API Key."
    )


def review_fallback() -> ResumeReview:
    return ResumeReview(
        rating=5,
        summary="Could not analyze resume.",
        strengths=["N/A"],
        improvements=["Check API connection"]
    )


MATCH_PROMPT = """You are an expert HR AI Recruiter.
Analyze the Resume Text against the Job Description given by the user.
Calculate a match score percentage (0-100) based on skills, experience, and relevance.
Identify missing critical skills from the resume that are required in the job description.
Provide a brief 1-sentence analysis of the fit.
Return ONLY valid JSON.
Output format:
{
  "score": number (0-100),
  "missingSkills": ["skill1", "skill2"],
  "analysis": "string"
}"""

REVIEW_PROMPT = """You are a professional Resume Coach.
Review the resume text given by the user and provide constructive feedback.
Provide:
1. A rating out of 10.
2. A short summary of the candidate's profile.
3. Top 3 strengths.
4. Top 3 areas for improvement.
Return ONLY valid JSON.
Output format:
{
  "rating": number (1-10),
  "summary": "string",
  "strengths": ["string", "string", "string"],
  "improvements": ["string", "string", "string"]
}"""

RECOMMEND_PROMPT = """You are a smart recruiter.
Given the Resume and the list of Available Jobs from the user, select the top {limit} job ids
that best match the candidate's profile.
If no strong matches are found, return the ones that are closest or an empty list.
Return ONLY valid JSON.
Output format:
{{"jobIds": ["id1", "id2"]}}"""


class MatchingService:

    def __init__(self, ai_client: Optional[LLMClient] = None):
        self._ai_client = ai_client

    @property
    def ai_client(self) -> LLMClient:
        if self._ai_client is None:
            self._ai_client = get_llm_client()
        return self._ai_client

    def analyze_resume_match(self, resume_text: str, job_description: str) -> MatchResult:
        """Score a resume against a job description (0-100)."""
        content = f"Resume Text:\n{resume_text}\n\nJob Description:\n{job_description}"
        try:
            data = self.ai_client.complete_json(MATCH_PROMPT, content, max_tokens=500)
            return MatchResult.model_validate(data)
        except Exception as e:
            logger.error("AI analysis failed: %s", e)
            return match_fallback()

    def review_resume_quality(self, resume_text: str) -> ResumeReview:
        """Rate a resume out of 10 with strengths and improvements."""
        content = f"Resume Text:\n{resume_text}"
        try:
            data = self.ai_client.complete_json(REVIEW_PROMPT, content, max_tokens=600)
            return ResumeReview.model_validate(data)
        except Exception as e:
            logger.error("Resume review failed: %s", e)
            return review_fallback()

    def recommend_jobs(
        self,
        resume_text: str,
        jobs: List[dict],
        limit: int = RECOMMEND_DEFAULT_LIMIT
    ) -> List[str]:
        """
        Pick up to `limit` job ids from `jobs` for this resume.

        Jobs are reduced to id/title/company/requirements to keep the prompt
        small, and the resume is cut to RECOMMEND_RESUME_LIMIT characters.
        Ids the model invents are dropped.
        """
        if not jobs:
            return []

        summaries = [
            {
                "id": j["id"],
                "title": j.get("title", ""),
                "company": j.get("company", ""),
                "requirements": ", ".join(j.get("requirements", []))
            }
            for j in jobs
        ]
        content = (
            f"Resume:\n{resume_text[:RECOMMEND_RESUME_LIMIT]}\n\n"
            f"Available Jobs (JSON):\n{json.dumps(summaries)}"
        )

        try:
            data = self.ai_client.complete_json(
                RECOMMEND_PROMPT.format(limit=limit), content, max_tokens=300
            )
            ids = data.get("jobIds", []) if isinstance(data, dict) else data
            if not isinstance(ids, list):
                raise ValueError(f"Expected a list of job ids, got {type(ids).__name__}")
        except Exception as e:
            logger.error("AI recommendation failed: %s", e)
            return []

        known = {j["id"] for j in jobs}
        picked = []
        for job_id in ids:
            job_id = str(job_id)
            if job_id in known and job_id not in picked:
                picked.append(job_id)
        return picked[:limit]


def get_matching_service() -> MatchingService:
    """Get matching service instance."""
    return MatchingService()
