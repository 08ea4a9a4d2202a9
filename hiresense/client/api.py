"""
JobBoardClient - what a front end calls.

Wraps one DataStore (picked once by select_store) and the SessionStore.
Reads never raise: they log and return an empty list. Writes raise the
job board errors so the caller can show the message.
"""

from pathlib import Path
from typing import List, Optional

from hiresense.client.session import SESSION_FILE, SessionStore
from hiresense.client.stores import LOCAL_DB_FILE, DataStore, select_store
from hiresense.core.config import Settings, get_settings
from hiresense.core.errors import JobBoardError, MissingResumeError, NotLoggedInError
from hiresense.core.log import get_logger
from hiresense.services.matching_service import RECOMMEND_DEFAULT_LIMIT, MatchingService

logger = get_logger(__name__)

MIN_RESUME_LENGTH = 50


class JobBoardClient:

    def __init__(self, store: DataStore, session: SessionStore, matcher: Optional[MatchingService] = None):
        self.store = store
        self.session = session
        self.matcher = matcher or MatchingService()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "JobBoardClient":
        settings = settings or get_settings()
        data_dir = Path(settings.client_data_dir)
        store = select_store(
            data_dir / LOCAL_DB_FILE,
            base_url=settings.api_base_url,
            timeout=settings.client_timeout
        )
        return cls(store, SessionStore(data_dir / SESSION_FILE))

    # ============================================================
    # SESSION
    # ============================================================

    def login(self, email: str, password: str) -> dict:
        user = self.store.login(email, password)
        self.session.save(user)
        return user

    def register(self, name: str, email: str, password: str, role: str = "JOB_SEEKER") -> dict:
        user = self.store.register({"name": name, "email": email, "password": password, "role": role})
        self.session.save(user)
        return user

    def logout(self) -> None:
        self.session.clear()

    def current_user(self) -> Optional[dict]:
        return self.session.load()

    # ============================================================
    # USERS
    # ============================================================

    def list_users(self) -> List[dict]:
        try:
            return self.store.list_users()
        except JobBoardError as e:
            logger.error("Failed to fetch users: %s", e)
            return []

    def update_profile(self, user_id: str, **fields) -> dict:
        """Save profile fields (camelCase or snake_case keys)."""
        updated = self.store.update_user(user_id, fields)
        current = self.current_user()
        if current and current.get("id") == user_id:
            self.session.save(updated)
        return updated

    def update_resume(self, user_id: str, resume_text: str) -> dict:
        return self.update_profile(user_id, resumeText=resume_text)

    # ============================================================
    # JOBS
    # ============================================================

    def list_jobs(self) -> List[dict]:
        try:
            return self.store.list_jobs()
        except JobBoardError as e:
            logger.error("Failed to fetch jobs: %s", e)
            return []

    def get_job(self, job_id: str) -> Optional[dict]:
        try:
            return self.store.get_job(job_id)
        except JobBoardError as e:
            logger.error("Failed to fetch job %s: %s", job_id, e)
            return None

    def create_job(self, **fields) -> dict:
        return self.store.create_job(fields)

    # ============================================================
    # APPLICATIONS
    # ============================================================

    def list_applications(self) -> List[dict]:
        try:
            return self.store.list_applications()
        except JobBoardError as e:
            logger.error("Failed to fetch applications: %s", e)
            return []

    def create_application(self, job_id: str, user_id: str, match_score: Optional[int] = None) -> dict:
        data = {"jobId": job_id, "userId": user_id}
        if match_score is not None:
            data["matchScore"] = match_score
        return self.store.create_application(data)

    def update_application_status(self, application_id: str, status: str) -> dict:
        return self.store.update_application_status(application_id, status)

    def apply_to_job(self, job_id: str) -> dict:
        """
        Apply as the logged-in user.

        The resume is scored against the job's description and requirements
        first; the score is stored on the application. A failed AI call
        stores the fallback score of 0 instead.

        Raises NotLoggedInError, MissingResumeError, NotFoundError for an
        unknown job and AlreadyAppliedError for a repeat application.
        """
        user = self.current_user()
        if not user:
            raise NotLoggedInError()

        resume = user.get("resumeText") or ""
        if len(resume) < MIN_RESUME_LENGTH:
            raise MissingResumeError("Please upload a resume in your profile first")

        job = self.store.get_job(job_id)
        job_text = f"{job.get('description', '')} {', '.join(job.get('requirements', []))}"
        result = self.matcher.analyze_resume_match(resume, job_text)

        return self.create_application(job_id, user["id"], match_score=result.score)

    def recommend_jobs(self, limit: int = RECOMMEND_DEFAULT_LIMIT) -> List[dict]:
        """Jobs the AI picks for the logged-in user's resume, best first."""
        user = self.current_user()
        resume = (user or {}).get("resumeText")
        if not resume:
            return []

        jobs = self.list_jobs()
        job_ids = self.matcher.recommend_jobs(resume, jobs, limit=limit)
        by_id = {j["id"]: j for j in jobs}
        return [by_id[i] for i in job_ids]
