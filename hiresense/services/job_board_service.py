"""
Job Board Service - account, job and application rules.

Shared by the REST routes and the client's local fallback store, so both
enforce the same two invariants:
- one account per email (case-insensitive)
- one application per (job, applicant) pair
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from hiresense.core.errors import (
    AlreadyAppliedError,
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError
)
from hiresense.core.log import get_logger
from hiresense.core.security import hash_password, verify_password
from hiresense.schemas.schemas import (
    ApplicationCreate,
    ApplicationStatus,
    JobCreate,
    RegisterRequest,
    UserUpdate
)
from hiresense.services.repository import Repository

logger = get_logger(__name__)

# Fields never sent back to callers
PRIVATE_USER_FIELDS = ("password",)
# Left out of user listings to keep them small
HEAVY_USER_FIELDS = ("profilePicture",)


def new_id(prefix: str) -> str:
    """'u', 'j' or 'a' followed by a unique suffix."""
    return f"{prefix}{uuid.uuid4().hex[:12]}"


def public_user(user: dict, *drop: str) -> dict:
    hidden = PRIVATE_USER_FIELDS + drop
    return {k: v for k, v in user.items() if k not in hidden}


class JobBoardService:

    def __init__(self, repository: Repository):
        self.repository = repository

    # ============================================================
    # ACCOUNTS
    # ============================================================

    def register(self, request: RegisterRequest) -> dict:
        """Create an account. Rejects an email that is already registered."""
        email = request.email.lower()
        if self.repository.get_user_by_email(email):
            raise DuplicateEmailError()

        user = request.to_record(exclude_none=True)
        user.update({
            "id": new_id("u"),
            "email": email,
            "password": hash_password(request.password)
        })
        self.repository.create_user(user)
        logger.info("Registered %s as %s", user["id"], user["role"])
        return public_user(user)

    def login(self, email: str, password: str) -> dict:
        user = self.repository.get_user_by_email(email.strip())
        if not user or not verify_password(password, user.get("password", "")):
            raise InvalidCredentialsError()
        return public_user(user)

    def list_users(self) -> List[dict]:
        return [public_user(u, *HEAVY_USER_FIELDS) for u in self.repository.list_users()]

    def get_user(self, user_id: str) -> dict:
        user = self.repository.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return public_user(user)

    def update_user(self, user_id: str, update: UserUpdate) -> dict:
        """Merge the given fields into the stored profile."""
        updates = update.to_record(exclude_unset=True)
        updated = self.repository.update_user(user_id, updates)
        if not updated:
            raise NotFoundError("User not found")
        return public_user(updated)

    def update_resume(self, user_id: str, resume_text: str) -> dict:
        return self.update_user(user_id, UserUpdate(resume_text=resume_text))

    # ============================================================
    # JOBS
    # ============================================================

    def list_jobs(self) -> List[dict]:
        return self.repository.list_jobs()

    def get_job(self, job_id: str) -> dict:
        job = self.repository.get_job(job_id)
        if not job:
            raise NotFoundError("Job not found")
        return job

    def create_job(self, request: JobCreate) -> dict:
        job = request.to_record()
        job.update({
            "id": new_id("j"),
            "postedDate": datetime.now(timezone.utc).isoformat()
        })
        return self.repository.create_job(job)

    # ============================================================
    # APPLICATIONS
    # ============================================================

    def list_applications(self, job_id: Optional[str] = None, user_id: Optional[str] = None) -> List[dict]:
        applications = self.repository.list_applications()
        if job_id:
            applications = [a for a in applications if a["jobId"] == job_id]
        if user_id:
            applications = [a for a in applications if a["userId"] == user_id]
        return applications

    def create_application(self, request: ApplicationCreate) -> dict:
        """Apply once per (job, user). A second attempt raises AlreadyAppliedError."""
        existing = self.repository.list_applications()
        if any(a["jobId"] == request.job_id and a["userId"] == request.user_id for a in existing):
            raise AlreadyAppliedError()

        application = request.to_record(exclude_none=True)
        application.update({
            "id": new_id("a"),
            "status": ApplicationStatus.applied.value,
            "appliedDate": datetime.now(timezone.utc).date().isoformat()
        })
        self.repository.create_application(application)
        logger.info("Application %s: user %s -> job %s", application["id"], request.user_id, request.job_id)
        return application

    def update_application_status(self, application_id: str, status: ApplicationStatus) -> dict:
        updated = self.repository.update_application_status(application_id, status.value)
        if not updated:
            raise NotFoundError("Application not found")
        return updated
