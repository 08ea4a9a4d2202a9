"""
Repository interface.

Every storage backend (SQL, MongoDB, flat JSON file) stores the same three
kinds of flat records - users, jobs, applications - as plain dicts with
camelCase keys. Routes and the client never care which backend is in use.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hiresense.core.log import get_logger

logger = get_logger(__name__)


class Repository(ABC):
    """Read the record, merge fields, write it back. Nothing more."""

    name: str = "unknown"

    def init(self) -> None:
        """Create tables / indexes / files. Idempotent."""

    @abstractmethod
    def ping(self) -> bool:
        ...

    # USERS
    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[dict]:
        ...

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[dict]:
        ...

    @abstractmethod
    def list_users(self) -> List[dict]:
        ...

    @abstractmethod
    def create_user(self, user: dict) -> dict:
        ...

    @abstractmethod
    def update_user(self, user_id: str, updates: dict) -> Optional[dict]:
        """Merge updates into the stored user; None when it does not exist."""

    # JOBS
    @abstractmethod
    def list_jobs(self) -> List[dict]:
        """All jobs, newest postedDate first."""

    @abstractmethod
    def get_job(self, job_id: str) -> Optional[dict]:
        ...

    @abstractmethod
    def create_job(self, job: dict) -> dict:
        ...

    def count_jobs(self) -> int:
        return len(self.list_jobs())

    # APPLICATIONS
    @abstractmethod
    def list_applications(self) -> List[dict]:
        ...

    @abstractmethod
    def create_application(self, application: dict) -> dict:
        ...

    @abstractmethod
    def update_application_status(self, application_id: str, status: str) -> Optional[dict]:
        """Set status; None when the application does not exist."""

    def seed(self, jobs: List[dict], users: Optional[List[dict]] = None) -> None:
        """Insert sample data into an empty store."""
        if self.count_jobs() == 0:
            logger.info("Seeding %d sample jobs into %s", len(jobs), self.name)
            for job in jobs:
                self.create_job(dict(job))
        for user in users or []:
            if self.get_user_by_email(user["email"]) is None:
                self.create_user(dict(user))
