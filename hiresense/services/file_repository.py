"""
Flat-file Repository - the whole store is one JSON document on disk.

    {"users": [...], "jobs": [...], "applications": [...]}

Every write re-reads the file, changes it and writes it back. Two
processes sharing a file can overwrite each other's changes.
"""

import json
import os
from pathlib import Path
from typing import List, Optional, Union

from hiresense.core.log import get_logger
from hiresense.services.repository import Repository

logger = get_logger(__name__)


def _empty() -> dict:
    return {"users": [], "jobs": [], "applications": []}


class JsonFileRepository(Repository):

    name = "local_file"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def init(self) -> None:
        if not self.path.exists():
            self._write(_empty())

    def ping(self) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            return False
        return os.access(self.path.parent, os.W_OK)

    def _read(self) -> dict:
        if not self.path.exists():
            return _empty()
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Could not read %s: %s", self.path, e)
            return _empty()
        for key, value in _empty().items():
            data.setdefault(key, value)
        return data

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp, self.path)

    def _append(self, collection: str, record: dict) -> dict:
        data = self._read()
        data[collection].append(record)
        self._write(data)
        return record

    # USERS
    def get_user_by_email(self, email: str) -> Optional[dict]:
        email = email.lower()
        return next((u for u in self._read()["users"] if u["email"].lower() == email), None)

    def get_user(self, user_id: str) -> Optional[dict]:
        return next((u for u in self._read()["users"] if u["id"] == user_id), None)

    def list_users(self) -> List[dict]:
        return self._read()["users"]

    def create_user(self, user: dict) -> dict:
        return self._append("users", user)

    def update_user(self, user_id: str, updates: dict) -> Optional[dict]:
        data = self._read()
        for idx, user in enumerate(data["users"]):
            if user["id"] == user_id:
                data["users"][idx] = {**user, **updates, "id": user_id}
                self._write(data)
                return data["users"][idx]
        return None

    # JOBS
    def list_jobs(self) -> List[dict]:
        return sorted(self._read()["jobs"], key=lambda j: j.get("postedDate", ""), reverse=True)

    def get_job(self, job_id: str) -> Optional[dict]:
        return next((j for j in self._read()["jobs"] if j["id"] == job_id), None)

    def create_job(self, job: dict) -> dict:
        return self._append("jobs", job)

    # APPLICATIONS
    def list_applications(self) -> List[dict]:
        return self._read()["applications"]

    def create_application(self, application: dict) -> dict:
        return self._append("applications", application)

    def update_application_status(self, application_id: str, status: str) -> Optional[dict]:
        data = self._read()
        for application in data["applications"]:
            if application["id"] == application_id:
                application["status"] = status
                self._write(data)
                return application
        return None
