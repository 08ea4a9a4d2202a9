"""
Data stores used by the client.

Two strategies behind one interface:
- RemoteStore: the REST API over httpx
- LocalStore: the same job board rules over a local JSON file, seeded
  with sample jobs and accounts on first use

select_store() probes the API once and returns one of them; the client
never switches afterwards.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from hiresense.core.errors import RemoteError, ValidationFailedError, error_from_response
from hiresense.core.log import get_logger
from hiresense.schemas.schemas import (
    ApplicationCreate, ApplicationStatus, JobCreate, RegisterRequest, UserUpdate
)
from hiresense.services.file_repository import JsonFileRepository
from hiresense.services.job_board_service import JobBoardService
from hiresense.services.seed import SAMPLE_JOBS, sample_users

logger = get_logger(__name__)

LOCAL_DB_FILE = "local_db.json"

ModelT = TypeVar("ModelT", bound=BaseModel)


class DataStore(ABC):

    name: str = "unknown"

    @abstractmethod
    def login(self, email: str, password: str) -> dict:
        ...

    @abstractmethod
    def register(self, data: dict) -> dict:
        ...

    @abstractmethod
    def list_users(self) -> List[dict]:
        ...

    @abstractmethod
    def update_user(self, user_id: str, data: dict) -> dict:
        ...

    @abstractmethod
    def list_jobs(self) -> List[dict]:
        ...

    @abstractmethod
    def get_job(self, job_id: str) -> dict:
        ...

    @abstractmethod
    def create_job(self, data: dict) -> dict:
        ...

    @abstractmethod
    def list_applications(self) -> List[dict]:
        ...

    @abstractmethod
    def create_application(self, data: dict) -> dict:
        ...

    @abstractmethod
    def update_application_status(self, application_id: str, status: str) -> dict:
        ...


# ============================================================
# REMOTE (REST API)
# ============================================================

class RemoteStore(DataStore):
    """
    Calls the API. Error responses are turned back into the service
    errors they came from; network failures raise RemoteError.
    """

    name = "remote"

    def __init__(self, http: httpx.Client, base_path: str = "/api"):
        self.http = http
        self.base_path = base_path.rstrip("/")

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_path}{path}"
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise RemoteError(f"{method} {url} failed: {e}") from e

        if response.is_success:
            return response.json()

        try:
            detail = response.json().get("detail")
        except ValueError:
            detail = None
        if not isinstance(detail, str):
            detail = response.reason_phrase or "Request failed"
        raise error_from_response(response.status_code, detail)

    def login(self, email: str, password: str) -> dict:
        return self._request("POST", "/auth/login", json={"email": email, "password": password})

    def register(self, data: dict) -> dict:
        return self._request("POST", "/auth/register", json=data)

    def list_users(self) -> List[dict]:
        return self._request("GET", "/users")

    def update_user(self, user_id: str, data: dict) -> dict:
        return self._request("PATCH", f"/users/{user_id}", json=data)

    def list_jobs(self) -> List[dict]:
        return self._request("GET", "/jobs")

    def get_job(self, job_id: str) -> dict:
        return self._request("GET", f"/jobs/{job_id}")

    def create_job(self, data: dict) -> dict:
        return self._request("POST", "/jobs", json=data)

    def list_applications(self) -> List[dict]:
        return self._request("GET", "/applications")

    def create_application(self, data: dict) -> dict:
        return self._request("POST", "/applications", json=data)

    def update_application_status(self, application_id: str, status: str) -> dict:
        return self._request("PATCH", f"/applications/{application_id}", json={"status": status})


# ============================================================
# LOCAL (JSON file)
# ============================================================

def _parse(model: Type[ModelT], data: dict) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ValidationFailedError(str(e)) from e


def _parse_status(status: str) -> ApplicationStatus:
    try:
        return ApplicationStatus(status)
    except ValueError as e:
        raise ValidationFailedError(str(e)) from e


class LocalStore(DataStore):
    """
    Offline store: JobBoardService over a JSON file.

    Input the models reject raises ValidationFailedError, the same error
    RemoteStore raises for a 422 answer.
    """

    name = "local"

    def __init__(self, path: Union[str, Path]):
        repository = JsonFileRepository(path)
        repository.init()
        repository.seed(SAMPLE_JOBS, sample_users())
        self.board = JobBoardService(repository)

    def login(self, email: str, password: str) -> dict:
        return self.board.login(email, password)

    def register(self, data: dict) -> dict:
        return self.board.register(_parse(RegisterRequest, data))

    def list_users(self) -> List[dict]:
        return self.board.list_users()

    def update_user(self, user_id: str, data: dict) -> dict:
        return self.board.update_user(user_id, _parse(UserUpdate, data))

    def list_jobs(self) -> List[dict]:
        return self.board.list_jobs()

    def get_job(self, job_id: str) -> dict:
        return self.board.get_job(job_id)

    def create_job(self, data: dict) -> dict:
        return self.board.create_job(_parse(JobCreate, data))

    def list_applications(self) -> List[dict]:
        return self.board.list_applications()

    def create_application(self, data: dict) -> dict:
        return self.board.create_application(_parse(ApplicationCreate, data))

    def update_application_status(self, application_id: str, status: str) -> dict:
        return self.board.update_application_status(application_id, _parse_status(status))


def check_backend_health(http: httpx.Client, base_path: str = "/api") -> bool:
    try:
        return http.get(f"{base_path.rstrip('/')}/health").is_success
    except httpx.HTTPError:
        return False


def select_store(
    local_path: Union[str, Path],
    http: Optional[httpx.Client] = None,
    base_url: str = "http://127.0.0.1:5000/api",
    timeout: float = 5.0
) -> DataStore:
    """
    Probe the API once; fall back to local storage if it does not answer.

    When `http` is given, requests go through it relative to `base_url`'s
    path (tests pass FastAPI's TestClient here).
    """
    url = httpx.URL(base_url)
    base_path = url.path
    owns_http = http is None
    if owns_http:
        http = httpx.Client(base_url=url.copy_with(path="/"), timeout=timeout)

    if check_backend_health(http, base_path):
        logger.info("Using remote API at %s", base_url)
        return RemoteStore(http, base_path)

    logger.warning("API at %s unreachable, using local storage %s", base_url, local_path)
    if owns_http:
        http.close()
    return LocalStore(local_path)
