"""
Job board errors.

Raised by the service layer and by the client stores. Each carries the
HTTP status the API answers with, so the REST layer and the remote client
agree on one mapping.
"""

from typing import Optional


class JobBoardError(Exception):
    status_code: int = 400
    default_message: str = "Request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConflictError(JobBoardError):
    status_code = 400


class DuplicateEmailError(ConflictError):
    default_message = "User already exists"


class AlreadyAppliedError(ConflictError):
    default_message = "Already applied"


class InvalidCredentialsError(JobBoardError):
    status_code = 401
    default_message = "Invalid credentials"


class NotLoggedInError(JobBoardError):
    status_code = 401
    default_message = "Please login first"


class MissingResumeError(JobBoardError):
    status_code = 400
    default_message = "A resume is required to apply"


class NotFoundError(JobBoardError):
    status_code = 404
    default_message = "Not found"


class ValidationFailedError(JobBoardError):
    """Input the job board models reject (bad status, missing field...)."""
    status_code = 422
    default_message = "Invalid input"


class RemoteError(JobBoardError):
    """Unexpected answer (or no answer) from the remote API."""
    status_code = 502
    default_message = "Remote API request failed"


# Detail strings the API sends back, mapped to the error the client re-raises
ERRORS_BY_DETAIL = {
    DuplicateEmailError.default_message: DuplicateEmailError,
    AlreadyAppliedError.default_message: AlreadyAppliedError,
    InvalidCredentialsError.default_message: InvalidCredentialsError,
}

ERRORS_BY_STATUS = {
    400: ConflictError,
    401: InvalidCredentialsError,
    404: NotFoundError,
    422: ValidationFailedError,
}


def error_from_response(status_code: int, detail: Optional[str]) -> JobBoardError:
    """Rebuild the service error behind an API error response."""
    if detail in ERRORS_BY_DETAIL:
        return ERRORS_BY_DETAIL[detail](detail)
    error_cls = ERRORS_BY_STATUS.get(status_code, RemoteError)
    return error_cls(detail or f"HTTP {status_code}")
