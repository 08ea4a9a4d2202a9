"""
Authentication Routes

POST /auth/register - Register new user
POST /auth/login - Login and get the user record back

There is no token: the client keeps the returned user record as its
session.
"""

from fastapi import APIRouter, Depends

from hiresense.api.deps import get_job_board
from hiresense.schemas.schemas import LoginRequest, RegisterRequest, User
from hiresense.services.job_board_service import JobBoardService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=User, status_code=201)
async def register(request: RegisterRequest, board: JobBoardService = Depends(get_job_board)):
    """
    Register a new account (job seeker or recruiter).

    Fails with 400 if the email is already registered.
    """
    return board.register(request)


@router.post("/login", response_model=User)
async def login(request: LoginRequest, board: JobBoardService = Depends(get_job_board)):
    """Check email and password; returns the user record."""
    return board.login(request.email, request.password)
