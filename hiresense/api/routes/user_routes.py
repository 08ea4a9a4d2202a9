"""
User Routes

GET /users - List users (recruiter dashboards resolve applicants from this)
GET /users/{user_id} - Get one user
PATCH /users/{user_id} - Update profile fields (only provided fields change)
POST /users/{user_id}/resume - Upload resume (PDF/DOCX/TXT) as resume text
"""

from typing import List

from fastapi import APIRouter, Depends, File, UploadFile

from hiresense.api.deps import get_job_board
from hiresense.core.log import get_logger
from hiresense.schemas.schemas import ResumeUploadResponse, User, UserUpdate
from hiresense.services.job_board_service import JobBoardService
from hiresense.utils.resume_reader import read_resume

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[User])
async def list_users(board: JobBoardService = Depends(get_job_board)):
    """All users. Profile pictures are left out."""
    return board.list_users()


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: str, board: JobBoardService = Depends(get_job_board)):
    return board.get_user(user_id)


@router.patch("/{user_id}", response_model=User)
async def update_user(user_id: str, update: UserUpdate, board: JobBoardService = Depends(get_job_board)):
    """Merge the given fields into the profile and return the result."""
    return board.update_user(user_id, update)


@router.post("/{user_id}/resume", response_model=ResumeUploadResponse)
async def upload_resume(
    user_id: str,
    file: UploadFile = File(..., description="Resume file (PDF, DOCX, or TXT)"),
    board: JobBoardService = Depends(get_job_board)
):
    """
    Upload a resume file.

    Supported formats: PDF, DOCX, TXT (max 5MB). The extracted text
    replaces the user's resume text.
    """
    board.get_user(user_id)
    resume_text, filename = await read_resume(file)
    user = board.update_resume(user_id, resume_text)
    logger.info("Resume %s uploaded for %s (%d chars)", filename, user_id, len(resume_text))

    return ResumeUploadResponse(filename=filename, characters=len(resume_text), user=user)
