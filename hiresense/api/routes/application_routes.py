"""
Application Routes

GET /applications - List applications (filter by job/user, optional ranking)
POST /applications - Apply to a job (once per job and user)
PATCH /applications/{application_id} - Update application status
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from hiresense.api.deps import get_job_board
from hiresense.schemas.schemas import (
    Application, ApplicationCreate, ApplicationStatusUpdate, SortMode
)
from hiresense.services.job_board_service import JobBoardService
from hiresense.services.ranking_service import rank_applications

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("", response_model=List[Application])
async def list_applications(
    job_id: Optional[str] = Query(None, alias="jobId"),
    user_id: Optional[str] = Query(None, alias="userId"),
    sort_by: Optional[SortMode] = Query(None, alias="sortBy", description="overall, experience or skills"),
    board: JobBoardService = Depends(get_job_board)
):
    """
    List applications.

    With sortBy, candidates are ranked for the recruiter view:
    - overall: AI match score
    - experience: years of experience mentioned in the resume
    - skills: job requirements found in the resume
    """
    applications = board.list_applications(job_id=job_id, user_id=user_id)
    if sort_by is None:
        return applications

    users = {u["id"]: u for u in board.list_users()}
    jobs = {j["id"]: j for j in board.list_jobs()}
    return rank_applications(applications, users, jobs, sort_by)


@router.post("", response_model=Application, status_code=201)
async def create_application(application: ApplicationCreate, board: JobBoardService = Depends(get_job_board)):
    """Apply to a job. Cannot apply twice to the same job."""
    return board.create_application(application)


@router.patch("/{application_id}", response_model=Application)
async def update_application_status(
    application_id: str,
    update: ApplicationStatusUpdate,
    board: JobBoardService = Depends(get_job_board)
):
    """Update status of a job application."""
    return board.update_application_status(application_id, update.status)
