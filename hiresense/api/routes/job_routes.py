"""
Job Routes

GET /jobs - List all jobs, newest first
GET /jobs/{job_id} - Get job details
POST /jobs - Create job posting
"""

from typing import List

from fastapi import APIRouter, Depends

from hiresense.api.deps import get_job_board
from hiresense.schemas.schemas import Job, JobCreate
from hiresense.services.job_board_service import JobBoardService

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=List[Job])
async def list_jobs(board: JobBoardService = Depends(get_job_board)):
    """List all job postings."""
    return board.list_jobs()


@router.get("/{job_id}", response_model=Job)
async def get_job(job_id: str, board: JobBoardService = Depends(get_job_board)):
    """Get details of a specific job."""
    return board.get_job(job_id)


@router.post("", response_model=Job, status_code=201)
async def create_job(job: JobCreate, board: JobBoardService = Depends(get_job_board)):
    """Create a new job posting. Id and posted date are assigned here."""
    return board.create_job(job)
