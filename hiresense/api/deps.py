"""
FastAPI dependencies.

Tests swap these through app.dependency_overrides.
"""

from fastapi import Depends

from hiresense.services.job_board_service import JobBoardService
from hiresense.services.matching_service import MatchingService, get_matching_service
from hiresense.services.repository import Repository
from hiresense.services.storage import get_repository


def get_job_board(repository: Repository = Depends(get_repository)) -> JobBoardService:
    return JobBoardService(repository)


def get_matcher() -> MatchingService:
    return get_matching_service()
