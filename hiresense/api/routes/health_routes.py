"""
Health Route

GET /health - API status and the storage backend in use
"""

from fastapi import APIRouter, Depends

from hiresense.schemas.schemas import HealthResponse
from hiresense.services.repository import Repository
from hiresense.services.storage import get_repository

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(repository: Repository = Depends(get_repository)):
    """Clients probe this once to decide between the API and local storage."""
    return HealthResponse(status="ok", database=repository.name)
