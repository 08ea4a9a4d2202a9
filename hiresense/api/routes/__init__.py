"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from hiresense.api.routes.auth_routes import router as auth_router
from hiresense.api.routes.user_routes import router as user_router
from hiresense.api.routes.job_routes import router as job_router
from hiresense.api.routes.application_routes import router as application_router
from hiresense.api.routes.ai_routes import router as ai_router
from hiresense.api.routes.health_routes import router as health_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(job_router)
api_router.include_router(application_router)
api_router.include_router(ai_router)
api_router.include_router(health_router)
