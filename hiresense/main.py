"""
HireSense - Main Application

FastAPI backend with:
- One storage backend picked at startup (PostgreSQL, MongoDB or JSON file)
- DeepSeek AI for resume/job matching
- No token auth: the client keeps the user record as its session

Run: uvicorn hiresense.main:app --port 5000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hiresense.api.routes import api_router
from hiresense.core.config import get_settings
from hiresense.core.errors import JobBoardError
from hiresense.core.log import configure_logging, get_logger
from hiresense.services.storage import get_repository

settings = get_settings()
configure_logging(settings.log_level)
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="HireSense",
    description="""
    A job board connecting job seekers and recruiters.

    ## Features
    - **Accounts**: job seekers and recruiters, editable profiles and resumes
    - **Jobs**: recruiters post jobs, everyone can browse
    - **Applications**: one per job and user, status set by the recruiter
    - **AI Matching**: match score, resume review, job recommendations
    - **Ranking**: sort candidates by score, experience or skill overlap

    ## Storage
    PostgreSQL, MongoDB or a local JSON file, chosen once at startup.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(JobBoardError)
async def job_board_error_handler(request: Request, exc: JobBoardError):
    """Service errors become {"detail": ...} with their own status code."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Startup event
@app.on_event("startup")
async def startup_event():
    """Pick the storage backend before the first request."""
    repository = app.dependency_overrides.get(get_repository, get_repository)()
    logger.info("Serving with %s storage", repository.name)


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "HireSense", "docs": "/docs"}
