"""
AI Routes

POST /ai/match - Score a resume against a job description
POST /ai/review - Resume quality feedback
POST /ai/recommendations - Best matching stored jobs for a resume

These never fail because of the language model: on any AI error the
documented fallback result is returned with status 200.

The model client blocks, so these are plain `def` handlers and run in
FastAPI's threadpool.
"""

from fastapi import APIRouter, Depends

from hiresense.api.deps import get_job_board, get_matcher
from hiresense.schemas.schemas import (
    MatchRequest, MatchResult, RecommendationRequest, RecommendationResponse,
    ResumeReview, ResumeReviewRequest
)
from hiresense.services.job_board_service import JobBoardService
from hiresense.services.matching_service import MatchingService

router = APIRouter(prefix="/ai", tags=["AI Matching"])


@router.post("/match", response_model=MatchResult)
def match(request: MatchRequest, matcher: MatchingService = Depends(get_matcher)):
    """Match score (0-100), missing skills and a one-line analysis."""
    return matcher.analyze_resume_match(request.resume_text, request.job_description)


@router.post("/review", response_model=ResumeReview)
def review(request: ResumeReviewRequest, matcher: MatchingService = Depends(get_matcher)):
    """Rating out of 10, summary, strengths and improvements."""
    return matcher.review_resume_quality(request.resume_text)


@router.post("/recommendations", response_model=RecommendationResponse)
def recommendations(
    request: RecommendationRequest,
    matcher: MatchingService = Depends(get_matcher),
    board: JobBoardService = Depends(get_job_board)
):
    """Pick the stored jobs that best fit the resume."""
    jobs = board.list_jobs()
    job_ids = matcher.recommend_jobs(request.resume_text, jobs, limit=request.limit)
    by_id = {j["id"]: j for j in jobs}
    return RecommendationResponse(job_ids=job_ids, jobs=[by_id[i] for i in job_ids])
