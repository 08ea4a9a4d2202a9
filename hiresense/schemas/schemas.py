"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from enum import Enum


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self, **kwargs) -> dict:
        """Dump with wire (camelCase) keys, the shape stored by repositories."""
        return self.model_dump(by_alias=True, mode="json", **kwargs)


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    job_seeker = "JOB_SEEKER"
    recruiter = "RECRUITER"


class JobType(str, Enum):
    full_time = "Full-time"
    part_time = "Part-time"
    contract = "Contract"
    remote = "Remote"


class ApplicationStatus(str, Enum):
    applied = "Applied"
    reviewing = "Reviewing"
    interview = "Interview"
    rejected = "Rejected"
    accepted = "Accepted"


class SortMode(str, Enum):
    overall = "overall"
    experience = "experience"
    skills = "skills"


# ============================================================
# USER SCHEMAS
# ============================================================

class UserProfile(CamelModel):
    """Optional profile fields shared by registration and updates."""
    resume_text: Optional[str] = None
    title: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    dob: Optional[str] = None
    bio: Optional[str] = None
    profile_picture: Optional[str] = None


class RegisterRequest(UserProfile):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: UserRole = UserRole.job_seeker


class LoginRequest(CamelModel):
    email: str
    password: str


class UserUpdate(UserProfile):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[UserRole] = None


class User(UserProfile):
    id: str
    name: str
    email: str
    role: UserRole


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=200)
    location: str = ""
    salary: str = ""
    description: str = ""
    requirements: List[str] = []
    recruiter_id: str
    type: JobType = JobType.full_time


class Job(JobCreate):
    id: str
    posted_date: str


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(CamelModel):
    job_id: str
    user_id: str
    match_score: Optional[float] = Field(None, ge=0, le=100)


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus


class Application(ApplicationCreate):
    id: str
    status: ApplicationStatus = ApplicationStatus.applied
    applied_date: str


# ============================================================
# AI SCHEMAS
# ============================================================

class MatchRequest(CamelModel):
    resume_text: str = Field(..., min_length=1)
    job_description: str = Field(..., min_length=1)


class MatchResult(CamelModel):
    score: float = Field(..., ge=0, le=100)
    missing_skills: List[str] = []
    analysis: str = ""


class ResumeReviewRequest(CamelModel):
    resume_text: str = Field(..., min_length=1)


class ResumeReview(CamelModel):
    rating: float = Field(..., ge=1, le=10)
    summary: str
    strengths: List[str] = []
    improvements: List[str] = []


class RecommendationRequest(CamelModel):
    resume_text: str = Field(..., min_length=1)
    limit: int = Field(3, ge=1, le=10)


class RecommendationResponse(CamelModel):
    job_ids: List[str]
    jobs: List[Job]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class HealthResponse(BaseModel):
    status: str
    database: str


class ResumeUploadResponse(CamelModel):
    filename: str
    characters: int
    user: User


class ErrorResponse(BaseModel):
    detail: str
