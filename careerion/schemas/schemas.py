"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field names are camelCase because that is what the web frontend sends.

Required fields on auth requests are Optional here: the handlers check them
so that missing input produces the documented 400 messages.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List, Any, Union
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    user = "user"
    admin = "admin"
    superadmin = "superadmin"


class JobStatus(str, Enum):
    active = "active"
    closed = "closed"
    draft = "draft"


class CompanySize(str, Enum):
    startup = "startup"
    small = "small"
    medium = "medium"
    large = "large"


class CompanyStatus(str, Enum):
    active = "active"
    inactive = "inactive"


class ApplicationStatus(str, Enum):
    pending = "pending"
    reviewed = "reviewed"
    accepted = "accepted"
    rejected = "rejected"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class SignupRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class GoogleAuthRequest(BaseModel):
    token: Optional[str] = None


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class ProfileUpdate(BaseModel):
    """Allow-listed profile fields; anything else in the body is ignored."""
    educationLevel: Optional[str] = None
    fieldOfStudy: Optional[str] = None
    institution: Optional[str] = None
    yearOfCompletion: Optional[Union[str, int]] = None
    currentStatus: Optional[str] = None
    workExperience: Optional[str] = None
    skills: Optional[Union[List[str], str]] = None
    interests: Optional[Union[List[str], str]] = None
    careerGoals: Optional[str] = None
    preferredWorkEnvironment: Optional[str] = None
    preferredWorkLocation: Optional[str] = None
    salaryExpectations: Optional[str] = None
    willingToRelocate: Optional[bool] = None


# ============================================================
# CHAT SCHEMAS
# ============================================================

class ChatRequest(BaseModel):
    message: Optional[str] = None
    # Entries are validated by the chat service; malformed ones are dropped
    history: Optional[List[Any]] = None
    systemPrompt: Optional[str] = None
    expectJson: bool = False

class CareerRecommendationRequest(BaseModel):
    query: Optional[str] = None
    category: Optional[str] = None


# ============================================================
# ADMIN SCHEMAS
# ============================================================

class AdminUserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str
    role: UserRole = UserRole.user
    isActive: bool = True

class AdminUserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None
    isActive: Optional[bool] = None

class JobCreate(BaseModel):
    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    status: JobStatus = JobStatus.active

class JobUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    status: Optional[JobStatus] = None

class CompanyCreate(BaseModel):
    name: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1)
    size: CompanySize = CompanySize.medium
    status: CompanyStatus = CompanyStatus.active

class CompanyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    industry: Optional[str] = Field(None, min_length=1)
    size: Optional[CompanySize] = None
    status: Optional[CompanyStatus] = None

class ApplicationCreate(BaseModel):
    jobId: str
    userId: str
    status: ApplicationStatus = ApplicationStatus.pending

class ApplicationUpdate(BaseModel):
    status: ApplicationStatus

class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

class StatsResponse(BaseModel):
    totalUsers: int
    totalJobs: int
    totalCompanies: int
    totalApplications: int


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str

class HealthResponse(BaseModel):
    status: str
    geminiKeyPresent: bool
    modelConfigured: str
