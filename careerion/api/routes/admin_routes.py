"""
Admin Routes (admin or superadmin only)

GET /admin/stats - Collection counts
GET|POST /admin/users, GET|PUT|DELETE /admin/users/{user_id}
GET|POST /admin/jobs, GET|PUT|DELETE /admin/jobs/{job_id}
GET|POST /admin/companies, GET|PUT|DELETE /admin/companies/{company_id}
GET|POST /admin/applications, GET|PUT|DELETE /admin/applications/{application_id}
"""

import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, Query

from careerion.api.deps import (
    get_user_service, get_job_service, get_company_service, get_application_service
)
from careerion.core.auth import can_assign_role, can_manage_user, hash_password, require_admin
from careerion.core.errors import AuthorizationError, ValidationError
from careerion.schemas.schemas import (
    AdminUserCreate, AdminUserUpdate, JobCreate, JobUpdate, CompanyCreate, CompanyUpdate,
    ApplicationCreate, ApplicationUpdate, UserRole, JobStatus, CompanyStatus, CompanySize,
    ApplicationStatus, Pagination, StatsResponse, MessageResponse
)
from careerion.services.mongo_service import (
    UserService, JobService, CompanyService, ApplicationService,
    public_user, serialize_doc, serialize_docs, to_object_id
)

logger = logging.getLogger(__name__)

# Every route below runs the capability check before its own logic
router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])

MIN_PASSWORD_LENGTH = 6


def _enum_value(value):
    return value.value if value is not None else None


def _check_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")


def _check_role_assignment(admin: dict, role: str) -> None:
    if not can_assign_role(admin["role"], role):
        raise AuthorizationError(f"Only a superadmin can assign the '{role}' role")


def _check_target(admin: dict, target: dict) -> None:
    if not can_manage_user(admin["role"], target.get("role", "user")):
        raise AuthorizationError("Only a superadmin can manage admin accounts")


def _is_self(admin: dict, target: dict) -> bool:
    return target["_id"] == to_object_id(admin["user_id"])


# ============================================================
# STATS
# ============================================================

@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    users: UserService = Depends(get_user_service),
    jobs: JobService = Depends(get_job_service),
    companies: CompanyService = Depends(get_company_service),
    applications: ApplicationService = Depends(get_application_service)
):
    return StatsResponse(
        totalUsers=users.count(),
        totalJobs=jobs.count(),
        totalCompanies=companies.count(),
        totalApplications=applications.count()
    )


# ============================================================
# USERS
# ============================================================

@router.get("/users")
async def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in name and email"),
    role: Optional[UserRole] = Query(None),
    users: UserService = Depends(get_user_service)
):
    """List users with pagination, free-text search and role filter."""
    docs, total = users.list(
        search=search,
        filters={"role": _enum_value(role)},
        page=page,
        limit=limit
    )
    return {
        "users": [public_user(d) for d in docs],
        "pagination": Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit) if total else 0
        ),
    }


@router.get("/users/{user_id}")
async def get_user(user_id: str, users: UserService = Depends(get_user_service)):
    return public_user(users.require(user_id))


@router.post("/users", status_code=201)
def create_user(
    data: AdminUserCreate,
    admin: dict = Depends(require_admin),
    users: UserService = Depends(get_user_service)
):
    """Create a user. Creating admins requires a superadmin."""
    _check_role_assignment(admin, data.role.value)
    _check_password(data.password)

    user = users.create_user(
        name=data.name,
        email=data.email,
        password_hash=hash_password(data.password),
        role=data.role.value,
        is_active=data.isActive
    )
    logger.info("Admin %s created user %s (%s)", admin["email"], user["email"], user["role"])
    return {"message": "User created successfully", "user": public_user(user)}


@router.put("/users/{user_id}")
def update_user(
    user_id: str,
    data: AdminUserUpdate,
    admin: dict = Depends(require_admin),
    users: UserService = Depends(get_user_service)
):
    """Partial update. Accounts holding an admin role are managed by superadmins only."""
    target = users.require(user_id)
    if not _is_self(admin, target):
        _check_target(admin, target)

    changes = data.model_dump(exclude_unset=True, exclude_none=True)

    if "role" in changes:
        changes["role"] = changes["role"].value
        _check_role_assignment(admin, changes["role"])
    if "password" in changes:
        _check_password(changes["password"])
        changes["password"] = hash_password(changes["password"])

    user = users.update(target["_id"], changes)
    return {"message": "User updated successfully", "user": public_user(user)}


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str,
    admin: dict = Depends(require_admin),
    users: UserService = Depends(get_user_service),
    applications: ApplicationService = Depends(get_application_service)
):
    """Delete a user and their applications. Admins cannot delete themselves."""
    user = users.require(user_id)
    if _is_self(admin, user):
        raise ValidationError("You cannot delete your own account")
    _check_target(admin, user)

    users.delete(user["_id"])
    applications.delete_for_user(user["_id"])
    logger.info("Admin %s deleted user %s", admin["email"], user["email"])
    return MessageResponse(message="User deleted successfully")


# ============================================================
# JOBS
# ============================================================

@router.get("/jobs")
async def list_jobs(
    search: Optional[str] = Query(None, description="Search in title, company and location"),
    status: Optional[JobStatus] = Query(None),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    jobs: JobService = Depends(get_job_service)
):
    """All jobs, newest first."""
    docs, _ = jobs.list(search=search, filters={"status": _enum_value(status)}, page=page, limit=limit)
    return serialize_docs(docs)


@router.get("/jobs/{job_id}")
async def get_job(job_id: str, jobs: JobService = Depends(get_job_service)):
    return serialize_doc(jobs.require(job_id))


@router.post("/jobs", status_code=201)
async def create_job(data: JobCreate, jobs: JobService = Depends(get_job_service)):
    job = jobs.create(data.model_dump(mode="json"))
    return {"message": "Job created successfully", "job": serialize_doc(job)}


@router.put("/jobs/{job_id}")
async def update_job(job_id: str, data: JobUpdate, jobs: JobService = Depends(get_job_service)):
    job = jobs.update(job_id, data.model_dump(mode="json", exclude_unset=True, exclude_none=True))
    return {"message": "Job updated successfully", "job": serialize_doc(job)}


@router.delete("/jobs/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: str,
    jobs: JobService = Depends(get_job_service),
    applications: ApplicationService = Depends(get_application_service)
):
    """Delete a job posting. Cascades to applications."""
    job = jobs.require(job_id)
    jobs.delete(job["_id"])
    applications.delete_for_job(job["_id"])
    return MessageResponse(message="Job deleted successfully")


# ============================================================
# COMPANIES
# ============================================================

@router.get("/companies")
async def list_companies(
    search: Optional[str] = Query(None, description="Search in name and industry"),
    status: Optional[CompanyStatus] = Query(None),
    size: Optional[CompanySize] = Query(None),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    companies: CompanyService = Depends(get_company_service)
):
    docs, _ = companies.list(
        search=search,
        filters={"status": _enum_value(status), "size": _enum_value(size)},
        page=page,
        limit=limit
    )
    return serialize_docs(docs)


@router.get("/companies/{company_id}")
async def get_company(company_id: str, companies: CompanyService = Depends(get_company_service)):
    return serialize_doc(companies.require(company_id))


@router.post("/companies", status_code=201)
async def create_company(data: CompanyCreate, companies: CompanyService = Depends(get_company_service)):
    company = companies.create(data.model_dump(mode="json"))
    return {"message": "Company created successfully", "company": serialize_doc(company)}


@router.put("/companies/{company_id}")
async def update_company(
    company_id: str,
    data: CompanyUpdate,
    companies: CompanyService = Depends(get_company_service)
):
    company = companies.update(company_id, data.model_dump(mode="json", exclude_unset=True, exclude_none=True))
    return {"message": "Company updated successfully", "company": serialize_doc(company)}


@router.delete("/companies/{company_id}", response_model=MessageResponse)
async def delete_company(company_id: str, companies: CompanyService = Depends(get_company_service)):
    companies.delete(company_id)
    return MessageResponse(message="Company deleted successfully")


# ============================================================
# APPLICATIONS
# ============================================================

@router.get("/applications")
async def list_applications(
    status: Optional[ApplicationStatus] = Query(None),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    applications: ApplicationService = Depends(get_application_service)
):
    """Applications newest first, with job {title, company} and user {name, email} filled in."""
    docs, _ = applications.list(filters={"status": _enum_value(status)}, page=page, limit=limit)
    return applications.populate(docs)


@router.get("/applications/{application_id}")
async def get_application(
    application_id: str,
    applications: ApplicationService = Depends(get_application_service)
):
    return applications.populate([applications.require(application_id)])[0]


@router.post("/applications", status_code=201)
async def create_application(
    data: ApplicationCreate,
    applications: ApplicationService = Depends(get_application_service)
):
    application = applications.create_application(data.jobId, data.userId, data.status.value)
    return {"message": "Application created successfully", "application": serialize_doc(application)}


@router.put("/applications/{application_id}")
async def update_application(
    application_id: str,
    data: ApplicationUpdate,
    applications: ApplicationService = Depends(get_application_service)
):
    application = applications.update(application_id, {"status": data.status.value})
    return {"message": f"Status updated to '{data.status.value}'", "application": serialize_doc(application)}


@router.delete("/applications/{application_id}", response_model=MessageResponse)
async def delete_application(
    application_id: str,
    applications: ApplicationService = Depends(get_application_service)
):
    applications.delete(application_id)
    return MessageResponse(message="Application deleted successfully")
