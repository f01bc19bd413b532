"""Admin API endpoints for dashboard stats and content moderation."""
from typing import List

from fastapi import APIRouter, Depends

from jobboardly.api.deps import get_admin_service, get_user_service
from jobboardly.core.security import (
    RequestContext,
    ensure_can_change_user_status,
    ensure_can_moderate_company,
    ensure_can_moderate_job,
    require_admin_like,
)
from jobboardly.models.company import Company
from jobboardly.models.job import Job
from jobboardly.models.user import UserProfile
from jobboardly.schemas.admin import (
    CompanyStatusUpdate,
    CompanyStatusUpdateResponse,
    JobStatusUpdate,
    JobStatusUpdateResponse,
    PlatformStats,
    UserStatusUpdate,
    UserStatusUpdateResponse,
)
from jobboardly.services.admin_service import AdminService
from jobboardly.services.user_service import UserService

router = APIRouter()


# ==================== Dashboard ====================

@router.get("/stats", response_model=PlatformStats)
async def get_platform_stats(
    ctx: RequestContext = Depends(require_admin_like),
    admin_service: AdminService = Depends(get_admin_service),
):
    """Platform-wide counts."""
    return await admin_service.get_platform_stats()


@router.get("/jobs/pending", response_model=List[Job])
async def get_pending_jobs(
    ctx: RequestContext = Depends(require_admin_like),
    admin_service: AdminService = Depends(get_admin_service),
):
    return await admin_service.get_pending_jobs()


@router.get("/companies/pending", response_model=List[Company])
async def get_pending_companies(
    ctx: RequestContext = Depends(require_admin_like),
    admin_service: AdminService = Depends(get_admin_service),
):
    return await admin_service.get_pending_companies()


@router.get("/jobs", response_model=List[Job])
async def get_all_jobs(
    ctx: RequestContext = Depends(require_admin_like),
    admin_service: AdminService = Depends(get_admin_service),
):
    """Every job with its applicant count."""
    return await admin_service.get_all_jobs()


@router.get("/companies", response_model=List[Company])
async def get_all_companies(
    ctx: RequestContext = Depends(require_admin_like),
    admin_service: AdminService = Depends(get_admin_service),
):
    return await admin_service.get_all_companies()


@router.get("/job-seekers", response_model=List[UserProfile])
async def get_job_seekers(
    ctx: RequestContext = Depends(require_admin_like),
    admin_service: AdminService = Depends(get_admin_service),
):
    return await admin_service.get_job_seekers()


@router.get("/platform-users", response_model=List[UserProfile])
async def get_platform_users(
    ctx: RequestContext = Depends(require_admin_like),
    admin_service: AdminService = Depends(get_admin_service),
):
    """Staff accounts."""
    return await admin_service.get_platform_users()


# ==================== Moderation ====================

@router.patch("/jobs/{job_id}/status", response_model=JobStatusUpdateResponse)
async def update_job_status(
    job_id: str,
    body: JobStatusUpdate,
    ctx: RequestContext = Depends(require_admin_like),
    admin_service: AdminService = Depends(get_admin_service),
):
    """Approve, reject or suspend a job."""
    ensure_can_moderate_job(ctx, body.status)
    moderation_reason = await admin_service.update_job_status(job_id, body.status, body.reason)
    return JobStatusUpdateResponse(id=job_id, status=body.status, moderation_reason=moderation_reason)


@router.patch("/companies/{company_id}/status", response_model=CompanyStatusUpdateResponse)
async def update_company_status(
    company_id: str,
    body: CompanyStatusUpdate,
    ctx: RequestContext = Depends(require_admin_like),
    admin_service: AdminService = Depends(get_admin_service),
):
    """Change a company's status. The response carries the status actually stored."""
    ensure_can_moderate_company(ctx)
    decision = await admin_service.update_company_status(company_id, body.status, body.reason)
    return CompanyStatusUpdateResponse(
        id=company_id,
        status=decision.final_status,
        moderation_reason=decision.moderation_reason,
    )


@router.patch("/users/{user_id}/status", response_model=UserStatusUpdateResponse)
async def update_user_status(
    user_id: str,
    body: UserStatusUpdate,
    ctx: RequestContext = Depends(require_admin_like),
    admin_service: AdminService = Depends(get_admin_service),
    user_service: UserService = Depends(get_user_service),
):
    target = await user_service.get_user(user_id)
    ensure_can_change_user_status(ctx, target)
    await admin_service.update_user_status(user_id, body.status)
    return UserStatusUpdateResponse(id=user_id, status=body.status)
