"""Profile endpoints for the calling user."""
from typing import List

from fastapi import APIRouter, Depends, status

from jobboardly.api.deps import get_job_service, get_user_service
from jobboardly.core.security import (
    RequestContext,
    ensure_account_active,
    get_request_context,
    require_role,
)
from jobboardly.models.job import Job
from jobboardly.models.user import UserProfile, UserRole
from jobboardly.schemas.user import ProfileCreate, ProfileUpdate
from jobboardly.services.job_service import JobService
from jobboardly.services.user_service import UserService

router = APIRouter()


# ==================== Profile ====================

@router.post("/me", response_model=UserProfile, status_code=status.HTTP_201_CREATED)
async def register_profile(
    body: ProfileCreate,
    ctx: RequestContext = Depends(get_request_context),
    user_service: UserService = Depends(get_user_service),
):
    """Create the caller's profile; employers may register a new company."""
    return await user_service.create_user_profile(
        ctx.uid,
        email=body.email,
        name=body.name,
        role=ctx.role,
        company_name=body.company_name,
    )


@router.get("/me", response_model=UserProfile)
async def get_my_profile(
    ctx: RequestContext = Depends(get_request_context),
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.get_user(ctx.uid)


@router.patch("/me", response_model=UserProfile)
async def update_my_profile(
    body: ProfileUpdate,
    ctx: RequestContext = Depends(get_request_context),
    user_service: UserService = Depends(get_user_service),
):
    changes = body.model_dump(by_alias=True, exclude_unset=True, mode="json")
    await user_service.update_user_profile(ctx.uid, changes)
    return await user_service.get_user(ctx.uid)


# ==================== Job lists ====================

@router.get("/me/saved-jobs", response_model=List[Job])
async def get_saved_jobs(
    ctx: RequestContext = Depends(require_role(UserRole.JOB_SEEKER)),
    user_service: UserService = Depends(get_user_service),
    job_service: JobService = Depends(get_job_service),
):
    user = await user_service.get_user(ctx.uid)
    return await job_service.get_jobs_by_ids(user.saved_job_ids)


@router.get("/me/applied-jobs", response_model=List[Job])
async def get_applied_jobs(
    ctx: RequestContext = Depends(require_role(UserRole.JOB_SEEKER)),
    user_service: UserService = Depends(get_user_service),
    job_service: JobService = Depends(get_job_service),
):
    user = await user_service.get_user(ctx.uid)
    return await job_service.get_jobs_by_ids(user.applied_job_ids)


@router.put("/me/saved-jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def save_job(
    job_id: str,
    ctx: RequestContext = Depends(require_role(UserRole.JOB_SEEKER)),
    user_service: UserService = Depends(get_user_service),
    job_service: JobService = Depends(get_job_service),
):
    user = await user_service.get_user(ctx.uid)
    ensure_account_active(user)
    await job_service.get_job(job_id)
    await user_service.save_job(ctx.uid, job_id)


@router.delete("/me/saved-jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unsave_job(
    job_id: str,
    ctx: RequestContext = Depends(require_role(UserRole.JOB_SEEKER)),
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.get_user(ctx.uid)
    ensure_account_active(user)
    await user_service.unsave_job(ctx.uid, job_id)
