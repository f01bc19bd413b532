"""Job posting endpoints."""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from jobboardly.api.deps import get_company_service, get_job_service, get_user_service
from jobboardly.core.exceptions import NotFoundError, PermissionDeniedError
from jobboardly.core.security import (
    RequestContext,
    ensure_account_active,
    ensure_company_member,
    get_request_context,
    require_role,
)
from jobboardly.models.job import Job, JobStatus
from jobboardly.models.user import UserRole
from jobboardly.schemas.job import JobCreate, JobUpdate
from jobboardly.services.company_service import CompanyService
from jobboardly.services.job_service import JobService
from jobboardly.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[Job])
async def list_approved_jobs(
    limit: int = Query(50, ge=1, le=200),
    ctx: RequestContext = Depends(get_request_context),
    job_service: JobService = Depends(get_job_service),
):
    return await job_service.get_approved_jobs(limit=limit)


@router.post("", response_model=Job, status_code=status.HTTP_201_CREATED)
async def post_job(
    body: JobCreate,
    ctx: RequestContext = Depends(require_role(UserRole.EMPLOYER)),
    job_service: JobService = Depends(get_job_service),
    company_service: CompanyService = Depends(get_company_service),
    user_service: UserService = Depends(get_user_service),
):
    """Post a job for the employer's company. It waits for moderation."""
    employer = await user_service.get_user(ctx.uid)
    ensure_account_active(employer)
    if not employer.company_id:
        raise PermissionDeniedError("Register a company before posting jobs")

    company = await company_service.get_company(employer.company_id)
    ensure_company_member(ctx, company)

    return await job_service.create_job({
        **body.model_dump(exclude_none=True),
        "company": company.name,
        "company_id": company.id,
        "posted_by_id": ctx.uid,
    })


@router.get("/company/{company_id}", response_model=List[Job])
async def list_company_jobs(
    company_id: str,
    ctx: RequestContext = Depends(get_request_context),
    job_service: JobService = Depends(get_job_service),
):
    """Approved jobs of one company."""
    return await job_service.get_jobs_by_company(company_id)


@router.get("/{job_id}", response_model=Job)
async def get_job(
    job_id: str,
    ctx: RequestContext = Depends(get_request_context),
    job_service: JobService = Depends(get_job_service),
    company_service: CompanyService = Depends(get_company_service),
):
    """Unapproved jobs are visible to their company and to staff only."""
    job = await job_service.get_job(job_id)
    if job.status != JobStatus.APPROVED and not ctx.is_admin_like:
        company = await company_service.get_company(job.company_id)
        if not company.is_member(ctx.uid):
            raise NotFoundError("Job", job_id)
    return job


@router.patch("/{job_id}", response_model=Job)
async def edit_job(
    job_id: str,
    body: JobUpdate,
    ctx: RequestContext = Depends(require_role(UserRole.EMPLOYER)),
    job_service: JobService = Depends(get_job_service),
    company_service: CompanyService = Depends(get_company_service),
):
    """Edit a posted job. The job goes back to moderation."""
    job = await job_service.get_job(job_id)
    company = await company_service.get_company(job.company_id)
    ensure_company_member(ctx, company)

    changes = body.model_dump(by_alias=True, exclude_unset=True, mode="json")
    return await job_service.update_job(job_id, changes)
