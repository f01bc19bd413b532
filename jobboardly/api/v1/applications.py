"""Job application endpoints."""
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from jobboardly.api.deps import (
    get_application_service,
    get_company_service,
    get_job_service,
    get_user_service,
)
from jobboardly.core.security import (
    RequestContext,
    ensure_account_active,
    ensure_company_member,
    get_request_context,
    require_role,
)
from jobboardly.models.application import EMPLOYER_MANAGED_APPLICATION_STATUSES, Application
from jobboardly.models.job import JobStatus
from jobboardly.models.user import UserRole
from jobboardly.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    ApplicationStatusUpdateResponse,
)
from jobboardly.services.application_service import ApplicationService
from jobboardly.services.company_service import CompanyService
from jobboardly.services.job_service import JobService
from jobboardly.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=Application, status_code=status.HTTP_201_CREATED)
async def apply_to_job(
    body: ApplicationCreate,
    ctx: RequestContext = Depends(require_role(UserRole.JOB_SEEKER)),
    application_service: ApplicationService = Depends(get_application_service),
    job_service: JobService = Depends(get_job_service),
    user_service: UserService = Depends(get_user_service),
):
    """Apply to an approved job as the calling job seeker."""
    job = await job_service.get_job(body.job_id)
    if job.status != JobStatus.APPROVED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="This job is not accepting applications",
        )

    applicant = await user_service.get_user(ctx.uid)
    ensure_account_active(applicant)
    return await application_service.create_application({
        "job_id": job.id,
        "job_title": job.title,
        "applicant_id": applicant.id,
        "applicant_name": applicant.name,
        "applicant_avatar_url": applicant.avatar_url,
        "applicant_headline": applicant.headline,
        "company_id": job.company_id,
        "posted_by_id": job.posted_by_id,
        "answers": body.answers,
    })


@router.get("/me", response_model=Dict[str, Application])
async def get_my_applications(
    ctx: RequestContext = Depends(get_request_context),
    application_service: ApplicationService = Depends(get_application_service),
):
    """The caller's applications keyed by jobId."""
    return await application_service.get_user_applications(ctx.uid)


@router.get("/job/{job_id}", response_model=List[Application])
async def get_job_applicants(
    job_id: str,
    ctx: RequestContext = Depends(get_request_context),
    application_service: ApplicationService = Depends(get_application_service),
    job_service: JobService = Depends(get_job_service),
    company_service: CompanyService = Depends(get_company_service),
):
    job = await job_service.get_job(job_id)
    company = await company_service.get_company(job.company_id)
    ensure_company_member(ctx, company)
    return await application_service.get_applications_for_job(job_id)


@router.post("/job/{job_id}/withdraw", response_model=Application)
async def withdraw_application(
    job_id: str,
    ctx: RequestContext = Depends(require_role(UserRole.JOB_SEEKER)),
    application_service: ApplicationService = Depends(get_application_service),
    user_service: UserService = Depends(get_user_service),
):
    """Withdraw the caller's application while it is still "Applied"."""
    applicant = await user_service.get_user(ctx.uid)
    ensure_account_active(applicant)
    return await application_service.withdraw_application(job_id, ctx.uid)


@router.patch("/{application_id}/status", response_model=ApplicationStatusUpdateResponse)
async def update_application_status(
    application_id: str,
    body: ApplicationStatusUpdate,
    ctx: RequestContext = Depends(get_request_context),
    application_service: ApplicationService = Depends(get_application_service),
    company_service: CompanyService = Depends(get_company_service),
):
    """Employer status change; notes are kept unless new ones are sent."""
    if body.status not in EMPLOYER_MANAGED_APPLICATION_STATUSES:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Employers cannot set status {body.status.value}",
        )

    application = await application_service.get_application(application_id)
    company = await company_service.get_company(application.company_id)
    ensure_company_member(ctx, company)

    await application_service.update_application_status(application_id, body.status, body.employer_notes)
    return ApplicationStatusUpdateResponse(id=application_id, status=body.status)
