"""Company page and profile endpoints."""
from fastapi import APIRouter, Depends

from jobboardly.api.deps import get_company_service, get_job_service
from jobboardly.core.exceptions import NotFoundError
from jobboardly.core.security import (
    RequestContext,
    ensure_company_admin,
    get_request_context,
    require_role,
)
from jobboardly.models.company import Company, CompanyStatus
from jobboardly.models.user import UserRole
from jobboardly.schemas.company import CompanyDetail, CompanyProfileUpdate, RecruiterSummary
from jobboardly.services.company_service import CompanyService
from jobboardly.services.job_service import JobService

router = APIRouter()


@router.get("/{company_id}", response_model=CompanyDetail)
async def get_company_page(
    company_id: str,
    ctx: RequestContext = Depends(get_request_context),
    company_service: CompanyService = Depends(get_company_service),
    job_service: JobService = Depends(get_job_service),
):
    """Company profile with its recruiters and approved jobs."""
    company = await company_service.get_company(company_id)
    if company.status != CompanyStatus.APPROVED and not ctx.is_admin_like and not company.is_member(ctx.uid):
        raise NotFoundError("Company", company_id)

    recruiters = await company_service.get_company_recruiters(company.recruiter_uids)
    jobs = await job_service.get_jobs_by_company(company_id)
    return CompanyDetail(
        company=company,
        recruiters=[
            RecruiterSummary(id=r.id, name=r.name, avatar_url=r.avatar_url, headline=r.headline)
            for r in recruiters
        ],
        jobs=jobs,
    )


@router.patch("/{company_id}", response_model=Company)
async def update_company_profile(
    company_id: str,
    body: CompanyProfileUpdate,
    ctx: RequestContext = Depends(require_role(UserRole.EMPLOYER)),
    company_service: CompanyService = Depends(get_company_service),
):
    """Edit the company profile. The company goes back to moderation."""
    company = await company_service.get_company(company_id)
    ensure_company_admin(ctx, company)

    changes = body.model_dump(by_alias=True, exclude_unset=True)
    return await company_service.update_company_profile(company_id, changes)
