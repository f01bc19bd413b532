"""AI matching endpoints."""
from fastapi import APIRouter, Depends

from jobboardly.api.deps import (
    get_company_service,
    get_job_service,
    get_matching_service,
    get_user_service,
)
from jobboardly.core.security import (
    RequestContext,
    ensure_can_match_candidates,
    ensure_can_match_jobs,
    ensure_company_member,
    get_request_context,
)
from jobboardly.schemas.matching import (
    CandidateMatchRequest,
    CandidateMatchResponse,
    JobMatchResponse,
)
from jobboardly.services.company_service import CompanyService
from jobboardly.services.job_service import JobService
from jobboardly.services.matching_service import MatchingService
from jobboardly.services.user_service import UserService

router = APIRouter()


@router.post("/jobs", response_model=JobMatchResponse)
async def match_jobs(
    ctx: RequestContext = Depends(get_request_context),
    user_service: UserService = Depends(get_user_service),
    matching_service: MatchingService = Depends(get_matching_service),
):
    """Rank approved jobs for the calling job seeker's profile."""
    ensure_can_match_jobs(ctx)
    seeker = await user_service.get_user(ctx.uid)
    result = await matching_service.match_jobs_for_seeker(seeker)
    return JobMatchResponse(
        relevant_job_ids=result.relevant_job_ids,
        reasoning=result.reasoning,
        jobs=result.jobs,
    )


@router.post("/candidates", response_model=CandidateMatchResponse)
async def match_candidates(
    body: CandidateMatchRequest,
    ctx: RequestContext = Depends(get_request_context),
    job_service: JobService = Depends(get_job_service),
    company_service: CompanyService = Depends(get_company_service),
    matching_service: MatchingService = Depends(get_matching_service),
):
    """Rank searchable candidates for one of the employer's jobs."""
    ensure_can_match_candidates(ctx)
    job = await job_service.get_job(body.job_id)
    if not ctx.is_admin_like:
        company = await company_service.get_company(job.company_id)
        ensure_company_member(ctx, company)

    result = await matching_service.match_candidates_for_job(job)
    return CandidateMatchResponse(
        relevant_candidate_ids=result.relevant_candidate_ids,
        reasoning=result.reasoning,
        candidates=result.candidates,
    )
