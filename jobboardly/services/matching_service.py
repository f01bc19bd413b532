"""
AI matching orchestration.

Loads the records that go into a prompt, serializes them with the matching
request builder and runs the corresponding matching flow.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import structlog

from jobboardly.config import settings
from jobboardly.models.job import Job
from jobboardly.models.user import UserProfile
from jobboardly.services.ai.base import PromptProvider
from jobboardly.services.ai.matching import (
    CandidateMatchingInput,
    JobMatchingInput,
    candidate_matching_flow,
    job_matching_flow,
)
from jobboardly.services.job_service import JobService
from jobboardly.services.matching_builder import (
    format_candidate_profile,
    format_candidates,
    format_job_description,
    format_job_postings,
)
from jobboardly.services.user_service import UserService

logger = structlog.get_logger(__name__)


@dataclass
class JobMatchResult:
    relevant_job_ids: List[str]
    reasoning: str
    jobs: List[Job] = field(default_factory=list)


@dataclass
class CandidateMatchResult:
    relevant_candidate_ids: List[str]
    reasoning: str
    candidates: List[UserProfile] = field(default_factory=list)


class MatchingService:
    """Ranks approved jobs for a seeker and searchable candidates for a job."""

    def __init__(
        self,
        job_service: JobService,
        user_service: UserService,
        provider: PromptProvider,
    ):
        self.jobs = job_service
        self.users = user_service
        self.provider = provider

    async def match_jobs_for_seeker(
        self,
        seeker: UserProfile,
        max_jobs: Optional[int] = None,
    ) -> JobMatchResult:
        """
        Rank approved jobs against a job seeker's profile.

        Args:
            seeker: The job seeker's profile
            max_jobs: How many approved jobs go into the prompt
                (defaults to settings.MATCHING_MAX_JOBS)

        Returns:
            The model's ranked job IDs and reasoning, plus the matching Job
            records in ranked order (IDs the model invented are dropped there)
        """
        jobs = await self.jobs.get_approved_jobs(limit=max_jobs or settings.MATCHING_MAX_JOBS)
        if not jobs:
            logger.info("job_matching_skipped", user_id=seeker.id, reason="no_approved_jobs")
            return JobMatchResult(relevant_job_ids=[], reasoning="There are no approved jobs to match against.")

        output = await job_matching_flow.run(
            JobMatchingInput(
                job_seeker_profile=format_candidate_profile(seeker),
                job_postings=format_job_postings(jobs),
            ),
            self.provider,
        )

        by_id = {job.id: job for job in jobs}
        return JobMatchResult(
            relevant_job_ids=output.relevant_job_ids,
            reasoning=output.reasoning,
            jobs=[by_id[job_id] for job_id in output.relevant_job_ids if job_id in by_id],
        )

    async def match_candidates_for_job(
        self,
        job: Job,
        max_candidates: Optional[int] = None,
    ) -> CandidateMatchResult:
        """Rank searchable candidates against one job."""
        candidates = await self.users.get_searchable_candidates(
            limit=max_candidates or settings.MATCHING_MAX_CANDIDATES
        )
        if not candidates:
            logger.info("candidate_matching_skipped", job_id=job.id, reason="no_searchable_candidates")
            return CandidateMatchResult(
                relevant_candidate_ids=[],
                reasoning="There are no searchable candidate profiles to match against.",
            )

        output = await candidate_matching_flow.run(
            CandidateMatchingInput(
                job_description=format_job_description(job),
                candidate_profiles=format_candidates(candidates),
            ),
            self.provider,
        )

        by_id = {candidate.id: candidate for candidate in candidates}
        return CandidateMatchResult(
            relevant_candidate_ids=output.relevant_candidate_ids,
            reasoning=output.reasoning,
            candidates=[by_id[uid] for uid in output.relevant_candidate_ids if uid in by_id],
        )
