"""Tests for MatchingService orchestration."""

import json
from unittest.mock import AsyncMock

import pytest

from jobboardly.core.exceptions import ResponseFormatError
from jobboardly.models.job import Job
from jobboardly.models.user import UserProfile
from jobboardly.services.matching_service import MatchingService


@pytest.fixture
def provider():
    provider = AsyncMock()
    provider.name = "fake"
    return provider


@pytest.fixture
def job_service():
    return AsyncMock()


@pytest.fixture
def user_service():
    return AsyncMock()


@pytest.fixture
def matching_service(job_service, user_service, provider):
    return MatchingService(job_service, user_service, provider)


class TestJobMatching:

    @pytest.mark.asyncio
    async def test_ranked_jobs_follow_model_order(self, matching_service, job_service, provider, seeker, job):
        second = Job(id="job-2", title="Data Engineer", company_id="c", posted_by_id="p")
        job_service.get_approved_jobs.return_value = [job, second]
        provider.generate.return_value = json.dumps(
            {"relevantJobIDs": ["job-2", "ghost", "job-1"], "reasoning": "Python fit"}
        )

        result = await matching_service.match_jobs_for_seeker(seeker, max_jobs=5)

        assert result.relevant_job_ids == ["job-2", "ghost", "job-1"]
        assert [j.id for j in result.jobs] == ["job-2", "job-1"]
        job_service.get_approved_jobs.assert_awaited_once_with(limit=5)

        prompt = provider.generate.call_args.args[0]
        assert "Candidate UID: seeker-1" in prompt
        assert "Job ID: job-1" in prompt and "Job ID: job-2" in prompt

    @pytest.mark.asyncio
    async def test_no_jobs_skips_provider(self, matching_service, job_service, provider, seeker):
        job_service.get_approved_jobs.return_value = []

        result = await matching_service.match_jobs_for_seeker(seeker)

        assert result.relevant_job_ids == []
        provider.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_bad_model_response(self, matching_service, job_service, provider, seeker, job):
        job_service.get_approved_jobs.return_value = [job]
        provider.generate.return_value = "I think job-1 is great"

        with pytest.raises(ResponseFormatError):
            await matching_service.match_jobs_for_seeker(seeker)


class TestCandidateMatching:

    @pytest.mark.asyncio
    async def test_ranked_candidates(self, matching_service, user_service, provider, seeker, job):
        other = UserProfile(id="seeker-2", role="jobSeeker", name="Ravi", is_profile_searchable=True)
        user_service.get_searchable_candidates.return_value = [seeker, other]
        provider.generate.return_value = json.dumps(
            {"relevantCandidateIDs": ["seeker-2", "seeker-1"], "reasoning": "experience"}
        )

        result = await matching_service.match_candidates_for_job(job)

        assert [c.id for c in result.candidates] == ["seeker-2", "seeker-1"]
        prompt = provider.generate.call_args.args[0]
        assert "Job ID: job-1" in prompt
        assert "Candidate UID: seeker-2" in prompt

    @pytest.mark.asyncio
    async def test_no_candidates_skips_provider(self, matching_service, user_service, provider, job):
        user_service.get_searchable_candidates.return_value = []

        result = await matching_service.match_candidates_for_job(job)

        assert result.candidates == []
        provider.generate.assert_not_called()
