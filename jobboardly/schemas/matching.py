"""AI matching request/response schemas."""

from typing import List

from pydantic import Field

from jobboardly.models.job import Job
from jobboardly.models.user import UserProfile
from jobboardly.schemas.base import CamelModel


class CandidateMatchRequest(CamelModel):
    job_id: str


class JobMatchResponse(CamelModel):
    relevant_job_ids: List[str] = Field(..., alias="relevantJobIDs")
    reasoning: str
    jobs: List[Job] = Field(default_factory=list)


class CandidateMatchResponse(CamelModel):
    relevant_candidate_ids: List[str] = Field(..., alias="relevantCandidateIDs")
    reasoning: str
    candidates: List[UserProfile] = Field(default_factory=list)
