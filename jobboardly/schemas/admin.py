"""Admin moderation schemas."""

from typing import Optional

from pydantic import field_validator

from jobboardly.models.company import CompanyStatus
from jobboardly.models.job import JobStatus
from jobboardly.models.user import UserStatus
from jobboardly.schemas.base import CamelModel


class PlatformStats(CamelModel):
    total_job_seekers: int
    total_employers: int
    total_companies: int
    approved_companies: int
    pending_companies: int
    total_jobs: int
    approved_jobs: int
    pending_jobs: int
    total_applications: int


class JobStatusUpdate(CamelModel):
    status: JobStatus
    reason: Optional[str] = None

    @field_validator("status")
    @classmethod
    def moderation_target(cls, v: JobStatus) -> JobStatus:
        # Jobs return to pending only through an employer edit
        if v == JobStatus.PENDING:
            raise ValueError("status must be approved, rejected or suspended")
        return v


class JobStatusUpdateResponse(CamelModel):
    id: str
    status: JobStatus
    moderation_reason: Optional[str] = None


class CompanyStatusUpdate(CamelModel):
    """``active`` is accepted and stored as ``approved``."""

    status: CompanyStatus
    reason: Optional[str] = None


class CompanyStatusUpdateResponse(CamelModel):
    id: str
    status: CompanyStatus
    moderation_reason: Optional[str] = None


class UserStatusUpdate(CamelModel):
    status: UserStatus


class UserStatusUpdateResponse(CamelModel):
    id: str
    status: UserStatus
