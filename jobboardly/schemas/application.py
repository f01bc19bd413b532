"""Application request schemas."""

from typing import List, Optional

from pydantic import Field

from jobboardly.models.application import ApplicationAnswer, ApplicationStatus
from jobboardly.schemas.base import CamelModel


class ApplicationCreate(CamelModel):
    job_id: str
    answers: List[ApplicationAnswer] = Field(default_factory=list)


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus
    employer_notes: Optional[str] = None


class ApplicationStatusUpdateResponse(CamelModel):
    id: str
    status: ApplicationStatus
