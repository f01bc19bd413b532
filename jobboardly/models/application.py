"""Application model."""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from jobboardly.models.base import DocumentModel
from jobboardly.utils.timestamps import normalize_timestamp


class ApplicationStatus(str, Enum):
    """Application lifecycle states."""

    APPLIED = "Applied"
    REVIEWED = "Reviewed"
    INTERVIEWING = "Interviewing"
    OFFER_MADE = "Offer Made"
    HIRED = "Hired"
    REJECTED_BY_COMPANY = "Rejected By Company"
    WITHDRAWN_BY_APPLICANT = "Withdrawn by Applicant"


# Statuses an employer may set; withdrawal belongs to the applicant
EMPLOYER_MANAGED_APPLICATION_STATUSES = [
    ApplicationStatus.APPLIED,
    ApplicationStatus.REVIEWED,
    ApplicationStatus.INTERVIEWING,
    ApplicationStatus.OFFER_MADE,
    ApplicationStatus.HIRED,
    ApplicationStatus.REJECTED_BY_COMPANY,
]


class ApplicationAnswer(BaseModel):
    """Answer to a job's screening question."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    question_id: str
    question_text: str
    answer: Union[bool, str, List[str]]


class Application(DocumentModel):
    """Join entity between a job seeker and a job (one per pair)."""

    job_id: str
    job_title: str = ""
    applicant_id: str
    applicant_name: str = ""
    applicant_avatar_url: Optional[str] = None
    applicant_headline: Optional[str] = None
    company_id: str
    posted_by_id: str
    status: ApplicationStatus = ApplicationStatus.APPLIED
    applied_at: Optional[datetime] = None
    employer_notes: Optional[str] = None
    answers: List[ApplicationAnswer] = Field(default_factory=list)

    @field_validator("applied_at", mode="before")
    @classmethod
    def normalize_applied_at(cls, v: Any) -> Optional[datetime]:
        return normalize_timestamp(v)

    def __repr__(self):
        return f"<Application {self.applicant_id} -> {self.job_id}>"
