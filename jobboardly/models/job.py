"""Job model."""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from jobboardly.models.base import DocumentModel
from jobboardly.utils.timestamps import normalize_timestamp


class JobStatus(str, Enum):
    """Moderation status of a job posting."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SUSPENDED = "suspended"


class JobType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    INTERNSHIP = "Internship"


class ExperienceLevel(str, Enum):
    ENTRY = "Entry-Level"
    MID = "Mid-Level"
    SENIOR = "Senior-Level"
    LEAD = "Lead"
    MANAGER = "Manager"
    EXECUTIVE = "Executive"


class ScreeningQuestionType(str, Enum):
    TEXT = "text"
    YES_NO = "yesNo"
    MULTIPLE_CHOICE = "multipleChoice"
    CHECKBOX_GROUP = "checkboxGroup"


class ScreeningQuestion(BaseModel):
    """Question an applicant answers when applying."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    id: str
    question_text: str
    type: ScreeningQuestionType
    options: Optional[List[str]] = None
    is_required: bool = False


class Job(DocumentModel):
    """Job posting. Belongs to exactly one company by reference."""

    title: str
    company: str = ""  # display name
    company_id: str
    location: str = ""
    type: Optional[JobType] = None
    is_remote: bool = False
    skills: List[str] = Field(default_factory=list)
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    posted_by_id: str
    status: JobStatus = JobStatus.PENDING
    moderation_reason: Optional[str] = None
    posted_date: Optional[datetime] = None

    # Details
    responsibilities: Optional[str] = None
    requirements: Optional[str] = None
    benefits: Optional[str] = None
    industry: Optional[str] = None
    department: Optional[str] = None
    experience_level: Optional[ExperienceLevel] = None
    min_experience_years: Optional[int] = None
    max_experience_years: Optional[int] = None
    education_qualification: Optional[str] = None
    screening_questions: List[ScreeningQuestion] = Field(default_factory=list)

    # Admin listings only
    applicant_count: Optional[int] = None

    @field_validator("posted_date", mode="before")
    @classmethod
    def normalize_posted_date(cls, v: Any) -> Optional[datetime]:
        return normalize_timestamp(v)

    @field_validator("skills", mode="before")
    @classmethod
    def dedupe_skills(cls, v: Any) -> Any:
        """Skills are a set; keep first occurrence order."""
        if v is None:
            return []
        if isinstance(v, (list, tuple, set)):
            return list(dict.fromkeys(v))
        return v
