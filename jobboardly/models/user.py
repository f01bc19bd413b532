"""User profile model."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jobboardly.models.base import DocumentModel


class UserRole(str, Enum):
    """Platform roles."""

    JOB_SEEKER = "jobSeeker"
    EMPLOYER = "employer"
    ADMIN = "admin"
    SUPER_ADMIN = "superAdmin"
    MODERATOR = "moderator"
    SUPPORT_AGENT = "supportAgent"
    DATA_ANALYST = "dataAnalyst"
    COMPLIANCE_OFFICER = "complianceOfficer"
    SYSTEM_MONITOR = "systemMonitor"


ADMIN_LIKE_ROLES = [
    UserRole.ADMIN,
    UserRole.SUPER_ADMIN,
    UserRole.MODERATOR,
    UserRole.SUPPORT_AGENT,
    UserRole.DATA_ANALYST,
    UserRole.COMPLIANCE_OFFICER,
    UserRole.SYSTEM_MONITOR,
]


class UserStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    DELETED = "deleted"


class JobSearchStatus(str, Enum):
    ACTIVELY_LOOKING = "activelyLooking"
    OPEN_TO_OPPORTUNITIES = "openToOpportunities"
    NOT_LOOKING = "notLooking"


class _Entry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ExperienceEntry(_Entry):
    """One work-experience record."""

    id: Optional[str] = None
    company_name: Optional[str] = None
    job_role: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    currently_working: bool = False
    description: Optional[str] = None
    annual_ctc: Optional[float] = Field(None, alias="annualCTC")


class EducationEntry(_Entry):
    """One education record."""

    id: Optional[str] = None
    level: Optional[str] = None  # Post Graduate, Graduate, Schooling (XII), ...
    degree_name: Optional[str] = None
    institute_name: Optional[str] = None
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    specialization: Optional[str] = None
    course_type: Optional[str] = None  # Full Time, Part Time, Distance Learning
    is_most_relevant: Optional[bool] = None
    description: Optional[str] = None


class LanguageEntry(_Entry):
    """Language with read/write/speak flags."""

    id: Optional[str] = None
    language_name: Optional[str] = None
    proficiency: Optional[str] = None  # Beginner, Intermediate, Advanced, Native
    can_read: bool = False
    can_write: bool = False
    can_speak: bool = False


class UserProfile(DocumentModel):
    """Platform user: job seeker, employer or admin-like staff."""

    role: UserRole
    status: UserStatus = UserStatus.ACTIVE
    email: Optional[str] = None
    name: str = ""
    avatar_url: Optional[str] = None

    # Employer
    company_id: Optional[str] = None

    # Job seeker
    headline: Optional[str] = None
    mobile_number: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    applied_job_ids: List[str] = Field(default_factory=list)
    saved_job_ids: List[str] = Field(default_factory=list)
    experiences: List[ExperienceEntry] = Field(default_factory=list)
    educations: List[EducationEntry] = Field(default_factory=list)
    languages: List[LanguageEntry] = Field(default_factory=list)
    gender: Optional[str] = None
    home_state: Optional[str] = None
    home_city: Optional[str] = None
    total_years_experience: Optional[int] = None
    total_months_experience: Optional[int] = None
    current_ctc_value: Optional[float] = Field(None, alias="currentCTCValue")
    current_ctc_confidential: Optional[bool] = Field(None, alias="currentCTCConfidential")
    expected_ctc_value: Optional[float] = Field(None, alias="expectedCTCValue")
    expected_ctc_negotiable: Optional[bool] = Field(None, alias="expectedCTCNegotiable")
    preferred_locations: List[str] = Field(default_factory=list)
    job_search_status: Optional[JobSearchStatus] = None
    notice_period: Optional[str] = None
    portfolio_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    parsed_resume_text: Optional[str] = None
    is_profile_searchable: bool = False

    # Admin listings only
    jobs_applied_count: Optional[int] = None

    @property
    def is_admin_like(self) -> bool:
        return self.role in {r.value for r in ADMIN_LIKE_ROLES}
