"""User profile schemas."""

from typing import List, Optional

from pydantic import Field

from jobboardly.models.user import EducationEntry, ExperienceEntry, JobSearchStatus, LanguageEntry
from jobboardly.schemas.base import CamelModel


class ProfileCreate(CamelModel):
    """Registration body. Identity and role come from the bearer token."""

    name: str = ""
    email: Optional[str] = None
    company_name: Optional[str] = None


class ProfileUpdate(CamelModel):
    """Self-service profile fields. Role, status and job lists are not editable here."""

    name: Optional[str] = Field(None, min_length=1)
    avatar_url: Optional[str] = None
    headline: Optional[str] = None
    mobile_number: Optional[str] = None
    skills: Optional[List[str]] = None
    experiences: Optional[List[ExperienceEntry]] = None
    educations: Optional[List[EducationEntry]] = None
    languages: Optional[List[LanguageEntry]] = None
    gender: Optional[str] = None
    home_state: Optional[str] = None
    home_city: Optional[str] = None
    total_years_experience: Optional[int] = Field(None, ge=0)
    total_months_experience: Optional[int] = Field(None, ge=0, le=11)
    current_ctc_value: Optional[float] = Field(None, alias="currentCTCValue", ge=0)
    current_ctc_confidential: Optional[bool] = Field(None, alias="currentCTCConfidential")
    expected_ctc_value: Optional[float] = Field(None, alias="expectedCTCValue", ge=0)
    expected_ctc_negotiable: Optional[bool] = Field(None, alias="expectedCTCNegotiable")
    preferred_locations: Optional[List[str]] = None
    job_search_status: Optional[JobSearchStatus] = None
    notice_period: Optional[str] = None
    portfolio_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    parsed_resume_text: Optional[str] = None
    is_profile_searchable: Optional[bool] = None
