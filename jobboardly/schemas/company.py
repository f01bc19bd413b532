"""Company profile schemas."""

from typing import List, Optional

from pydantic import Field

from jobboardly.models.company import Company
from jobboardly.models.job import Job
from jobboardly.schemas.base import CamelModel


class CompanyProfileUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    banner_image_url: Optional[str] = None


class RecruiterSummary(CamelModel):
    id: str
    name: str
    avatar_url: Optional[str] = None
    headline: Optional[str] = None


class CompanyDetail(CamelModel):
    """Company page: profile, recruiters and open jobs."""

    company: Company
    recruiters: List[RecruiterSummary] = Field(default_factory=list)
    jobs: List[Job] = Field(default_factory=list)
