"""Company model."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from jobboardly.models.base import DocumentModel


class CompanyStatus(str, Enum):
    """Company moderation status.

    ACTIVE is accepted as an admin intent only; it is persisted as APPROVED.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SUSPENDED = "suspended"
    DELETED = "deleted"
    ACTIVE = "active"


class Company(DocumentModel):
    """Company profile. Owns the admin/recruiter UID sets used for authorization."""

    name: str
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    banner_image_url: Optional[str] = None
    admin_uids: List[str] = Field(default_factory=list)
    recruiter_uids: List[str] = Field(default_factory=list)
    status: CompanyStatus = CompanyStatus.PENDING
    moderation_reason: Optional[str] = None

    # Admin listings only
    job_count: Optional[int] = None
    application_count: Optional[int] = None

    def is_member(self, uid: str) -> bool:
        """True if uid administers or recruits for this company."""
        return uid in self.admin_uids or uid in self.recruiter_uids

    def __repr__(self):
        return f"<Company {self.name}>"
