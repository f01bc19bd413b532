"""Domain models."""

from jobboardly.models.application import (
    EMPLOYER_MANAGED_APPLICATION_STATUSES,
    Application,
    ApplicationAnswer,
    ApplicationStatus,
)
from jobboardly.models.company import Company, CompanyStatus
from jobboardly.models.job import Job, JobStatus, JobType, ScreeningQuestion
from jobboardly.models.notification import Notification, NotificationType
from jobboardly.models.user import (
    ADMIN_LIKE_ROLES,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    UserProfile,
    UserRole,
    UserStatus,
)

__all__ = [
    "ADMIN_LIKE_ROLES",
    "EMPLOYER_MANAGED_APPLICATION_STATUSES",
    "Application",
    "ApplicationAnswer",
    "ApplicationStatus",
    "Company",
    "CompanyStatus",
    "EducationEntry",
    "ExperienceEntry",
    "Job",
    "JobStatus",
    "JobType",
    "LanguageEntry",
    "Notification",
    "NotificationType",
    "ScreeningQuestion",
    "UserProfile",
    "UserRole",
    "UserStatus",
]
