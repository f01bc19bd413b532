"""
API Dependencies
Service wiring for API endpoints
"""

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from jobboardly.core.exceptions import PromptServiceError
from jobboardly.db.mongodb import get_database
from jobboardly.services.admin_service import AdminService
from jobboardly.services.ai.base import PromptProvider
from jobboardly.services.ai.factory import get_ai_provider
from jobboardly.services.application_service import ApplicationService
from jobboardly.services.company_service import CompanyService
from jobboardly.services.job_service import JobService
from jobboardly.services.matching_service import MatchingService
from jobboardly.services.notification_service import NotificationService
from jobboardly.services.user_service import UserService


def get_notification_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> NotificationService:
    return NotificationService(db)


def get_admin_service(
    db: AsyncIOMotorDatabase = Depends(get_database),
    notifications: NotificationService = Depends(get_notification_service),
) -> AdminService:
    return AdminService(db, notifications)


def get_application_service(
    db: AsyncIOMotorDatabase = Depends(get_database),
    notifications: NotificationService = Depends(get_notification_service),
) -> ApplicationService:
    return ApplicationService(db, notifications)


def get_job_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> JobService:
    return JobService(db)


def get_company_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> CompanyService:
    return CompanyService(db)


def get_user_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> UserService:
    return UserService(db)


def get_prompt_provider() -> PromptProvider:
    """Configured prompt provider; a missing configuration is a service failure."""
    try:
        return get_ai_provider()
    except ValueError as e:
        raise PromptServiceError(str(e)) from e


def get_matching_service(
    jobs: JobService = Depends(get_job_service),
    users: UserService = Depends(get_user_service),
    provider: PromptProvider = Depends(get_prompt_provider),
) -> MatchingService:
    return MatchingService(jobs, users, provider)
