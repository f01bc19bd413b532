"""Admin dashboard reads and moderation writes."""

from typing import Any, Dict, List, Optional, Union

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING, ReturnDocument

from jobboardly.core.exceptions import NotFoundError
from jobboardly.db.mongodb import APPLICATIONS, COMPANIES, JOBS, USERS, store_errors
from jobboardly.models.company import Company, CompanyStatus
from jobboardly.models.job import Job, JobStatus
from jobboardly.models.notification import NotificationType
from jobboardly.models.user import ADMIN_LIKE_ROLES, UserProfile, UserRole, UserStatus
from jobboardly.services.moderation import (
    CompanyStatusDecision,
    decide_company_status,
    decide_job_status,
    decide_user_status,
)
from jobboardly.services.notification_service import NotificationService
from jobboardly.utils.timestamps import utcnow

logger = structlog.get_logger(__name__)


class AdminService:
    """
    Persists moderation decisions.

    The decision itself (final status, moderation reason) comes from
    ``jobboardly.services.moderation``; this class only writes it, stamps
    ``updatedAt`` and notifies the affected owners.
    """

    def __init__(self, db: AsyncIOMotorDatabase, notifications: Optional[NotificationService] = None):
        self.db = db
        self.jobs = db[JOBS]
        self.companies = db[COMPANIES]
        self.users = db[USERS]
        self.applications = db[APPLICATIONS]
        self.notifications = notifications or NotificationService(db)

    # ==================== Dashboard ====================

    async def get_platform_stats(self) -> Dict[str, int]:
        """Platform-wide counts for the admin dashboard."""
        with store_errors("get_platform_stats"):
            return {
                "total_job_seekers": await self.users.count_documents({"role": UserRole.JOB_SEEKER.value}),
                "total_employers": await self.users.count_documents({"role": UserRole.EMPLOYER.value}),
                "total_companies": await self.companies.count_documents({}),
                "approved_companies": await self.companies.count_documents({"status": CompanyStatus.APPROVED.value}),
                "pending_companies": await self.companies.count_documents({"status": CompanyStatus.PENDING.value}),
                "total_jobs": await self.jobs.count_documents({}),
                "approved_jobs": await self.jobs.count_documents({"status": JobStatus.APPROVED.value}),
                "pending_jobs": await self.jobs.count_documents({"status": JobStatus.PENDING.value}),
                "total_applications": await self.applications.count_documents({}),
            }

    async def get_pending_jobs(self, limit: int = 100) -> List[Job]:
        with store_errors("get_pending_jobs"):
            cursor = self.jobs.find({"status": JobStatus.PENDING.value}).sort("createdAt", DESCENDING).limit(limit)
            documents = await cursor.to_list(length=limit)
        return [Job.from_document(doc) for doc in documents]

    async def get_pending_companies(self, limit: int = 100) -> List[Company]:
        """Pending companies with their job and application counts."""
        return await self._list_companies({"status": CompanyStatus.PENDING.value}, limit, "get_pending_companies")

    async def get_all_companies(self, limit: int = 500) -> List[Company]:
        """Every company, newest first, with job and application counts."""
        return await self._list_companies({}, limit, "get_all_companies")

    async def get_all_jobs(self, limit: int = 500) -> List[Job]:
        """Every job, newest first, with its applicant count."""
        with store_errors("get_all_jobs"):
            cursor = self.jobs.find({}).sort("createdAt", DESCENDING).limit(limit)
            documents = await cursor.to_list(length=limit)

            jobs = []
            for doc in documents:
                job = Job.from_document(doc)
                job.applicant_count = await self.applications.count_documents({"jobId": job.id})
                jobs.append(job)
        return jobs

    async def get_job_seekers(self, limit: int = 500) -> List[UserProfile]:
        with store_errors("get_job_seekers"):
            cursor = (
                self.users.find({"role": UserRole.JOB_SEEKER.value})
                .sort("createdAt", DESCENDING)
                .limit(limit)
            )
            documents = await cursor.to_list(length=limit)

        seekers = []
        for doc in documents:
            seeker = UserProfile.from_document(doc)
            seeker.jobs_applied_count = len(seeker.applied_job_ids)
            seekers.append(seeker)
        return seekers

    async def get_platform_users(self, limit: int = 500) -> List[UserProfile]:
        """Staff accounts (every admin-like role)."""
        roles = [role.value for role in ADMIN_LIKE_ROLES]
        with store_errors("get_platform_users"):
            cursor = self.users.find({"role": {"$in": roles}}).sort("createdAt", DESCENDING).limit(limit)
            documents = await cursor.to_list(length=limit)
        return [UserProfile.from_document(doc) for doc in documents]

    async def _list_companies(self, query: Dict[str, Any], limit: int, operation: str) -> List[Company]:
        with store_errors(operation):
            cursor = self.companies.find(query).sort("createdAt", DESCENDING).limit(limit)
            documents = await cursor.to_list(length=limit)

            companies = []
            for doc in documents:
                company = Company.from_document(doc)
                company.job_count = await self.jobs.count_documents({"companyId": company.id})
                company.application_count = await self.applications.count_documents({"companyId": company.id})
                companies.append(company)
        return companies

    # ==================== Moderation ====================

    async def update_job_status(
        self,
        job_id: str,
        status: Union[JobStatus, str],
        reason: Optional[str] = None,
    ) -> Optional[str]:
        """
        Apply a moderation decision to a job.

        Returns:
            The moderation reason that was persisted (None when cleared)
        """
        decision = decide_job_status(status, reason)

        with store_errors("update_job_status"):
            document = await self.jobs.find_one_and_update(
                {"_id": job_id},
                {"$set": {
                    "status": decision.status.value,
                    "moderationReason": decision.moderation_reason,
                    "updatedAt": utcnow(),
                }},
                return_document=ReturnDocument.AFTER,
            )
        if document is None:
            raise NotFoundError("Job", job_id)

        job = Job.from_document(document)
        logger.info(
            "job_status_updated",
            job_id=job_id,
            status=decision.status.value,
            moderation_reason=decision.moderation_reason,
        )
        await self._notify_job_owner(job, decision.status, decision.moderation_reason)
        return decision.moderation_reason

    async def update_company_status(
        self,
        company_id: str,
        intended: Union[CompanyStatus, str],
        reason: Optional[str] = None,
    ) -> CompanyStatusDecision:
        """Apply a moderation decision to a company ("active" is stored as "approved")."""
        decision = decide_company_status(intended, reason)

        with store_errors("update_company_status"):
            document = await self.companies.find_one_and_update(
                {"_id": company_id},
                {"$set": {
                    "status": decision.final_status.value,
                    "moderationReason": decision.moderation_reason,
                    "updatedAt": utcnow(),
                }},
                return_document=ReturnDocument.AFTER,
            )
        if document is None:
            raise NotFoundError("Company", company_id)

        company = Company.from_document(document)
        logger.info(
            "company_status_updated",
            company_id=company_id,
            intended=getattr(intended, "value", intended),
            status=decision.final_status.value,
            moderation_reason=decision.moderation_reason,
        )
        await self._notify_company_admins(company, decision)
        return decision

    async def update_user_status(self, user_id: str, status: Union[UserStatus, str]) -> None:
        decision = decide_user_status(status)

        with store_errors("update_user_status"):
            result = await self.users.update_one(
                {"_id": user_id},
                {"$set": {"status": decision.status.value, "updatedAt": utcnow()}},
            )
        if result.matched_count == 0:
            raise NotFoundError("User", user_id)

        logger.info("user_status_updated", user_id=user_id, status=decision.status.value)

    # ==================== Notifications ====================

    async def _notify_job_owner(self, job: Job, status: JobStatus, reason: Optional[str]) -> None:
        if status == JobStatus.APPROVED:
            await self.notifications.notify(
                job.posted_by_id,
                title="Job approved",
                message=f'Your job "{job.title}" is now live.',
                type=NotificationType.JOB_APPROVED,
                link=f"/jobs/{job.id}",
            )
        elif status == JobStatus.REJECTED:
            await self.notifications.notify(
                job.posted_by_id,
                title="Job rejected",
                message=f'Your job "{job.title}" was rejected. Reason: {reason}',
                type=NotificationType.JOB_REJECTED,
                link="/employer/posted-jobs",
            )

    async def _notify_company_admins(self, company: Company, decision: CompanyStatusDecision) -> None:
        kwargs: Dict[str, Any]
        if decision.final_status == CompanyStatus.APPROVED:
            kwargs = {
                "title": "Company approved",
                "message": f"{company.name} has been approved.",
                "type": NotificationType.COMPANY_APPROVED,
            }
        elif decision.final_status == CompanyStatus.REJECTED:
            kwargs = {
                "title": "Company rejected",
                "message": f"{company.name} was rejected. Reason: {decision.moderation_reason}",
                "type": NotificationType.COMPANY_REJECTED,
            }
        else:
            return

        for uid in company.admin_uids:
            await self.notifications.notify(uid, link=f"/companies/{company.id}", **kwargs)
