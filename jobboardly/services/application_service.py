"""Job applications."""

from typing import Any, Dict, List, Mapping, Optional, Union
from uuid import uuid4

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from jobboardly.core.exceptions import (
    ApplicationStateError,
    DuplicateApplicationError,
    NotFoundError,
    StoreUnavailableError,
)
from jobboardly.db.mongodb import APPLICATIONS, USERS, store_errors
from jobboardly.models.application import Application, ApplicationStatus
from jobboardly.models.notification import NotificationType
from jobboardly.services.notification_service import NotificationService
from jobboardly.utils.timestamps import utcnow

logger = structlog.get_logger(__name__)


class ApplicationService:
    """
    Application writes and reads.

    One application exists per (jobId, applicantId); the unique index on the
    collection enforces it. Every write stamps ``updatedAt``.
    """

    def __init__(self, db: AsyncIOMotorDatabase, notifications: Optional[NotificationService] = None):
        self.collection = db[APPLICATIONS]
        self.users = db[USERS]
        self.notifications = notifications or NotificationService(db)

    async def create_application(self, data: Mapping[str, Any]) -> Application:
        """
        Create an application and record the job in the applicant's
        ``appliedJobIds``.

        Args:
            data: Application fields (jobId, jobTitle, applicantId,
                applicantName, companyId, postedById, answers, ...)

        Returns:
            The stored Application with status "Applied"

        Raises:
            DuplicateApplicationError: the applicant already applied to the job
        """
        now = utcnow()
        application = Application.model_validate({
            **data,
            "id": str(uuid4()),
            "status": ApplicationStatus.APPLIED,
            "applied_at": now,
            "updated_at": now,
        })

        try:
            with store_errors("create_application"):
                await self.collection.insert_one(application.to_document())
        except DuplicateKeyError as e:
            raise DuplicateApplicationError(
                f"User {application.applicant_id} already applied to job {application.job_id}"
            ) from e

        try:
            with store_errors("record_applied_job"):
                await self.users.update_one(
                    {"_id": application.applicant_id},
                    {"$addToSet": {"appliedJobIds": application.job_id}, "$set": {"updatedAt": now}},
                )
        except StoreUnavailableError:
            # No application without the matching appliedJobIds entry
            logger.error("record_applied_job_failed", application_id=application.id)
            with store_errors("rollback_application"):
                await self.collection.delete_one({"_id": application.id})
            raise

        logger.info(
            "application_created",
            application_id=application.id,
            job_id=application.job_id,
            applicant_id=application.applicant_id,
        )

        await self.notifications.notify(
            application.posted_by_id,
            title="New application",
            message=f"{application.applicant_name or 'A candidate'} applied to {application.job_title or 'your job'}",
            type=NotificationType.NEW_APPLICATION,
            link=f"/employer/jobs/{application.job_id}/applicants",
        )
        return application

    async def get_application(self, application_id: str) -> Application:
        with store_errors("get_application"):
            document = await self.collection.find_one({"_id": application_id})
        if document is None:
            raise NotFoundError("Application", application_id)
        return Application.from_document(document)

    async def update_application_status(
        self,
        application_id: str,
        status: Union[ApplicationStatus, str],
        notes: Optional[str] = None,
    ) -> None:
        """Set the status; employer notes are only written when given."""
        status = ApplicationStatus(status)
        update: Dict[str, Any] = {"status": status.value, "updatedAt": utcnow()}
        if notes is not None:
            update["employerNotes"] = notes

        with store_errors("update_application_status"):
            document = await self.collection.find_one_and_update(
                {"_id": application_id},
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )
        if document is None:
            raise NotFoundError("Application", application_id)

        application = Application.from_document(document)
        logger.info("application_status_updated", application_id=application_id, status=status.value)

        await self.notifications.notify(
            application.applicant_id,
            title="Application status updated",
            message=f"Your application for {application.job_title or 'a job'} is now {status.value}",
            type=NotificationType.APPLICATION_STATUS_UPDATE,
            link="/my-applications",
        )

    async def withdraw_application(self, job_id: str, applicant_id: str) -> Application:
        """
        Withdraw the applicant's application to a job.

        Raises:
            NotFoundError: the applicant has not applied to the job
            ApplicationStateError: the employer already acted on it (status is
                no longer "Applied")
        """
        query = {"jobId": job_id, "applicantId": applicant_id}
        with store_errors("withdraw_application"):
            document = await self.collection.find_one_and_update(
                {**query, "status": ApplicationStatus.APPLIED.value},
                {"$set": {"status": ApplicationStatus.WITHDRAWN_BY_APPLICANT.value, "updatedAt": utcnow()}},
                return_document=ReturnDocument.AFTER,
            )
            if document is None:
                current = await self.collection.find_one(query)

        if document is None:
            if current is None:
                raise NotFoundError("Application", f"{applicant_id}/{job_id}")
            raise ApplicationStateError(
                f"Cannot withdraw application with status: {current['status']}"
            )

        logger.info("application_withdrawn", job_id=job_id, applicant_id=applicant_id)
        return Application.from_document(document)

    async def get_applications_for_job(self, job_id: str) -> List[Application]:
        with store_errors("get_applications_for_job"):
            cursor = self.collection.find({"jobId": job_id}).sort("appliedAt", DESCENDING)
            documents = await cursor.to_list(length=None)
        return [Application.from_document(doc) for doc in documents]

    async def get_user_applications(self, user_id: str) -> Dict[str, Application]:
        """The user's applications keyed by jobId."""
        with store_errors("get_user_applications"):
            cursor = self.collection.find({"applicantId": user_id})
            documents = await cursor.to_list(length=None)

        applications = [Application.from_document(doc) for doc in documents]
        return {app.job_id: app for app in applications}
