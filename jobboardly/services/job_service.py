"""Job postings."""

from typing import Any, List, Mapping
from uuid import uuid4

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING, ReturnDocument

from jobboardly.core.exceptions import NotFoundError
from jobboardly.db.mongodb import JOBS, store_errors
from jobboardly.models.job import Job, JobStatus
from jobboardly.utils.timestamps import utcnow

logger = structlog.get_logger(__name__)


class JobService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[JOBS]

    async def create_job(self, data: Mapping[str, Any]) -> Job:
        """
        Store a new job posting. New jobs always wait for moderation.

        Args:
            data: Job fields (title, company, companyId, postedById, ...)

        Returns:
            The stored Job with status "pending"
        """
        now = utcnow()
        job = Job.model_validate({
            **data,
            "id": str(uuid4()),
            "status": JobStatus.PENDING,
            "moderation_reason": None,
            "posted_date": now,
            "created_at": now,
            "updated_at": now,
        })

        with store_errors("create_job"):
            await self.collection.insert_one(job.to_document())

        logger.info("job_created", job_id=job.id, company_id=job.company_id, posted_by_id=job.posted_by_id)
        return job

    async def update_job(self, job_id: str, changes: Mapping[str, Any]) -> Job:
        """Apply an employer edit. The job goes back to "pending" for review."""
        update = {
            **changes,
            "status": JobStatus.PENDING.value,
            "moderationReason": None,
            "updatedAt": utcnow(),
        }
        with store_errors("update_job"):
            document = await self.collection.find_one_and_update(
                {"_id": job_id},
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )
        if document is None:
            raise NotFoundError("Job", job_id)

        logger.info("job_updated", job_id=job_id, fields=sorted(changes))
        return Job.from_document(document)

    async def get_job(self, job_id: str) -> Job:
        with store_errors("get_job"):
            document = await self.collection.find_one({"_id": job_id})
        if document is None:
            raise NotFoundError("Job", job_id)
        return Job.from_document(document)

    async def get_approved_jobs(self, limit: int = 50) -> List[Job]:
        """Most recently posted approved jobs."""
        with store_errors("get_approved_jobs"):
            cursor = (
                self.collection.find({"status": JobStatus.APPROVED.value})
                .sort("postedDate", DESCENDING)
                .limit(limit)
            )
            documents = await cursor.to_list(length=limit)
        return [Job.from_document(doc) for doc in documents]

    async def get_jobs_by_company(self, company_id: str) -> List[Job]:
        """Approved jobs of one company, newest first."""
        with store_errors("get_jobs_by_company"):
            cursor = self.collection.find(
                {"companyId": company_id, "status": JobStatus.APPROVED.value}
            ).sort("postedDate", DESCENDING)
            documents = await cursor.to_list(length=None)
        return [Job.from_document(doc) for doc in documents]

    async def get_jobs_by_ids(self, job_ids: List[str]) -> List[Job]:
        """Jobs for the given ids, in the order of ``job_ids``. Unknown ids are skipped."""
        if not job_ids:
            return []
        with store_errors("get_jobs_by_ids"):
            cursor = self.collection.find({"_id": {"$in": list(job_ids)}})
            documents = await cursor.to_list(length=len(job_ids))

        by_id = {str(doc["_id"]): Job.from_document(doc) for doc in documents}
        return [by_id[job_id] for job_id in job_ids if job_id in by_id]
