"""Company profiles."""

from typing import Any, List, Mapping
from uuid import uuid4

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from jobboardly.core.exceptions import NotFoundError
from jobboardly.db.mongodb import COMPANIES, USERS, store_errors
from jobboardly.models.company import Company, CompanyStatus
from jobboardly.models.user import UserProfile
from jobboardly.utils.timestamps import utcnow

logger = structlog.get_logger(__name__)


class CompanyService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[COMPANIES]
        self.users = db[USERS]

    async def create_company(self, name: str, owner_uid: str) -> Company:
        """Register a company; the owner is its first admin and recruiter."""
        now = utcnow()
        company = Company(
            id=str(uuid4()),
            name=name or "New Company",
            admin_uids=[owner_uid],
            recruiter_uids=[owner_uid],
            status=CompanyStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        with store_errors("create_company"):
            await self.collection.insert_one(company.to_document())

        logger.info("company_created", company_id=company.id, owner_uid=owner_uid)
        return company

    async def update_company_profile(self, company_id: str, changes: Mapping[str, Any]) -> Company:
        """Apply a profile edit. Edited companies go back to "pending" for review."""
        update = {
            **changes,
            "status": CompanyStatus.PENDING.value,
            "moderationReason": None,
            "updatedAt": utcnow(),
        }
        with store_errors("update_company_profile"):
            document = await self.collection.find_one_and_update(
                {"_id": company_id},
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )
        if document is None:
            raise NotFoundError("Company", company_id)

        logger.info("company_profile_updated", company_id=company_id, fields=sorted(changes))
        return Company.from_document(document)

    async def get_company(self, company_id: str) -> Company:
        with store_errors("get_company"):
            document = await self.collection.find_one({"_id": company_id})
        if document is None:
            raise NotFoundError("Company", company_id)
        return Company.from_document(document)

    async def get_company_recruiters(self, recruiter_uids: List[str]) -> List[UserProfile]:
        # An empty $in still costs a round trip
        if not recruiter_uids:
            return []
        with store_errors("get_company_recruiters"):
            cursor = self.users.find({"_id": {"$in": list(recruiter_uids)}})
            documents = await cursor.to_list(length=len(recruiter_uids))
        return [UserProfile.from_document(doc) for doc in documents]
