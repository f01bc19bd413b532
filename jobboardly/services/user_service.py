"""User profiles."""

from typing import Any, List, Mapping, Optional, Union

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from jobboardly.core.exceptions import NotFoundError, ProfileExistsError
from jobboardly.db.mongodb import USERS, store_errors
from jobboardly.models.user import UserProfile, UserRole, UserStatus
from jobboardly.services.company_service import CompanyService
from jobboardly.utils.timestamps import utcnow

logger = structlog.get_logger(__name__)


class UserService:
    def __init__(self, db: AsyncIOMotorDatabase, companies: Optional[CompanyService] = None):
        self.collection = db[USERS]
        self.companies = companies or CompanyService(db)

    async def create_user_profile(
        self,
        uid: str,
        email: Optional[str],
        name: str,
        role: Union[UserRole, str],
        company_name: Optional[str] = None,
    ) -> UserProfile:
        """
        Register the profile for an authenticated uid.

        Employers registering a new company become its admin; the company
        starts out pending.

        Raises:
            ProfileExistsError: the uid already has a profile
        """
        # Existing profiles are rejected before any company is created
        with store_errors("create_user_profile"):
            existing = await self.collection.find_one({"_id": uid}, {"_id": 1})
        if existing is not None:
            raise ProfileExistsError(f"User {uid} already has a profile")

        now = utcnow()
        profile = UserProfile(
            id=uid,
            role=UserRole(role),
            status=UserStatus.ACTIVE,
            email=email.lower() if email else None,
            name=name,
            created_at=now,
            updated_at=now,
        )
        if not profile.name:
            if profile.role == UserRole.EMPLOYER.value:
                profile.name = "Recruiter"
            elif profile.is_admin_like:
                profile.name = "Platform Staff"
            else:
                profile.name = "New User"

        if profile.role == UserRole.EMPLOYER.value and company_name:
            company = await self.companies.create_company(company_name, uid)
            profile.company_id = company.id

        try:
            with store_errors("create_user_profile"):
                await self.collection.insert_one(profile.to_document())
        except DuplicateKeyError as e:
            raise ProfileExistsError(f"User {uid} already has a profile") from e

        logger.info("user_profile_created", user_id=uid, role=profile.role, company_id=profile.company_id)
        return profile

    async def update_user_profile(self, user_id: str, changes: Mapping[str, Any]) -> None:
        with store_errors("update_user_profile"):
            result = await self.collection.update_one(
                {"_id": user_id},
                {"$set": {**changes, "updatedAt": utcnow()}},
            )
        if result.matched_count == 0:
            raise NotFoundError("User", user_id)
        logger.info("user_profile_updated", user_id=user_id, fields=sorted(changes))

    async def save_job(self, user_id: str, job_id: str) -> None:
        await self._update_saved_jobs(user_id, {"$addToSet": {"savedJobIds": job_id}}, "save_job")

    async def unsave_job(self, user_id: str, job_id: str) -> None:
        await self._update_saved_jobs(user_id, {"$pull": {"savedJobIds": job_id}}, "unsave_job")

    async def _update_saved_jobs(self, user_id: str, update: dict, operation: str) -> None:
        with store_errors(operation):
            result = await self.collection.update_one(
                {"_id": user_id},
                {**update, "$set": {"updatedAt": utcnow()}},
            )
        if result.matched_count == 0:
            raise NotFoundError("User", user_id)

    async def get_user(self, user_id: str) -> UserProfile:
        with store_errors("get_user"):
            document = await self.collection.find_one({"_id": user_id})
        if document is None:
            raise NotFoundError("User", user_id)
        return UserProfile.from_document(document)

    async def get_searchable_candidates(self, limit: int = 50) -> List[UserProfile]:
        """Active job seekers who opted into profile search, newest first."""
        query = {
            "role": UserRole.JOB_SEEKER.value,
            "status": UserStatus.ACTIVE.value,
            "isProfileSearchable": True,
        }
        with store_errors("get_searchable_candidates"):
            cursor = self.collection.find(query).sort("updatedAt", DESCENDING).limit(limit)
            documents = await cursor.to_list(length=limit)
        return [UserProfile.from_document(doc) for doc in documents]
