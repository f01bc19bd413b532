"""In-app notifications."""

from typing import List, Optional
from uuid import uuid4

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING

from jobboardly.core.exceptions import NotFoundError, StoreUnavailableError
from jobboardly.db.mongodb import NOTIFICATIONS, store_errors
from jobboardly.models.notification import Notification, NotificationType
from jobboardly.utils.timestamps import utcnow

logger = structlog.get_logger(__name__)


class NotificationService:
    """Creates, lists and marks notifications for one user at a time."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[NOTIFICATIONS]

    async def create_notification(
        self,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType,
        link: Optional[str] = None,
    ) -> Notification:
        notification = Notification(
            id=str(uuid4()),
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            link=link,
            is_read=False,
            created_at=utcnow(),
        )
        with store_errors("create_notification"):
            await self.collection.insert_one(notification.to_document())
        return notification

    async def notify(
        self,
        user_id: Optional[str],
        title: str,
        message: str,
        type: NotificationType,
        link: Optional[str] = None,
    ) -> Optional[Notification]:
        """
        Best-effort variant used after moderation and application writes.

        A store failure is logged and swallowed so the originating write is
        never reported as failed. Returns None when nothing was created.
        """
        if not user_id:
            return None
        try:
            return await self.create_notification(user_id, title, message, type, link)
        except StoreUnavailableError as e:
            logger.warning(
                "notification_failed",
                user_id=user_id,
                type=getattr(type, "value", type),
                error=e.message,
            )
            return None

    async def list_for_user(
        self,
        user_id: str,
        unread_only: bool = False,
        limit: int = 50,
    ) -> List[Notification]:
        query = {"userId": user_id}
        if unread_only:
            query["isRead"] = False

        with store_errors("list_notifications"):
            cursor = self.collection.find(query).sort("createdAt", DESCENDING).limit(limit)
            documents = await cursor.to_list(length=limit)
        return [Notification.from_document(doc) for doc in documents]

    async def mark_as_read(self, notification_id: str, user_id: str) -> None:
        """Mark one of the user's notifications read. Other users' ids are not found."""
        with store_errors("mark_notification_read"):
            result = await self.collection.update_one(
                {"_id": notification_id, "userId": user_id},
                {"$set": {"isRead": True}},
            )
        if result.matched_count == 0:
            raise NotFoundError("Notification", notification_id)

    async def mark_all_as_read(self, user_id: str) -> int:
        with store_errors("mark_all_notifications_read"):
            result = await self.collection.update_many(
                {"userId": user_id, "isRead": False},
                {"$set": {"isRead": True}},
            )
        logger.info("notifications_marked_read", user_id=user_id, count=result.modified_count)
        return result.modified_count
