"""Tests for NotificationService."""

import pytest
from pymongo.errors import AutoReconnect

from jobboardly.core.exceptions import NotFoundError, StoreUnavailableError
from jobboardly.db.mongodb import NOTIFICATIONS
from jobboardly.models.notification import NotificationType
from jobboardly.services.notification_service import NotificationService


class TestNotificationService:

    @pytest.fixture
    def service(self, fake_db):
        return NotificationService(fake_db)

    @pytest.mark.asyncio
    async def test_create_notification(self, service, fake_db):
        notification = await service.create_notification(
            "user-1", "Job approved", "Your job is live", NotificationType.JOB_APPROVED, link="/jobs/1"
        )

        document = fake_db[NOTIFICATIONS].insert_one.call_args.args[0]
        assert document["_id"] == notification.id
        assert document["userId"] == "user-1"
        assert document["type"] == "JOB_APPROVED"
        assert document["isRead"] is False
        assert "createdAt" in document

    @pytest.mark.asyncio
    async def test_create_surfaces_store_errors(self, service, fake_db):
        fake_db[NOTIFICATIONS].insert_one.side_effect = AutoReconnect("connection lost")
        with pytest.raises(StoreUnavailableError):
            await service.create_notification("user-1", "t", "m", NotificationType.GENERIC_INFO)

    @pytest.mark.asyncio
    async def test_notify_swallows_store_errors(self, service, fake_db):
        fake_db[NOTIFICATIONS].insert_one.side_effect = AutoReconnect("connection lost")
        assert await service.notify("user-1", "t", "m", NotificationType.GENERIC_INFO) is None

    @pytest.mark.asyncio
    async def test_notify_without_recipient_is_noop(self, service, fake_db):
        assert await service.notify(None, "t", "m", NotificationType.GENERIC_INFO) is None
        fake_db[NOTIFICATIONS].insert_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_unread_for_user(self, service, fake_db):
        fake_db[NOTIFICATIONS].cursor.to_list.return_value = [
            {
                "_id": "n1",
                "userId": "user-1",
                "title": "t",
                "message": "m",
                "type": "GENERIC_INFO",
                "isRead": False,
                "createdAt": 1714550400,
            }
        ]

        notifications = await service.list_for_user("user-1", unread_only=True, limit=10)

        assert [n.id for n in notifications] == ["n1"]
        assert fake_db[NOTIFICATIONS].find.call_args.args[0] == {"userId": "user-1", "isRead": False}
        fake_db[NOTIFICATIONS].cursor.limit.assert_called_with(10)

    @pytest.mark.asyncio
    async def test_mark_as_read_is_scoped_to_user(self, service, fake_db):
        await service.mark_as_read("n1", "user-1")
        query, update = fake_db[NOTIFICATIONS].update_one.call_args.args
        assert query == {"_id": "n1", "userId": "user-1"}
        assert update == {"$set": {"isRead": True}}

    @pytest.mark.asyncio
    async def test_mark_as_read_of_other_users_notification(self, service, fake_db):
        fake_db[NOTIFICATIONS].update_one.return_value.matched_count = 0
        with pytest.raises(NotFoundError):
            await service.mark_as_read("n1", "intruder")

    @pytest.mark.asyncio
    async def test_mark_all_as_read(self, service, fake_db):
        fake_db[NOTIFICATIONS].update_many.return_value.modified_count = 4
        assert await service.mark_all_as_read("user-1") == 4
