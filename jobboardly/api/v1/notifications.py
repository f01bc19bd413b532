"""Notification endpoints for the calling user."""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from jobboardly.api.deps import get_notification_service
from jobboardly.core.security import RequestContext, get_request_context
from jobboardly.models.notification import Notification
from jobboardly.schemas.notification import MarkAllReadResponse
from jobboardly.services.notification_service import NotificationService

router = APIRouter()


@router.get("", response_model=List[Notification])
async def list_notifications(
    unread_only: bool = Query(False, alias="unreadOnly"),
    limit: int = Query(50, ge=1, le=200),
    ctx: RequestContext = Depends(get_request_context),
    notification_service: NotificationService = Depends(get_notification_service),
):
    """Newest first."""
    return await notification_service.list_for_user(ctx.uid, unread_only=unread_only, limit=limit)


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_notification_read(
    notification_id: str,
    ctx: RequestContext = Depends(get_request_context),
    notification_service: NotificationService = Depends(get_notification_service),
):
    await notification_service.mark_as_read(notification_id, ctx.uid)


@router.post("/read-all", response_model=MarkAllReadResponse)
async def mark_all_notifications_read(
    ctx: RequestContext = Depends(get_request_context),
    notification_service: NotificationService = Depends(get_notification_service),
):
    updated = await notification_service.mark_all_as_read(ctx.uid)
    return MarkAllReadResponse(updated=updated)
