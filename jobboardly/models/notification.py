"""Notification model."""

from enum import Enum
from typing import Optional

from jobboardly.models.base import DocumentModel


class NotificationType(str, Enum):
    NEW_APPLICATION = "NEW_APPLICATION"
    APPLICATION_STATUS_UPDATE = "APPLICATION_STATUS_UPDATE"
    JOB_APPROVED = "JOB_APPROVED"
    JOB_REJECTED = "JOB_REJECTED"
    COMPANY_APPROVED = "COMPANY_APPROVED"
    COMPANY_REJECTED = "COMPANY_REJECTED"
    ADMIN_CONTENT_PENDING = "ADMIN_CONTENT_PENDING"
    GENERIC_INFO = "GENERIC_INFO"


class Notification(DocumentModel):
    """In-app notification addressed to one user."""

    user_id: str
    title: str
    message: str
    type: NotificationType
    link: Optional[str] = None
    is_read: bool = False
