"""Notification response schemas."""

from jobboardly.schemas.base import CamelModel


class MarkAllReadResponse(CamelModel):
    updated: int
