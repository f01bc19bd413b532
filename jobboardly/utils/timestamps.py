"""Timestamp normalization for values read from the document store."""

from datetime import date, datetime, timezone
from typing import Any, Optional


def normalize_timestamp(value: Any) -> Optional[datetime]:
    """
    Normalize a stored timestamp to an aware UTC datetime.

    Accepts BSON datetimes (naive, implicitly UTC), aware datetimes,
    dates, ISO-8601 strings and epoch seconds. Returns None for None/"".
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
        return normalize_timestamp(parsed)

    raise ValueError(f"Unsupported timestamp value: {value!r}")


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
