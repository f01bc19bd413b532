"""Base class for all document models."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from jobboardly.utils.timestamps import normalize_timestamp


class DocumentModel(BaseModel):
    """
    Base class for documents stored in MongoDB.

    Attributes are snake_case; documents are read and written with the
    camelCase field names used by the web client (``moderationReason``,
    ``adminUids``, ...). Enum fields are stored as their string values.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def normalize_timestamps(cls, v: Any) -> Optional[datetime]:
        return normalize_timestamp(v)

    @classmethod
    def from_document(cls, document: Dict[str, Any]):
        """Build a model from a raw MongoDB document (``_id`` → ``id``)."""
        data = dict(document)
        if "_id" in data:
            data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)

    def to_document(self) -> Dict[str, Any]:
        """Serialize to a MongoDB document keyed by camelCase names."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        data["_id"] = data.pop("id")
        return data
