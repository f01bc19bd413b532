"""Base class for request/response bodies."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Bodies use the same camelCase keys as stored documents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
