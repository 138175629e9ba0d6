"""Shared API request models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIRequest(BaseModel):
    """Request body accepting camelCase keys from the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
