"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing camelCase JSON field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class DeleteResponse(BaseModel):
    """Confirmation returned after a delete."""

    success: bool
    message: str
