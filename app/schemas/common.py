"""Shared schema pieces."""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from app.core.config import settings


class ActionModel(BaseModel):
    """Base model speaking camelCase on the wire.

    snake_case field names are accepted on input as well.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class PaginationRequest(ActionModel):
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)


class DeleteResponse(ActionModel):
    success: bool = True
