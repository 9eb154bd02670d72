"""Riddle collection schemas."""
from datetime import datetime
from typing import List, Optional
from pydantic import Field

from app.schemas.common import ActionModel, PaginationRequest


class CreateCollectionRequest(ActionModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    is_default: Optional[bool] = None


class UpdateCollectionRequest(ActionModel):
    # Omitted fields stay unset so only supplied ones are written
    id: str = Field(min_length=1)
    name: str = Field(default=None, min_length=1)
    description: str = None
    icon: str = None
    is_default: bool = None


class DeleteCollectionRequest(ActionModel):
    id: str = Field(min_length=1)


class ListCollectionsRequest(PaginationRequest):
    pass


class CollectionResponse(ActionModel):
    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    is_default: bool
    created_at: datetime
    updated_at: datetime


class CollectionData(ActionModel):
    collection: CollectionResponse


class CollectionActionResponse(ActionModel):
    success: bool = True
    data: CollectionData


class CollectionPage(ActionModel):
    items: List[CollectionResponse]
    total: int


class CollectionListResponse(ActionModel):
    success: bool = True
    data: CollectionPage
