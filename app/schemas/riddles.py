"""Riddle schemas."""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field

from app.schemas.common import ActionModel, PaginationRequest

Difficulty = Literal["easy", "medium", "hard"]


class CreateRiddleRequest(ActionModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    hint: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    category: Optional[str] = None
    language: Optional[str] = None
    collection_id: Optional[str] = None
    is_favorite: Optional[bool] = None
    is_public: Optional[bool] = None


class UpdateRiddleRequest(ActionModel):
    # Only collection_id accepts an explicit null (detach)
    id: str = Field(min_length=1)
    question: str = Field(default=None, min_length=1)
    answer: str = Field(default=None, min_length=1)
    hint: str = None
    difficulty: Difficulty = None
    category: str = None
    language: str = None
    collection_id: Optional[str] = None
    is_favorite: bool = None
    is_public: bool = None


class DeleteRiddleRequest(ActionModel):
    id: str = Field(min_length=1)


class ListRiddlesRequest(PaginationRequest):
    collection_id: Optional[str] = None
    favorites_only: Optional[bool] = None
    difficulty: Optional[Difficulty] = None
    category: Optional[str] = None


class RiddleResponse(ActionModel):
    id: str
    collection_id: Optional[str] = None
    user_id: str
    question: str
    answer: str
    hint: Optional[str] = None
    difficulty: Optional[str] = None
    category: Optional[str] = None
    language: Optional[str] = None
    is_favorite: bool
    is_public: bool
    created_at: datetime
    updated_at: datetime


class RiddleData(ActionModel):
    riddle: RiddleResponse


class RiddleActionResponse(ActionModel):
    success: bool = True
    data: RiddleData


class RiddlePage(ActionModel):
    items: List[RiddleResponse]
    total: int


class RiddleListResponse(ActionModel):
    success: bool = True
    data: RiddlePage
