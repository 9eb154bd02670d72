"""Request/response schemas for the action routes."""
from app.schemas.common import ActionModel, DeleteResponse, PaginationRequest
from app.schemas.collections import (
    CreateCollectionRequest,
    UpdateCollectionRequest,
    DeleteCollectionRequest,
    ListCollectionsRequest,
    CollectionResponse,
    CollectionActionResponse,
    CollectionListResponse,
)
from app.schemas.riddles import (
    Difficulty,
    CreateRiddleRequest,
    UpdateRiddleRequest,
    DeleteRiddleRequest,
    ListRiddlesRequest,
    RiddleResponse,
    RiddleActionResponse,
    RiddleListResponse,
)

__all__ = [
    "ActionModel",
    "DeleteResponse",
    "PaginationRequest",
    "CreateCollectionRequest",
    "UpdateCollectionRequest",
    "DeleteCollectionRequest",
    "ListCollectionsRequest",
    "CollectionResponse",
    "CollectionActionResponse",
    "CollectionListResponse",
    "Difficulty",
    "CreateRiddleRequest",
    "UpdateRiddleRequest",
    "DeleteRiddleRequest",
    "ListRiddlesRequest",
    "RiddleResponse",
    "RiddleActionResponse",
    "RiddleListResponse",
]
