"""Riddle collection routes."""
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.sessions import get_db
from app.models.user import User
from app.core.security import get_current_user
from app.services.collection_manager import CollectionManager
from app.schemas import (
    CreateCollectionRequest,
    UpdateCollectionRequest,
    DeleteCollectionRequest,
    ListCollectionsRequest,
    CollectionResponse,
    CollectionActionResponse,
    CollectionListResponse,
    DeleteResponse,
)


router = APIRouter(prefix="/collections", tags=["Riddle Collections"])


def get_collection_manager(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> CollectionManager:
    return CollectionManager(db, current_user)


def _collection_response(collection) -> CollectionActionResponse:
    return CollectionActionResponse(
        data={"collection": CollectionResponse.model_validate(collection)}
    )


@router.post("/create", response_model=CollectionActionResponse)
def create_collection(
    request: CreateCollectionRequest,
    manager: CollectionManager = Depends(get_collection_manager)
):
    """
    Create a riddle collection for the current user.
    
    With `isDefault: true` every other collection of the user loses its
    default flag first.
    """
    collection = manager.create(
        name=request.name,
        description=request.description,
        icon=request.icon,
        is_default=request.is_default,
    )
    return _collection_response(collection)


@router.post("/update", response_model=CollectionActionResponse)
def update_collection(
    request: UpdateCollectionRequest,
    manager: CollectionManager = Depends(get_collection_manager)
):
    """
    Partially update a collection. Only supplied fields change.
    
    Raises:
        NOT_FOUND: collection absent or owned by someone else
    """
    changes = request.model_dump(exclude_unset=True, exclude={"id"})
    collection = manager.update(request.id, **changes)
    return _collection_response(collection)


@router.post("/delete", response_model=DeleteResponse)
def delete_collection(
    request: DeleteCollectionRequest,
    manager: CollectionManager = Depends(get_collection_manager)
):
    """
    Delete a collection. Its riddles are kept and detached.
    """
    manager.delete(request.id)
    return DeleteResponse()


@router.post("/list", response_model=CollectionListResponse)
def list_my_collections(
    request: Optional[ListCollectionsRequest] = None,
    manager: CollectionManager = Depends(get_collection_manager)
):
    """List the current user's collections, oldest first."""
    request = request or ListCollectionsRequest()
    items, total = manager.list(page=request.page, page_size=request.page_size)
    return CollectionListResponse(
        data={
            "items": [CollectionResponse.model_validate(c) for c in items],
            "total": total,
        }
    )
