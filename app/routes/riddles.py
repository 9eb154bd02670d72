"""Riddle routes."""
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.sessions import get_db
from app.models.user import User
from app.core.security import get_current_user
from app.services.riddle_manager import RiddleManager
from app.schemas import (
    CreateRiddleRequest,
    UpdateRiddleRequest,
    DeleteRiddleRequest,
    ListRiddlesRequest,
    RiddleResponse,
    RiddleActionResponse,
    RiddleListResponse,
    DeleteResponse,
)


router = APIRouter(prefix="/riddles", tags=["Riddles"])


def get_riddle_manager(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> RiddleManager:
    return RiddleManager(db, current_user)


def _riddle_response(riddle) -> RiddleActionResponse:
    return RiddleActionResponse(data={"riddle": RiddleResponse.model_validate(riddle)})


@router.post("/create", response_model=RiddleActionResponse)
def create_riddle(
    request: CreateRiddleRequest,
    manager: RiddleManager = Depends(get_riddle_manager)
):
    """
    Create a riddle for the current user.
    
    Raises:
        FORBIDDEN: `collectionId` does not name one of the user's collections
    """
    riddle = manager.create(**request.model_dump())
    return _riddle_response(riddle)


@router.post("/update", response_model=RiddleActionResponse)
def update_riddle(
    request: UpdateRiddleRequest,
    manager: RiddleManager = Depends(get_riddle_manager)
):
    """
    Partially update a riddle.
    
    `collectionId: null` detaches the riddle from its collection; any other
    collection id is checked for ownership like on create.
    
    Raises:
        NOT_FOUND: riddle absent or owned by someone else
        FORBIDDEN: target collection not owned by the user
    """
    changes = request.model_dump(exclude_unset=True, exclude={"id"})
    riddle = manager.update(request.id, **changes)
    return _riddle_response(riddle)


@router.post("/delete", response_model=DeleteResponse)
def delete_riddle(
    request: DeleteRiddleRequest,
    manager: RiddleManager = Depends(get_riddle_manager)
):
    manager.delete(request.id)
    return DeleteResponse()


@router.post("/list", response_model=RiddleListResponse)
def list_my_riddles(
    request: Optional[ListRiddlesRequest] = None,
    manager: RiddleManager = Depends(get_riddle_manager)
):
    """
    List the current user's riddles, oldest first.
    
    Filters (`collectionId`, `favoritesOnly`, `difficulty`, `category`) are
    combined with AND; each applies only when given.
    """
    request = request or ListRiddlesRequest()
    items, total = manager.list(
        collection_id=request.collection_id,
        favorites_only=request.favorites_only,
        difficulty=request.difficulty,
        category=request.category,
        page=request.page,
        page_size=request.page_size,
    )
    return RiddleListResponse(
        data={
            "items": [RiddleResponse.model_validate(r) for r in items],
            "total": total,
        }
    )
