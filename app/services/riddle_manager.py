"""Riddle manager.

CRUD and filtered listing over a user's riddles. A riddle may only be
filed under a collection owned by the same user.
"""
from typing import List, Optional, Tuple
import logging

from app.core.config import settings
from app.core.errors import ForbiddenError, NotFoundError
from app.db.base import next_timestamp, utcnow
from app.models import Riddle, RiddleCollection
from app.services.ownership import OwnerScope

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "question",
    "answer",
    "hint",
    "difficulty",
    "category",
    "language",
    "collection_id",
    "is_favorite",
    "is_public",
)


class RiddleManager(OwnerScope):
    """Riddles of one user."""

    def get(self, riddle_id: str) -> Riddle:
        riddle = self.owned(Riddle).filter(Riddle.id == riddle_id).first()
        if not riddle:
            raise NotFoundError("Riddle not found.")
        return riddle

    def require_collection(self, collection_id: str) -> RiddleCollection:
        collection = self.owned(RiddleCollection).filter(RiddleCollection.id == collection_id).first()
        if not collection:
            raise ForbiddenError("Collection not found for this user.")
        return collection

    def create(
        self,
        question: str,
        answer: str,
        hint: Optional[str] = None,
        difficulty: Optional[str] = None,
        category: Optional[str] = None,
        language: Optional[str] = None,
        collection_id: Optional[str] = None,
        is_favorite: Optional[bool] = None,
        is_public: Optional[bool] = None,
    ) -> Riddle:
        if collection_id:
            self.require_collection(collection_id)

        now = utcnow()
        riddle = Riddle(
            user_id=self.user_id,
            collection_id=collection_id or None,
            question=question,
            answer=answer,
            hint=hint,
            difficulty=difficulty,
            category=category,
            language=language,
            is_favorite=bool(is_favorite),
            is_public=bool(is_public),
            created_at=now,
            updated_at=now,
        )
        self.db.add(riddle)
        self.db.commit()
        self.db.refresh(riddle)

        logger.info("Created riddle id=%s for user_id=%s in collection_id=%s", riddle.id, self.user_id, riddle.collection_id)
        return riddle

    def update(self, riddle_id: str, **changes) -> Riddle:
        """Apply a partial update.

        ``collection_id=None`` detaches the riddle; any other value must name
        one of the user's collections.
        """
        changes = self.pick_changes(changes, UPDATABLE_FIELDS)
        riddle = self.get(riddle_id)

        if changes.get("collection_id") is not None:
            self.require_collection(changes["collection_id"])

        for field, value in changes.items():
            setattr(riddle, field, value)
        riddle.updated_at = next_timestamp(riddle.updated_at)

        self.db.commit()
        self.db.refresh(riddle)

        logger.info("Updated riddle id=%s fields=%s", riddle.id, sorted(changes))
        return riddle

    def delete(self, riddle_id: str) -> None:
        self.get(riddle_id)
        self.owned(Riddle).filter(Riddle.id == riddle_id).delete(synchronize_session=False)
        self.db.commit()
        logger.info("Deleted riddle id=%s for user_id=%s", riddle_id, self.user_id)

    def list(
        self,
        collection_id: Optional[str] = None,
        favorites_only: Optional[bool] = None,
        difficulty: Optional[str] = None,
        category: Optional[str] = None,
        page: int = 1,
        page_size: int = settings.DEFAULT_PAGE_SIZE,
    ) -> Tuple[List[Riddle], int]:
        """List the user's riddles; each provided filter narrows the result."""
        query = self.owned(Riddle)

        if collection_id:
            query = query.filter(Riddle.collection_id == collection_id)
        if favorites_only:
            query = query.filter(Riddle.is_favorite.is_(True))
        if difficulty:
            query = query.filter(Riddle.difficulty == difficulty)
        if category:
            query = query.filter(Riddle.category == category)

        return self.paginate(query, (Riddle.created_at, Riddle.id), page, page_size)
