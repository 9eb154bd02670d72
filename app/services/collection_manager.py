"""Collection manager.

CRUD and listing over a user's riddle collections. Keeps the single
default collection invariant with an explicit two-step sequence: clear the
user's current default, then write the new one. Each step is its own
statement, so a concurrent request can briefly observe zero defaults.
"""
from datetime import datetime
from typing import List, Optional, Tuple
import logging

from app.core.config import settings
from app.core.errors import NotFoundError
from app.db.base import next_timestamp, utcnow
from app.models import Riddle, RiddleCollection
from app.services.ownership import OwnerScope

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "icon", "is_default")


class CollectionManager(OwnerScope):
    """Riddle collections of one user.

    Usage:
        manager = CollectionManager(db, current_user)
        collection = manager.create("Logic", is_default=True)
    """

    def get(self, collection_id: str) -> RiddleCollection:
        collection = self.owned(RiddleCollection).filter(RiddleCollection.id == collection_id).first()
        if not collection:
            raise NotFoundError("Riddle collection not found.")
        return collection

    def clear_defaults(self, now: Optional[datetime] = None) -> int:
        """Unset ``is_default`` on every default collection of the user."""
        cleared = (
            self.owned(RiddleCollection)
            .filter(RiddleCollection.is_default.is_(True))
            .update({"is_default": False, "updated_at": now or utcnow()}, synchronize_session=False)
        )
        self.db.commit()
        if cleared:
            logger.info("Cleared default flag on %d collection(s) for user_id=%s", cleared, self.user_id)
        return cleared

    def create(
        self,
        name: str,
        description: Optional[str] = None,
        icon: Optional[str] = None,
        is_default: Optional[bool] = None,
    ) -> RiddleCollection:
        now = utcnow()

        if is_default:
            self.clear_defaults(now)

        collection = RiddleCollection(
            user_id=self.user_id,
            name=name,
            description=description,
            icon=icon,
            is_default=bool(is_default),
            created_at=now,
            updated_at=now,
        )
        self.db.add(collection)
        self.db.commit()
        self.db.refresh(collection)

        logger.info("Created collection id=%s for user_id=%s (default=%s)", collection.id, self.user_id, collection.is_default)
        return collection

    def update(self, collection_id: str, **changes) -> RiddleCollection:
        """Apply a partial update; omitted fields are left untouched."""
        changes = self.pick_changes(changes, UPDATABLE_FIELDS)
        collection = self.get(collection_id)

        if changes.get("is_default"):
            self.clear_defaults()

        for field, value in changes.items():
            setattr(collection, field, value)
        collection.updated_at = next_timestamp(collection.updated_at)

        self.db.commit()
        self.db.refresh(collection)

        logger.info("Updated collection id=%s fields=%s", collection.id, sorted(changes))
        return collection

    def detach_riddles(self, collection_id: str, now: Optional[datetime] = None) -> int:
        """Set ``collection_id`` to NULL on the user's riddles in a collection.

        A no-op once nothing references the collection.
        """
        detached = (
            self.owned(Riddle)
            .filter(Riddle.collection_id == collection_id)
            .update({"collection_id": None, "updated_at": now or utcnow()}, synchronize_session=False)
        )
        self.db.commit()
        return detached

    def delete(self, collection_id: str) -> None:
        """Detach the collection's riddles, then delete the collection row."""
        self.get(collection_id)

        detached = self.detach_riddles(collection_id)
        self.owned(RiddleCollection).filter(RiddleCollection.id == collection_id).delete(synchronize_session=False)
        self.db.commit()

        logger.info("Deleted collection id=%s (detached %d riddle(s))", collection_id, detached)

    def list(self, page: int = 1, page_size: int = settings.DEFAULT_PAGE_SIZE) -> Tuple[List[RiddleCollection], int]:
        return self.paginate(
            self.owned(RiddleCollection),
            (RiddleCollection.created_at, RiddleCollection.id),
            page,
            page_size,
        )
