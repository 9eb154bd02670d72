"""Owner-scoped data access shared by the riddle and collection managers.

A manager is bound to one authenticated user when it is constructed. Every
query it issues goes through :meth:`OwnerScope.owned`, so no operation can
read or write another user's rows.
"""
from typing import Any, Dict, Iterable, List, Tuple
from sqlalchemy.orm import Query, Session

from app.core.config import settings
from app.core.errors import BadRequestError, UnauthorizedError
from app.models import User


class OwnerScope:
    """Base for managers whose rows carry a ``user_id`` owner column."""

    def __init__(self, db: Session, user: User):
        if user is None or getattr(user, "id", None) is None:
            raise UnauthorizedError("You must be signed in to perform this action.")
        self.db = db
        self.user_id = user.id

    def owned(self, model) -> Query:
        """Query ``model`` restricted to rows owned by the bound user."""
        return self.db.query(model).filter(model.user_id == self.user_id)

    def paginate(self, query: Query, order_by: Iterable[Any], page: int, page_size: int) -> Tuple[List[Any], int]:
        """Return one page of ``query`` and the number of rows in that page.

        The count is the page length, not the total number of matching
        rows; callers rely on that shape.
        """
        if page < 1:
            raise BadRequestError("page must be at least 1")
        if page_size < 1 or page_size > settings.MAX_PAGE_SIZE:
            raise BadRequestError(f"pageSize must be between 1 and {settings.MAX_PAGE_SIZE}")

        items = (
            query.order_by(*order_by)
            .limit(page_size)
            .offset((page - 1) * page_size)
            .all()
        )
        return items, len(items)

    @staticmethod
    def pick_changes(changes: Dict[str, Any], allowed: Iterable[str]) -> Dict[str, Any]:
        """Validate the keys of a partial update against ``allowed``."""
        unknown = sorted(set(changes) - set(allowed))
        if unknown:
            raise BadRequestError(f"Unknown or immutable fields: {', '.join(unknown)}")
        return dict(changes)
