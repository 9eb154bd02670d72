"""Typed action errors.

Every error carries a machine-readable ``code`` and a human-readable
``message``. Handlers in ``app.main`` render them as::

    {"success": false, "error": {"code": "NOT_FOUND", "message": "..."}}
"""
from typing import Any, Dict, Optional


class ActionError(Exception):
    """Base class for errors returned to the caller of an action."""

    code: str = "INTERNAL_SERVER_ERROR"
    status_code: int = 500
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return {"success": False, "error": body}


class BadRequestError(ActionError):
    code = "BAD_REQUEST"
    status_code = 400


class UnauthorizedError(ActionError):
    code = "UNAUTHORIZED"
    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(ActionError):
    code = "FORBIDDEN"
    status_code = 403


class NotFoundError(ActionError):
    code = "NOT_FOUND"
    status_code = 404


class ConflictError(ActionError):
    code = "CONFLICT"
    status_code = 409
