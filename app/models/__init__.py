"""Database models."""
from app.models.user import User
from app.models.riddle_collection import RiddleCollection
from app.models.riddle import Riddle

__all__ = [
    "User",
    "RiddleCollection",
    "Riddle",
]
