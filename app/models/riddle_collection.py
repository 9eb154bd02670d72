"""Riddle collection model."""
import uuid
from sqlalchemy import Column, String, DateTime, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base, utcnow


class RiddleCollection(Base):
    """Named, user-owned set of riddles ("Kids riddles", "Logic puzzles")."""
    
    __tablename__ = "riddle_collections"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    icon = Column(String(100))
    # At most one default collection per user, enforced by CollectionManager
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
    
    # Relationships
    user = relationship("User", back_populates="riddle_collections")
    riddles = relationship("Riddle", back_populates="collection", passive_deletes=True)
