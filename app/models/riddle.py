"""Riddle model."""
import uuid
from sqlalchemy import Column, String, DateTime, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base, utcnow


class Riddle(Base):
    """Question/answer pair, optionally filed under a collection."""
    
    __tablename__ = "riddles"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    collection_id = Column(String(36), ForeignKey("riddle_collections.id", ondelete="SET NULL"), index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    hint = Column(Text)
    difficulty = Column(String(20))  # easy / medium / hard
    category = Column(String(100))  # wordplay, math, ...
    language = Column(String(20))
    is_favorite = Column(Boolean, nullable=False, default=False)
    is_public = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
    
    # Relationships
    user = relationship("User", back_populates="riddles")
    collection = relationship("RiddleCollection", back_populates="riddles")
