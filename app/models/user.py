"""User model."""
import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from app.db.base import Base, utcnow


class User(Base):
    """Account that owns riddles and collections."""
    
    __tablename__ = "users"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    email = Column(String(150), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow)
    
    # Relationships
    riddle_collections = relationship("RiddleCollection", back_populates="user", cascade="all, delete-orphan")
    riddles = relationship("Riddle", back_populates="user", cascade="all, delete-orphan")
