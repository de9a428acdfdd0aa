"""SQLAlchemy models for per-player progress storage."""
from sqlalchemy import Column, String, Text, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from .database import Base


class StoredValue(Base):
    __tablename__ = "stored_values"
    __table_args__ = (UniqueConstraint("player_id", "key", name="uq_player_key"),)
    id = Column(String(64), primary_key=True)  # uuid
    player_id = Column(String(64), nullable=False, index=True)
    key = Column(String(128), nullable=False)
    value = Column(Text, nullable=False)  # JSON or plain string, opaque here
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
