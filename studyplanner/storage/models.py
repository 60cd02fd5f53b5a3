"""SQLAlchemy ORM models for StudyPlanner storage."""

from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class KeyValue(Base):
    """One persisted value, addressed by key (settings, timer state, tasks)."""

    __tablename__ = "key_values"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<KeyValue key={self.key} size={len(self.value or '')}>"
