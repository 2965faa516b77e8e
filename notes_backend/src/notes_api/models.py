import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp; SQLite does not keep tzinfo across a round trip."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(Base):
    """
    User entity with unique email and hashed password.
    """
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class Note(Base):
    """
    Note entity with timestamps. The owner is a plain column; ownership is
    checked by the application, not by a foreign key.
    """
    __tablename__ = "notes"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    content = Column(Text, default="", nullable=False)
    category = Column(String(50), nullable=True)
    user_id = Column(String(36), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        Index("ix_notes_user_category", "user_id", "category"),
    )
