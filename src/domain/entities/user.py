"""
User Entity

Represents a person who can belong to multiple boards.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - represents a person who can belong to multiple boards.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash
    - Never deleted through the API
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
