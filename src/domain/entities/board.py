"""
Board Entity

A Kanban board shared between its members.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Board(SQLModel, table=True):
    """
    Board entity - a Kanban board.

    Business Rules:
    - Created together with an OWNER membership for its creator
    - Must always keep at least one OWNER membership
    - Deleting a board removes its memberships and tasks
    """

    __tablename__ = "boards"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_board_updated_at", "updated_at"),)
