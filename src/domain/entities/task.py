"""
Task Entity

A card on a board.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import TaskStatus


class Task(SQLModel, table=True):
    """
    Task entity - a card on a board.

    Business Rules:
    - Created by any member of the board
    - assigned_to must reference a member of the same board (checked on write)
    - Deletable by its creator or by an OWNER/MAINTAINER of the board
    """

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)

    status: TaskStatus = Field(default=TaskStatus.todo, nullable=False)

    board_id: UUID = Field(foreign_key="boards.id", ondelete="CASCADE", nullable=False)
    created_by: UUID = Field(foreign_key="users.id", nullable=False)
    assigned_to: Optional[UUID] = Field(
        default=None, foreign_key="users.id", ondelete="SET NULL"
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_task_board_created_at", "board_id", "created_at"),
        Index("idx_task_assigned_to", "assigned_to"),
    )
