"""
Membership Entity

Links User to Board with a role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import BoardRole


class Membership(SQLModel, table=True):
    """
    Membership entity - links User to Board with a role.

    Business Rules:
    - One user can be member of multiple boards
    - (user_id, board_id) must be unique
    - Every board keeps at least one OWNER
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(
        foreign_key="users.id", ondelete="CASCADE", nullable=False, index=True
    )
    board_id: UUID = Field(
        foreign_key="boards.id", ondelete="CASCADE", nullable=False, index=True
    )

    role: BoardRole = Field(default=BoardRole.member, nullable=False)

    # Timestamps
    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_membership_user_board", "user_id", "board_id", unique=True),
        Index("idx_membership_board_role", "board_id", "role"),
    )
