"""
Board Use Case DTOs (Data Transfer Objects)

All Command and Response classes for board domain.
"""

from pydantic import BaseModel

from src.domain.base import isoformat_utc
from src.domain.entities import Board, BoardRole


# ============================================================================
# Command DTOs
# ============================================================================


class CreateBoardCommand(BaseModel):
    name: str


class UpdateBoardCommand(BaseModel):
    name: str


# ============================================================================
# Response DTOs
# ============================================================================


class BoardResponse(BaseModel):
    """A board as seen by one of its members"""

    id: str
    name: str
    created_at: str
    updated_at: str
    role: BoardRole

    @classmethod
    def from_entity(cls, board: Board, role: BoardRole) -> "BoardResponse":
        return cls(
            id=str(board.id),
            name=board.name,
            created_at=isoformat_utc(board.created_at),
            updated_at=isoformat_utc(board.updated_at),
            role=role,
        )
