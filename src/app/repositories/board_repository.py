from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Board, BoardRole


class IBoardRepository(ABC):
    """Board repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, board_id: UUID) -> Optional[Board]:
        """Get board by ID"""
        pass

    @abstractmethod
    async def lock(self, board_id: UUID) -> Optional[Board]:
        """
        Get board by ID and hold a row lock until the transaction ends.

        Serializes operations that count OWNER memberships before mutating.
        """
        pass

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> List[Tuple[Board, BoardRole]]:
        """Boards the user is a member of with their role, newest update first"""
        pass

    @abstractmethod
    async def create(self, board: Board) -> Board:
        """Create a new board"""
        pass

    @abstractmethod
    async def update(self, board: Board) -> Board:
        """Update existing board"""
        pass

    @abstractmethod
    async def delete(self, board_id: UUID) -> None:
        """Delete a board together with its tasks and memberships"""
        pass
