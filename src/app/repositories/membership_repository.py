from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import BoardRole, Membership, User


class MembershipAlreadyExists(Exception):
    """Raised by create() when (user_id, board_id) is already taken"""


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_board(
        self, user_id: UUID, board_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and board"""
        pass

    @abstractmethod
    async def list_by_board_with_users(
        self, board_id: UUID
    ) -> List[Tuple[Membership, User]]:
        """All memberships of a board with their users, oldest first"""
        pass

    @abstractmethod
    async def count_by_role(self, board_id: UUID, role: BoardRole) -> int:
        """Count memberships of a board holding the given role"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """
        Create a new membership.

        Raises:
            MembershipAlreadyExists: the store's unique constraint rejected it
        """
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        pass

    @abstractmethod
    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        pass
