from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User


class UserAlreadyExists(Exception):
    """Raised by create() when the email is already taken"""


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Raises:
            UserAlreadyExists: the store's unique constraint on email rejected it
        """
        pass

    @abstractmethod
    async def search(
        self, query: str, exclude_user_id: UUID, limit: int
    ) -> List[User]:
        """
        Case-insensitive substring search on email or name.

        Excludes ``exclude_user_id``, ordered by name ascending.
        """
        pass
