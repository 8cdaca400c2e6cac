from abc import ABC, abstractmethod

from src.app.repositories.board_repository import IBoardRepository
from src.app.repositories.membership_repository import IMembershipRepository
from src.app.repositories.task_repository import ITaskRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    boards: IBoardRepository
    memberships: IMembershipRepository
    tasks: ITaskRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
