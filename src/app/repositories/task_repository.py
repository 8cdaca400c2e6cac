from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Task, User

# (task, creator, assignee)
TaskDetail = Tuple[Task, User, Optional[User]]


class ITaskRepository(ABC):
    """Task repository interface - application layer"""

    @abstractmethod
    async def get_in_board(self, task_id: UUID, board_id: UUID) -> Optional[Task]:
        """Get task by ID, only if it belongs to the given board"""
        pass

    @abstractmethod
    async def get_detail(self, task_id: UUID) -> Optional[TaskDetail]:
        """Get task with creator and assignee"""
        pass

    @abstractmethod
    async def list_by_board(self, board_id: UUID) -> List[TaskDetail]:
        """All tasks of a board with creator and assignee, newest first"""
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Create a new task"""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update existing task"""
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Delete a task"""
        pass
