from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import aliased
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_repository import ITaskRepository, TaskDetail
from src.domain.entities import Task, User


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _detail_query():
        creator = aliased(User, name="creator")
        assignee = aliased(User, name="assignee")
        return (
            select(Task, creator, assignee)
            .join(creator, creator.id == Task.created_by)
            .outerjoin(assignee, assignee.id == Task.assigned_to)
        )

    async def get_in_board(self, task_id: UUID, board_id: UUID) -> Optional[Task]:
        """Get task by ID, only if it belongs to the given board"""
        stmt = select(Task).where(Task.id == task_id, Task.board_id == board_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_detail(self, task_id: UUID) -> Optional[TaskDetail]:
        """Get task with creator and assignee"""
        stmt = self._detail_query().where(Task.id == task_id)
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        task, creator, assignee = row
        return task, creator, assignee

    async def list_by_board(self, board_id: UUID) -> List[TaskDetail]:
        """All tasks of a board with creator and assignee, newest first"""
        stmt = (
            self._detail_query()
            .where(Task.board_id == board_id)
            .order_by(col(Task.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return [(task, creator, assignee) for task, creator, assignee in result.all()]

    async def create(self, task: Task) -> Task:
        """Create a new task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def update(self, task: Task) -> Task:
        """Update existing task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        """Delete a task"""
        await self.session.delete(task)
        await self.session.flush()
