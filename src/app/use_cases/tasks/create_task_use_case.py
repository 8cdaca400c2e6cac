"""
Create Task Use Case
"""

from uuid import UUID

from src.app.errors import TASK_NOT_FOUND
from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Task
from src.libs.result import Result, Return

from .assignee import resolve_assignee
from .dtos import CreateTaskCommand, TaskResponse


class CreateTaskUseCase:
    """
    Use case for creating a task on a board.

    Business Rules:
    - Caller must be a member of the board (any role)
    - Assignee, if given, must be a member of the same board
    - created_by is the caller
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, board_id: UUID, user_id: UUID, command: CreateTaskCommand
    ) -> Result[TaskResponse]:
        async with self.uow:
            authority = MembershipAuthority(self.uow)

            access = await authority.require_membership(board_id, user_id)
            if access.is_err():
                return access

            assignee = await resolve_assignee(authority, board_id, command.assigned_to)
            if assignee.is_err():
                return assignee

            task = Task(
                title=command.title,
                description=command.description,
                status=command.status,
                board_id=board_id,
                created_by=user_id,
                assigned_to=assignee.value,
            )
            task = await self.uow.tasks.create(task)

            detail = await self.uow.tasks.get_detail(task.id)
            if detail is None:
                return Return.err(TASK_NOT_FOUND)

            await self.uow.commit()

            return Return.ok(TaskResponse.from_entity(*detail))
