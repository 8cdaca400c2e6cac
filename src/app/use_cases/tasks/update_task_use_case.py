"""
Update Task Use Case
"""

from uuid import UUID

from src.app.errors import TASK_NOT_FOUND
from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.libs.result import Result, Return

from .assignee import resolve_assignee
from .dtos import TaskResponse, UpdateTaskCommand


class UpdateTaskUseCase:
    """
    Use case for partially updating a task.

    Business Rules:
    - Caller must be a member of the board (any role)
    - Task must belong to the board
    - A new assignee must be a member of the board; null clears it
    - Only provided fields change; updated_at is always bumped
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, board_id: UUID, task_id: UUID, user_id: UUID, command: UpdateTaskCommand
    ) -> Result[TaskResponse]:
        async with self.uow:
            authority = MembershipAuthority(self.uow)

            access = await authority.require_membership(board_id, user_id)
            if access.is_err():
                return access

            task = await self.uow.tasks.get_in_board(task_id, board_id)
            if task is None:
                return Return.err(TASK_NOT_FOUND)

            changes = command.model_dump(exclude_unset=True)

            if "assigned_to" in changes:
                assignee = await resolve_assignee(authority, board_id, changes["assigned_to"])
                if assignee.is_err():
                    return assignee
                task.assigned_to = assignee.value

            if changes.get("title") is not None:
                task.title = changes["title"]
            if "description" in changes:
                task.description = changes["description"]
            if changes.get("status") is not None:
                task.status = changes["status"]

            task.updated_at = utcnow()
            await self.uow.tasks.update(task)

            detail = await self.uow.tasks.get_detail(task_id)
            if detail is None:
                return Return.err(TASK_NOT_FOUND)

            await self.uow.commit()

            return Return.ok(TaskResponse.from_entity(*detail))
