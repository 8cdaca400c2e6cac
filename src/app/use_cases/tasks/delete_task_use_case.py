"""
Delete Task Use Case
"""

from uuid import UUID

from src.app.errors import CANNOT_DELETE_TASK, TASK_NOT_FOUND
from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return


class DeleteTaskUseCase:
    """
    Use case for deleting a task.

    Business Rules:
    - Caller must be a member of the board
    - Task must belong to the board
    - Allowed for the task's creator and for OWNER/MAINTAINER
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, board_id: UUID, task_id: UUID, user_id: UUID) -> Result[None]:
        async with self.uow:
            access = await MembershipAuthority(self.uow).require_membership(board_id, user_id)
            if access.is_err():
                return access

            task = await self.uow.tasks.get_in_board(task_id, board_id)
            if task is None:
                return Return.err(TASK_NOT_FOUND)

            if task.created_by != user_id and not access.value.role.is_manager:
                return Return.err(CANNOT_DELETE_TASK)

            await self.uow.tasks.delete(task)
            await self.uow.commit()

            return Return.ok(None)
