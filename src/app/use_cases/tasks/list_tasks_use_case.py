from typing import List
from uuid import UUID

from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import TaskResponse


class ListTasksUseCase:
    """Tasks of a board, newest first. Caller must be a member."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, board_id: UUID, user_id: UUID) -> Result[List[TaskResponse]]:
        async with self.uow:
            access = await MembershipAuthority(self.uow).require_membership(board_id, user_id)
            if access.is_err():
                return access

            rows = await self.uow.tasks.list_by_board(board_id)
            return Return.ok([TaskResponse.from_entity(*row) for row in rows])
