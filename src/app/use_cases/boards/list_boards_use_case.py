from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import BoardResponse


class ListBoardsUseCase:
    """Boards the user belongs to, most recently updated first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[BoardResponse]]:
        async with self.uow:
            rows = await self.uow.boards.list_for_user(user_id)
            return Return.ok([BoardResponse.from_entity(board, role) for board, role in rows])
