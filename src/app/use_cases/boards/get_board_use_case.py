from uuid import UUID

from src.app.errors import BOARD_NOT_FOUND
from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import BoardResponse


class GetBoardUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, board_id: UUID, user_id: UUID) -> Result[BoardResponse]:
        async with self.uow:
            access = await MembershipAuthority(self.uow).require_membership(board_id, user_id)
            if access.is_err():
                return access

            board = await self.uow.boards.get_by_id(board_id)
            if board is None:
                return Return.err(BOARD_NOT_FOUND)

            return Return.ok(BoardResponse.from_entity(board, access.value.role))
