from uuid import UUID

from src.app.errors import BOARD_NOT_FOUND, CANNOT_UPDATE_BOARD
from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.libs.result import Result, Return

from .dtos import BoardResponse, UpdateBoardCommand


class UpdateBoardUseCase:
    """
    Rename a board.

    Business Rules:
    - Caller must be a member (else BOARD_NOT_FOUND)
    - Caller must be OWNER or MAINTAINER
    - updated_at is bumped
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, board_id: UUID, user_id: UUID, command: UpdateBoardCommand
    ) -> Result[BoardResponse]:
        async with self.uow:
            access = await MembershipAuthority(self.uow).require_manager(
                board_id, user_id, CANNOT_UPDATE_BOARD
            )
            if access.is_err():
                return access

            board = await self.uow.boards.get_by_id(board_id)
            if board is None:
                return Return.err(BOARD_NOT_FOUND)

            board.name = command.name
            board.updated_at = utcnow()
            board = await self.uow.boards.update(board)

            await self.uow.commit()

            return Return.ok(BoardResponse.from_entity(board, access.value.role))
