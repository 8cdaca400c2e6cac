"""
Create Board Use Case

Creates a board and makes its creator the first OWNER.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Board, BoardRole, Membership
from src.libs.result import Result, Return

from .dtos import BoardResponse, CreateBoardCommand


class CreateBoardUseCase:
    """
    Use case for creating a board.

    Business Rules:
    - Board and the creator's OWNER membership are written in one
      transaction, so a board without an owner is never visible
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateBoardCommand, user_id: UUID) -> Result[BoardResponse]:
        async with self.uow:
            board = Board(name=command.name)
            board = await self.uow.boards.create(board)

            membership = Membership(user_id=user_id, board_id=board.id, role=BoardRole.owner)
            await self.uow.memberships.create(membership)

            await self.uow.commit()

            return Return.ok(BoardResponse.from_entity(board, BoardRole.owner))
