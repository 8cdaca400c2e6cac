"""
Delete Board Use Case

Removes a board with all of its memberships and tasks.
"""

import logging
from uuid import UUID

from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

logger = logging.getLogger(__name__)


class DeleteBoardUseCase:
    """
    Use case for deleting a board.

    Business Rules:
    - Caller must be a member (else BOARD_NOT_FOUND)
    - Only OWNER may delete
    - Tasks, memberships and the board go in a single transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, board_id: UUID, user_id: UUID) -> Result[None]:
        async with self.uow:
            authority = MembershipAuthority(self.uow)
            access = await authority.require_membership(board_id, user_id)
            if access.is_err():
                return access

            allowed = authority.require_owner_role(access.value)
            if allowed.is_err():
                return allowed

            await self.uow.boards.delete(board_id)
            await self.uow.commit()

            logger.info("Board %s deleted by user %s", board_id, user_id)
            return Return.ok(None)
