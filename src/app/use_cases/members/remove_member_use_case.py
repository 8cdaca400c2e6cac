"""
Remove Member Use Case

Revokes a user's membership on a board.
"""

import logging
from uuid import UUID

from src.app.errors import CANNOT_REMOVE_MEMBER, LAST_OWNER_REMOVAL, MEMBER_NOT_FOUND
from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BoardRole
from src.libs.result import Result, Return

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing a member from a board.

    Business Rules:
    - Caller must be OWNER or MAINTAINER of the board
    - Target must be a member of the board
    - The last OWNER cannot be removed
    - Removing oneself follows the same rules
    - Tasks created by or assigned to the member are kept
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, board_id: UUID, user_id: UUID, target_user_id: UUID) -> Result[None]:
        async with self.uow:
            authority = MembershipAuthority(self.uow)

            access = await authority.require_manager(board_id, user_id, CANNOT_REMOVE_MEMBER)
            if access.is_err():
                return access

            target = await self.uow.memberships.get_by_user_and_board(target_user_id, board_id)
            if target is None:
                return Return.err(MEMBER_NOT_FOUND)

            guard = await authority.assert_not_last_owner(board_id, target, LAST_OWNER_REMOVAL)
            if guard.is_err():
                return guard

            was_owner = target.role == BoardRole.owner
            await self.uow.memberships.delete(target)

            if was_owner:
                remains = await authority.assert_owner_remains(board_id, LAST_OWNER_REMOVAL)
                if remains.is_err():
                    return remains

            await self.uow.commit()

            logger.info(
                "User %s removed from board %s by %s", target_user_id, board_id, user_id
            )
            return Return.ok(None)
