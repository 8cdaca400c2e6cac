"""
Update Member Role Use Case

Changes a member's role within a board.
"""

import logging
from uuid import UUID

from src.app.errors import (
    CANNOT_UPDATE_MEMBER_ROLE,
    INVALID_ROLE,
    LAST_OWNER_ROLE_CHANGE,
    MEMBER_NOT_FOUND,
    USER_NOT_FOUND,
)
from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BoardRole
from src.libs.result import Result, Return

from .dtos import MemberResponse, UpdateMemberRoleCommand

logger = logging.getLogger(__name__)


class UpdateMemberRoleUseCase:
    """
    Use case for changing a member's role.

    Business Rules:
    - Role must be OWNER, MAINTAINER or MEMBER (checked before anything else)
    - Caller must be OWNER or MAINTAINER of the board
    - Target must be a member of the board
    - The last OWNER's role cannot be changed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        board_id: UUID,
        user_id: UUID,
        target_user_id: UUID,
        command: UpdateMemberRoleCommand,
    ) -> Result[MemberResponse]:
        """
        Execute update member role use case.

        Args:
            board_id: Board ID
            user_id: User ID of the caller
            target_user_id: User ID whose role is being changed
            command: UpdateMemberRoleCommand with the new role

        Returns:
            Result with the updated member view, or Error
        """
        try:
            new_role = BoardRole(command.role)
        except ValueError:
            return Return.err(INVALID_ROLE)

        async with self.uow:
            authority = MembershipAuthority(self.uow)

            access = await authority.require_manager(
                board_id, user_id, CANNOT_UPDATE_MEMBER_ROLE
            )
            if access.is_err():
                return access

            target = await self.uow.memberships.get_by_user_and_board(target_user_id, board_id)
            if target is None:
                return Return.err(MEMBER_NOT_FOUND)

            guard = await authority.assert_not_last_owner(
                board_id, target, LAST_OWNER_ROLE_CHANGE
            )
            if guard.is_err():
                return guard

            target_user = await self.uow.users.get_by_id(target_user_id)
            if target_user is None:
                return Return.err(USER_NOT_FOUND)

            old_role = target.role
            target.role = new_role
            target = await self.uow.memberships.update(target)

            if old_role == BoardRole.owner:
                remains = await authority.assert_owner_remains(board_id, LAST_OWNER_ROLE_CHANGE)
                if remains.is_err():
                    return remains

            await self.uow.commit()

            logger.info(
                "Role of user %s on board %s changed from %s to %s by %s",
                target_user_id,
                board_id,
                old_role.value,
                new_role.value,
                user_id,
            )
            return Return.ok(MemberResponse.from_entity(target, target_user))
