"""
Add Member Use Case

Grants an existing user a role on a board.
"""

import logging
from uuid import UUID

from src.app.errors import ALREADY_MEMBER, CANNOT_ADD_MEMBER, INVALID_ROLE, USER_NOT_FOUND
from src.app.repositories.membership_repository import MembershipAlreadyExists
from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BoardRole, Membership
from src.libs.result import Result, Return

from .dtos import AddMemberCommand, MemberResponse

logger = logging.getLogger(__name__)


class AddMemberUseCase:
    """
    Use case for adding a member to a board.

    Business Rules:
    - Role must be OWNER, MAINTAINER or MEMBER (defaults to MEMBER)
    - Caller must be OWNER or MAINTAINER of the board
    - Target user must exist
    - Target user must not already be a member; a concurrent duplicate
      rejected by the store yields the same ALREADY_MEMBER error
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, board_id: UUID, user_id: UUID, command: AddMemberCommand
    ) -> Result[MemberResponse]:
        try:
            role = BoardRole(command.role)
        except ValueError:
            return Return.err(INVALID_ROLE)

        async with self.uow:
            authority = MembershipAuthority(self.uow)

            access = await authority.require_manager(board_id, user_id, CANNOT_ADD_MEMBER)
            if access.is_err():
                return access

            try:
                target_user_id = UUID(command.user_id)
            except ValueError:
                return Return.err(USER_NOT_FOUND)

            target_user = await self.uow.users.get_by_id(target_user_id)
            if target_user is None:
                return Return.err(USER_NOT_FOUND)

            not_member = await authority.assert_not_already_member(board_id, target_user_id)
            if not_member.is_err():
                return not_member

            membership = Membership(user_id=target_user_id, board_id=board_id, role=role)
            try:
                membership = await self.uow.memberships.create(membership)
            except MembershipAlreadyExists:
                return Return.err(ALREADY_MEMBER)

            await self.uow.commit()

            logger.info(
                "User %s added to board %s as %s by %s",
                target_user_id,
                board_id,
                role.value,
                user_id,
            )
            return Return.ok(MemberResponse.from_entity(membership, target_user))
