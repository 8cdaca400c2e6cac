"""
Membership Authority

Single source of truth for "who may do what on which board". Every check is
a fresh lookup through the unit of work; nothing is cached between calls.
"""

import logging
from uuid import UUID

from src.app.errors import (
    ALREADY_MEMBER,
    ASSIGNEE_NOT_MEMBER,
    BOARD_NOT_FOUND,
    CANNOT_DELETE_BOARD,
    CANNOT_UPDATE_BOARD,
    LAST_OWNER_REMOVAL,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BoardRole, Membership
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class MembershipAuthority:
    """
    Board-scoped access checks and the last-owner invariant.

    Rules:
    - A user without a membership gets BOARD_NOT_FOUND, never a 403, so the
      existence of a board is not revealed to outsiders
    - OWNER and MAINTAINER are equivalent for management actions; only
      OWNER may delete a board
    - Acting on an OWNER target is gated by the OWNER count alone: a
      MAINTAINER may demote or remove a co-owner while another owner remains
    - A board always keeps at least one OWNER
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def require_membership(self, board_id: UUID, user_id: UUID) -> Result[Membership]:
        membership = await self.uow.memberships.get_by_user_and_board(user_id, board_id)
        if membership is None:
            return Return.err(BOARD_NOT_FOUND)
        return Return.ok(membership)

    @staticmethod
    def require_manager_role(
        membership: Membership, denial: Error = CANNOT_UPDATE_BOARD
    ) -> Result[Membership]:
        if not membership.role.is_manager:
            return Return.err(denial)
        return Return.ok(membership)

    @staticmethod
    def require_owner_role(
        membership: Membership, denial: Error = CANNOT_DELETE_BOARD
    ) -> Result[Membership]:
        if membership.role != BoardRole.owner:
            return Return.err(denial)
        return Return.ok(membership)

    async def require_manager(
        self, board_id: UUID, user_id: UUID, denial: Error = CANNOT_UPDATE_BOARD
    ) -> Result[Membership]:
        """require_membership followed by require_manager_role"""
        result = await self.require_membership(board_id, user_id)
        if result.is_err():
            return result
        return self.require_manager_role(result.value, denial)

    async def assert_not_last_owner(
        self, board_id: UUID, target: Membership, denial: Error = LAST_OWNER_REMOVAL
    ) -> Result[None]:
        """
        Reject when ``target`` is the only OWNER of the board.

        The board row is locked before counting so that two concurrent
        owner demotions/removals cannot both observe two owners and leave
        none. The lock lasts until the caller's transaction ends.
        """
        if target.role != BoardRole.owner:
            return Return.ok(None)

        await self.uow.boards.lock(board_id)
        owner_count = await self.uow.memberships.count_by_role(board_id, BoardRole.owner)
        if owner_count <= 1:
            logger.warning(
                "Rejected last-owner change on board %s for user %s",
                board_id,
                target.user_id,
            )
            return Return.err(denial)
        return Return.ok(None)

    async def assert_owner_remains(
        self, board_id: UUID, denial: Error = LAST_OWNER_REMOVAL
    ) -> Result[None]:
        """
        Recount OWNERs after a flushed demotion/removal of an OWNER.

        Stores that ignore FOR UPDATE (SQLite) only serialize at the first
        write, so the pre-check can pass in two transactions at once. The
        recount runs after this transaction's write and sees every change
        committed before it. On error the caller must not commit.
        """
        owner_count = await self.uow.memberships.count_by_role(board_id, BoardRole.owner)
        if owner_count < 1:
            logger.warning("Rejected change leaving board %s without an owner", board_id)
            return Return.err(denial)
        return Return.ok(None)

    async def assert_user_is_board_member(
        self, board_id: UUID, user_id: UUID
    ) -> Result[Membership]:
        membership = await self.uow.memberships.get_by_user_and_board(user_id, board_id)
        if membership is None:
            return Return.err(ASSIGNEE_NOT_MEMBER)
        return Return.ok(membership)

    async def assert_not_already_member(self, board_id: UUID, user_id: UUID) -> Result[None]:
        existing = await self.uow.memberships.get_by_user_and_board(user_id, board_id)
        if existing is not None:
            return Return.err(ALREADY_MEMBER)
        return Return.ok(None)
