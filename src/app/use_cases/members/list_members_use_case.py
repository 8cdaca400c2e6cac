from typing import List
from uuid import UUID

from src.app.services.membership_authority import MembershipAuthority
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import MemberResponse


class ListMembersUseCase:
    """Members of a board in join order. Caller must be a member."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, board_id: UUID, user_id: UUID) -> Result[List[MemberResponse]]:
        async with self.uow:
            access = await MembershipAuthority(self.uow).require_membership(board_id, user_id)
            if access.is_err():
                return access

            rows = await self.uow.memberships.list_by_board_with_users(board_id)
            return Return.ok(
                [MemberResponse.from_entity(membership, user) for membership, user in rows]
            )
