from typing import Optional
from uuid import UUID

from src.app.errors import ASSIGNEE_NOT_MEMBER
from src.app.services.membership_authority import MembershipAuthority
from src.libs.result import Result, Return


async def resolve_assignee(
    authority: MembershipAuthority, board_id: UUID, assigned_to: Optional[str]
) -> Result[Optional[UUID]]:
    """Parse an assignee id and check it belongs to a member of the board"""
    if assigned_to is None:
        return Return.ok(None)

    try:
        assignee_id = UUID(assigned_to)
    except ValueError:
        return Return.err(ASSIGNEE_NOT_MEMBER)

    check = await authority.assert_user_is_board_member(board_id, assignee_id)
    if check.is_err():
        return check
    return Return.ok(assignee_id)
