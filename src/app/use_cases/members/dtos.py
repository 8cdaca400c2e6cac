"""
Member Use Case DTOs (Data Transfer Objects)

All Command and Response classes for board membership.
Provides type safety and clear contracts between layers.
"""

from pydantic import BaseModel

from src.domain.base import isoformat_utc
from src.domain.entities import BoardRole, Membership, User


# ============================================================================
# Command DTOs
# ============================================================================


class AddMemberCommand(BaseModel):
    """Role is kept as raw text and parsed by the use case"""

    user_id: str
    role: str = BoardRole.member.value


class UpdateMemberRoleCommand(BaseModel):
    role: str


# ============================================================================
# Response DTOs
# ============================================================================


class MemberUser(BaseModel):
    """Public profile of a board member"""

    id: str
    email: str
    name: str
    created_at: str

    @classmethod
    def from_entity(cls, user: User) -> "MemberUser":
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name,
            created_at=isoformat_utc(user.created_at),
        )


class MemberResponse(BaseModel):
    id: str
    user_id: str
    board_id: str
    role: BoardRole
    joined_at: str
    user: MemberUser

    @classmethod
    def from_entity(cls, membership: Membership, user: User) -> "MemberResponse":
        return cls(
            id=str(membership.id),
            user_id=str(membership.user_id),
            board_id=str(membership.board_id),
            role=membership.role,
            joined_at=isoformat_utc(membership.joined_at),
            user=MemberUser.from_entity(user),
        )


# Search results share the public profile shape
UserSearchResult = MemberUser
