"""
Member Use Cases

Board membership management and user lookup.
"""

from .add_member_use_case import AddMemberUseCase
from .dtos import (
    AddMemberCommand,
    MemberResponse,
    MemberUser,
    UpdateMemberRoleCommand,
    UserSearchResult,
)
from .list_members_use_case import ListMembersUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .search_users_use_case import SearchUsersUseCase
from .update_member_role_use_case import UpdateMemberRoleUseCase

__all__ = [
    # Use Cases
    "ListMembersUseCase",
    "AddMemberUseCase",
    "UpdateMemberRoleUseCase",
    "RemoveMemberUseCase",
    "SearchUsersUseCase",
    # DTOs
    "AddMemberCommand",
    "UpdateMemberRoleCommand",
    "MemberResponse",
    "MemberUser",
    "UserSearchResult",
]
