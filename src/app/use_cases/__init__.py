"""
Use Cases

Organized into domain folders:
- auth/: Registration and login
- boards/: Board lifecycle
- members/: Board membership and user search
- tasks/: Tasks within a board

Import from subdirectories for better organization.
"""

from .auth import LoginUseCase, RegisterUseCase
from .boards import (
    CreateBoardUseCase,
    DeleteBoardUseCase,
    GetBoardUseCase,
    ListBoardsUseCase,
    UpdateBoardUseCase,
)
from .members import (
    AddMemberUseCase,
    ListMembersUseCase,
    RemoveMemberUseCase,
    SearchUsersUseCase,
    UpdateMemberRoleUseCase,
)
from .tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    # Boards
    "ListBoardsUseCase",
    "GetBoardUseCase",
    "CreateBoardUseCase",
    "UpdateBoardUseCase",
    "DeleteBoardUseCase",
    # Members
    "ListMembersUseCase",
    "AddMemberUseCase",
    "UpdateMemberRoleUseCase",
    "RemoveMemberUseCase",
    "SearchUsersUseCase",
    # Tasks
    "ListTasksUseCase",
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
]
