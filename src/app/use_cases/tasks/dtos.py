"""
Task Use Case DTOs (Data Transfer Objects)

Command/Response pattern for task operations.
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.base import isoformat_utc
from src.domain.entities import Task, TaskStatus, User


# ============================================================================
# Command DTOs
# ============================================================================


class CreateTaskCommand(BaseModel):
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.todo
    assigned_to: Optional[str] = None


class UpdateTaskCommand(BaseModel):
    """
    Partial update.

    Only fields present in ``model_fields_set`` are applied, so an explicit
    ``assigned_to=None`` clears the assignment while an omitted field is left
    untouched.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    assigned_to: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserSummary(BaseModel):
    id: str
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserSummary":
        return cls(id=str(user.id), name=user.name, email=user.email)


class TaskResponse(BaseModel):
    id: str
    title: str
    description: Optional[str]
    status: TaskStatus
    board_id: str
    created_by: str
    assigned_to: Optional[str]
    created_at: str
    updated_at: str
    creator: UserSummary
    assignee: Optional[UserSummary]

    @classmethod
    def from_entity(
        cls, task: Task, creator: User, assignee: Optional[User]
    ) -> "TaskResponse":
        return cls(
            id=str(task.id),
            title=task.title,
            description=task.description,
            status=task.status,
            board_id=str(task.board_id),
            created_by=str(task.created_by),
            assigned_to=str(task.assigned_to) if task.assigned_to else None,
            created_at=isoformat_utc(task.created_at),
            updated_at=isoformat_utc(task.updated_at),
            creator=UserSummary.from_entity(creator),
            assignee=UserSummary.from_entity(assignee) if assignee else None,
        )
