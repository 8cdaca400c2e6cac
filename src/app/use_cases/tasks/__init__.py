"""
Task Use Cases

Tasks live on a board and are visible to all of its members.
"""

from .create_task_use_case import CreateTaskUseCase
from .delete_task_use_case import DeleteTaskUseCase
from .dtos import CreateTaskCommand, TaskResponse, UpdateTaskCommand, UserSummary
from .list_tasks_use_case import ListTasksUseCase
from .update_task_use_case import UpdateTaskUseCase

__all__ = [
    # Use Cases
    "ListTasksUseCase",
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    # DTOs
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "TaskResponse",
    "UserSummary",
]
