from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import raise_for_error
from src.api.utils.ids import parse_id
from src.app.errors import BOARD_NOT_FOUND, TASK_NOT_FOUND
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import (
    CreateTaskCommand,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    TaskResponse,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work
from src.domain.entities import TaskStatus

router = APIRouter(prefix="/boards/{board_id}/tasks", tags=["Tasks"])

INVALID_STATUS_MESSAGE = "Invalid status. Must be TODO, IN_PROGRESS, or DONE"


def _parse_status(value):
    try:
        return TaskStatus(value)
    except ValueError:
        raise ValueError(INVALID_STATUS_MESSAGE)


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class CreateTaskRequest(BaseModel):
    title: Optional[str] = Field(default=None, validate_default=True, max_length=255)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    assigned_to: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_required(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Task title is required")
        return value.strip()

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, value):
        return _strip(value)

    @field_validator("status", mode="before")
    @classmethod
    def valid_status(cls, value):
        if value is None:
            return value
        return _parse_status(value)


class UpdateTaskRequest(BaseModel):
    """Only fields present in the body are changed"""

    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    assigned_to: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_not_empty(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Task title cannot be empty")
        return value.strip()

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, value):
        return _strip(value)

    @field_validator("status", mode="before")
    @classmethod
    def valid_status(cls, value):
        return _parse_status(value)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TaskResponse])
async def list_tasks(
    board_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Tasks of a board, newest first"""
    result = await ListTasksUseCase(uow).execute(parse_id(board_id, BOARD_NOT_FOUND), user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskResponse)
async def create_task(
    board_id: str,
    request: CreateTaskRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a task

    Raises:
        - 400 Bad Request: Missing title, invalid status, assignee not a member
        - 404 Not Found: Board missing or caller is not a member
    """
    command = CreateTaskCommand(
        title=request.title,
        description=request.description,
        status=request.status or TaskStatus.todo,
        assigned_to=request.assigned_to,
    )
    result = await CreateTaskUseCase(uow).execute(
        parse_id(board_id, BOARD_NOT_FOUND), user_id, command
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def update_task(
    board_id: str,
    task_id: str,
    request: UpdateTaskRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partially update a task; ``assigned_to: null`` unassigns it

    Raises:
        - 400 Bad Request: Empty title, invalid status, assignee not a member
        - 404 Not Found: Board or task not found
    """
    command = UpdateTaskCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateTaskUseCase(uow).execute(
        parse_id(board_id, BOARD_NOT_FOUND),
        parse_id(task_id, TASK_NOT_FOUND),
        user_id,
        command,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    board_id: str,
    task_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete a task

    Raises:
        - 403 Forbidden: Caller is neither the creator nor an OWNER/MAINTAINER
        - 404 Not Found: Board or task not found
    """
    result = await DeleteTaskUseCase(uow).execute(
        parse_id(board_id, BOARD_NOT_FOUND),
        parse_id(task_id, TASK_NOT_FOUND),
        user_id,
    )
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
