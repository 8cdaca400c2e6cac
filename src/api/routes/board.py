from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import raise_for_error
from src.api.utils.ids import parse_id
from src.app.errors import BOARD_NOT_FOUND
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.boards import (
    BoardResponse,
    CreateBoardCommand,
    CreateBoardUseCase,
    DeleteBoardUseCase,
    GetBoardUseCase,
    ListBoardsUseCase,
    UpdateBoardCommand,
    UpdateBoardUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/boards", tags=["Boards"])


class BoardRequest(BaseModel):
    """Create/rename payload. The name is trimmed and must not be empty."""

    name: Optional[str] = Field(default=None, validate_default=True, max_length=255)

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Board name is required")
        return value.strip()


@router.get("", status_code=status.HTTP_200_OK, response_model=List[BoardResponse])
async def list_boards(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Boards the caller belongs to, with the caller's role on each"""
    result = await ListBoardsUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{board_id}", status_code=status.HTTP_200_OK, response_model=BoardResponse)
async def get_board(
    board_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get a board

    Raises:
        - 404 Not Found: Board missing or caller is not a member
    """
    result = await GetBoardUseCase(uow).execute(parse_id(board_id, BOARD_NOT_FOUND), user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BoardResponse)
async def create_board(
    request: BoardRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Create a board; the caller becomes its OWNER"""
    command = CreateBoardCommand(name=request.name)
    result = await CreateBoardUseCase(uow).execute(command, user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{board_id}", status_code=status.HTTP_200_OK, response_model=BoardResponse)
async def update_board(
    board_id: str,
    request: BoardRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Rename a board

    Raises:
        - 400 Bad Request: Empty name
        - 403 Forbidden: Caller is a MEMBER
        - 404 Not Found: Board missing or caller is not a member
    """
    command = UpdateBoardCommand(name=request.name)
    result = await UpdateBoardUseCase(uow).execute(
        parse_id(board_id, BOARD_NOT_FOUND), user_id, command
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{board_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_board(
    board_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete a board with its members and tasks

    Raises:
        - 403 Forbidden: Caller is not an OWNER
        - 404 Not Found: Board missing or caller is not a member
    """
    result = await DeleteBoardUseCase(uow).execute(parse_id(board_id, BOARD_NOT_FOUND), user_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
