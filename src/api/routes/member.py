from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import raise_for_error
from src.api.utils.ids import parse_id
from src.app.errors import BOARD_NOT_FOUND, MEMBER_NOT_FOUND
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members import (
    AddMemberCommand,
    AddMemberUseCase,
    ListMembersUseCase,
    MemberResponse,
    RemoveMemberUseCase,
    UpdateMemberRoleCommand,
    UpdateMemberRoleUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work
from src.domain.entities import BoardRole

router = APIRouter(prefix="/boards/{board_id}/members", tags=["Members"])


class AddMemberRequest(BaseModel):
    """Role is validated by the use case so invalid values share one error"""

    user_id: Optional[str] = Field(default=None, validate_default=True)
    role: Optional[str] = Field(default=None, description="OWNER, MAINTAINER or MEMBER")

    @field_validator("user_id", mode="before")
    @classmethod
    def user_id_required(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError("User ID is required")
        return value.strip()


class UpdateMemberRoleRequest(BaseModel):
    role: Optional[str] = Field(default=None, description="OWNER, MAINTAINER or MEMBER")


@router.get("", status_code=status.HTTP_200_OK, response_model=List[MemberResponse])
async def list_members(
    board_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Members of a board in join order"""
    result = await ListMembersUseCase(uow).execute(parse_id(board_id, BOARD_NOT_FOUND), user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MemberResponse)
async def add_member(
    board_id: str,
    request: AddMemberRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add a user to a board

    Raises:
        - 400 Bad Request: Missing user_id or invalid role
        - 403 Forbidden: Caller is a MEMBER
        - 404 Not Found: Board or user not found
        - 409 Conflict: User is already a member
    """
    command = AddMemberCommand(
        user_id=request.user_id, role=request.role or BoardRole.member.value
    )
    result = await AddMemberUseCase(uow).execute(
        parse_id(board_id, BOARD_NOT_FOUND), user_id, command
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{member_user_id}", status_code=status.HTTP_200_OK, response_model=MemberResponse)
async def update_member_role(
    board_id: str,
    member_user_id: str,
    request: UpdateMemberRoleRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change a member's role

    Raises:
        - 400 Bad Request: Invalid role
        - 403 Forbidden: Caller is a MEMBER, or target is the last OWNER
        - 404 Not Found: Board or member not found
    """
    command = UpdateMemberRoleCommand(role=request.role or "")
    result = await UpdateMemberRoleUseCase(uow).execute(
        parse_id(board_id, BOARD_NOT_FOUND),
        user_id,
        parse_id(member_user_id, MEMBER_NOT_FOUND),
        command,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{member_user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_member(
    board_id: str,
    member_user_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove a member from a board (also used to leave a board)

    Raises:
        - 403 Forbidden: Caller is a MEMBER, or target is the last OWNER
        - 404 Not Found: Board or member not found
    """
    result = await RemoveMemberUseCase(uow).execute(
        parse_id(board_id, BOARD_NOT_FOUND),
        user_id,
        parse_id(member_user_id, MEMBER_NOT_FOUND),
    )
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
