from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members import SearchUsersUseCase, UserSearchResult
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/search", status_code=status.HTTP_200_OK, response_model=List[UserSearchResult])
async def search_users(
    q: str = Query(default="", description="Email or name fragment (min 2 chars)"),
    limit: int = Query(
        default=ApplicationConfig.SEARCH_DEFAULT_LIMIT,
        ge=1,
        le=ApplicationConfig.SEARCH_MAX_LIMIT,
    ),
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Search users to invite

    Matches email or name case-insensitively and never returns the caller.
    Queries shorter than two characters return an empty list.
    """
    result = await SearchUsersUseCase(uow).execute(q, user_id, limit)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
