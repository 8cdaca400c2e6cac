from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import UserSearchResult

MIN_QUERY_LENGTH = 2


class SearchUsersUseCase:
    """
    Find users to invite by email or name.

    Queries shorter than two characters (after trimming) return an empty
    list without touching the store. The caller is never part of the result.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, query: str, user_id: UUID, limit: int = 10
    ) -> Result[List[UserSearchResult]]:
        needle = (query or "").strip()
        if len(needle) < MIN_QUERY_LENGTH:
            return Return.ok([])

        async with self.uow:
            users = await self.uow.users.search(needle, user_id, limit)
            return Return.ok([UserSearchResult.from_entity(user) for user in users])
