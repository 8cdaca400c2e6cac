from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.board_repository import IBoardRepository
from src.domain.entities import Board, BoardRole, Membership, Task


class BoardRepository(IBoardRepository):
    """Board repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, board_id: UUID) -> Optional[Board]:
        """Get board by ID"""
        stmt = select(Board).where(Board.id == board_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def lock(self, board_id: UUID) -> Optional[Board]:
        """Get board by ID with SELECT ... FOR UPDATE (no-op on SQLite)"""
        stmt = select(Board).where(Board.id == board_id).with_for_update()
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_user(self, user_id: UUID) -> List[Tuple[Board, BoardRole]]:
        """Boards the user is a member of with their role, newest update first"""
        stmt = (
            select(Board, Membership.role)
            .join(Membership, col(Membership.board_id) == col(Board.id))
            .where(Membership.user_id == user_id)
            .order_by(col(Board.updated_at).desc())
        )
        result = await self.session.exec(stmt)
        return [(board, role) for board, role in result.all()]

    async def create(self, board: Board) -> Board:
        """Create a new board"""
        self.session.add(board)
        await self.session.flush()
        await self.session.refresh(board)
        return board

    async def update(self, board: Board) -> Board:
        """Update existing board"""
        self.session.add(board)
        await self.session.flush()
        await self.session.refresh(board)
        return board

    async def delete(self, board_id: UUID) -> None:
        """
        Delete a board with its tasks and memberships.

        Done explicitly, children first, so the result does not depend on
        the database enforcing ON DELETE CASCADE.
        """
        await self.session.execute(delete(Task).where(col(Task.board_id) == board_id))
        await self.session.execute(
            delete(Membership).where(col(Membership.board_id) == board_id)
        )
        await self.session.execute(delete(Board).where(col(Board.id) == board_id))
        await self.session.flush()
