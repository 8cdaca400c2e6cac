from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.membership_repository import (
    IMembershipRepository,
    MembershipAlreadyExists,
)
from src.domain.entities import BoardRole, Membership, User


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_board(
        self, user_id: UUID, board_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and board"""
        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.board_id == board_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_board_with_users(
        self, board_id: UUID
    ) -> List[Tuple[Membership, User]]:
        """All memberships of a board with their users, oldest first"""
        stmt = (
            select(Membership, User)
            .join(User, col(User.id) == col(Membership.user_id))
            .where(Membership.board_id == board_id)
            .order_by(col(Membership.joined_at).asc())
        )
        result = await self.session.exec(stmt)
        return [(membership, user) for membership, user in result.all()]

    async def count_by_role(self, board_id: UUID, role: BoardRole) -> int:
        """Count memberships of a board holding the given role"""
        stmt = select(func.count()).select_from(Membership).where(
            Membership.board_id == board_id, Membership.role == role
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise MembershipAlreadyExists(
                f"user {membership.user_id} already on board {membership.board_id}"
            ) from exc
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        await self.session.delete(membership)
        await self.session.flush()
