from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository, UserAlreadyExists
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise UserAlreadyExists(f"email {user.email} already registered") from exc
        await self.session.refresh(user)
        return user

    async def search(
        self, query: str, exclude_user_id: UUID, limit: int
    ) -> List[User]:
        """Case-insensitive substring search on email or name"""
        needle = query.lower()
        stmt = (
            select(User)
            .where(
                User.id != exclude_user_id,
                or_(
                    func.lower(col(User.email)).contains(needle, autoescape=True),
                    func.lower(col(User.name)).contains(needle, autoescape=True),
                ),
            )
            .order_by(col(User.name).asc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
