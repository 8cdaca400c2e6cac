from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.board_repository import BoardRepository
from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.repositories.task_repository import TaskRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.boards = BoardRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.tasks = TaskRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
