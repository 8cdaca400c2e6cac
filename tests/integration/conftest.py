import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlmodel import SQLModel

from config import ApplicationConfig
from src.adapter.database import build_engine, build_session_factory, create_tables
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.depends import get_unit_of_work


class IntegrationConfig(ApplicationConfig):
    DB_URI = "sqlite+aiosqlite:///:memory:"
    BCRYPT_ROUNDS = 4
    ENABLE_LOGGING_MIDDLEWARE = False
    AUTO_CREATE_TABLES = False


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await create_tables(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = build_session_factory(engine)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    app = create_app(IntegrationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await app.state.engine.dispose()
