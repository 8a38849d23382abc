from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from vendor_lifecycle.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from vendor_lifecycle.api.utils.jwt import create_access_token
from vendor_lifecycle.depends import get_unit_of_work


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def session_factory(engine):
    """Independent sessions on the shared engine, one per concurrent caller"""
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from vendor_lifecycle.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def bearer(principal_id, role, email=None):
    token = create_access_token(principal_id, role, email=email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    return bearer(uuid4(), "admin", "admin@buyer.com")


@pytest.fixture
def new_vendor():
    """Factory for fresh vendor principals: returns (principal_id, headers)"""

    def _make():
        principal_id = uuid4()
        return principal_id, bearer(principal_id, "vendor")

    return _make
