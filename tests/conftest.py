"""
Pytest configuration and fixtures.
"""
import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from db import beer  # noqa: F401  registers the beers table
from db.beer_store import InMemoryBeerStore, SqlAlchemyBeerStore
from db.database import Base
from main import app
from routers.beers import get_beer_store
from services.beer_service import BeerService


@pytest.fixture
def store():
    return InMemoryBeerStore()


@pytest.fixture
def service(store):
    return BeerService(store)


@pytest_asyncio.fixture
async def client(store):
    """API client backed by the in-memory store."""
    app.dependency_overrides[get_beer_store] = lambda: store
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_session():
    """Session on a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, expire_on_commit=False)
    async with session_maker() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def sql_store(db_session):
    return SqlAlchemyBeerStore(db_session)
