"""Fixtures de test / Test fixtures.

Base SQLite en memoire par test, partagee via StaticPool.
One in-memory SQLite database per test, shared through StaticPool.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import rental_app.models  # noqa: F401
from rental_app.database import Base, get_db
from rental_app.main import app
from rental_app.services.car_service import CarService
from rental_app.services.client_service import ClientService
from rental_app.services.document_store import DocumentStore
from rental_app.services.rental_service import RentalService


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as session:
        yield session


@pytest.fixture
def store(session):
    return DocumentStore(session)


@pytest.fixture
def rental_service(store):
    return RentalService(store)


@pytest.fixture
async def car(store):
    return await CarService(store).create_car("Toyota Corolla", "123-TUN-4567")


@pytest.fixture
async def renter(store):
    return await ClientService(store).create_client("Amina Ben Salah", "P1234567", "DL-998877")


@pytest.fixture
async def client(engine):
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
