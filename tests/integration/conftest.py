import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.app_client import build_client
from src.adapter.repositories.memory_equipment_store import (
    MemoryEquipmentStore,
    seed_equipments,
)
from src.adapter.services.unit_of_work import MemoryUnitOfWork, SqlAlchemyUnitOfWork


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


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


@pytest_asyncio.fixture
async def client(db_session):
    """Relational backend over SQLite"""

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    async with build_client(override_get_unit_of_work) as ac:
        yield ac


@pytest_asyncio.fixture
def memory_store():
    return MemoryEquipmentStore(seed_equipments())


@pytest_asyncio.fixture
async def memory_client(memory_store):
    """Memory backend with the two seed records"""

    async def override_get_unit_of_work():
        yield MemoryUnitOfWork(memory_store)

    async with build_client(override_get_unit_of_work) as ac:
        yield ac


@pytest_asyncio.fixture(params=["memory", "relational"])
async def backend_client(request, db_session):
    """Same empty inventory on either backend"""
    store = MemoryEquipmentStore()

    async def override_get_unit_of_work():
        if request.param == "memory":
            yield MemoryUnitOfWork(store)
        else:
            yield SqlAlchemyUnitOfWork(db_session)

    async with build_client(override_get_unit_of_work) as ac:
        yield ac
