import logging

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.memory_equipment_store import (
    MemoryEquipmentStore,
    seed_equipments,
)
from src.adapter.services.unit_of_work import MemoryUnitOfWork, SqlAlchemyUnitOfWork
from src.domain.entities import Equipment

logger = logging.getLogger(__name__)

engine = create_async_engine(
    ApplicationConfig.DB_URI, echo=False, future=True, pool_pre_ping=True
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Process-wide store for mock mode
memory_store = MemoryEquipmentStore(seed_equipments())


def backend_name() -> str:
    return "memory" if ApplicationConfig.MOCK_DB else "relational"


async def get_unit_of_work():
    if ApplicationConfig.MOCK_DB:
        yield MemoryUnitOfWork(memory_store)
        return
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def init_backend() -> None:
    """
    Prepare the selected backend before serving.

    The relational backend must be reachable; the equipamentos table is
    created if missing. The access log view is managed outside this service.

    Raises:
        SQLAlchemyError: if the database cannot be reached
    """
    if ApplicationConfig.MOCK_DB:
        logger.info("Using in-memory equipment store (%d seed records)", len(memory_store.records))
        return

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all, tables=[Equipment.__table__])
    logger.info("Connected to relational equipment store")


async def shutdown_backend() -> None:
    await engine.dispose()
