from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.access_log_repository import (
    EmptyAccessLogRepository,
    SqlAccessLogRepository,
)
from src.adapter.repositories.equipment_store import SqlEquipmentStore
from src.adapter.repositories.memory_equipment_store import MemoryEquipmentStore
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.equipments = SqlEquipmentStore(self.session)
        self.access_logs = SqlAccessLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()


class MemoryUnitOfWork(UnitOfWork):
    """In-memory UnitOfWork; writes apply immediately, commit/rollback do nothing"""

    def __init__(self, store: MemoryEquipmentStore):
        self.store = store

    async def __aenter__(self):
        self.equipments = self.store
        self.access_logs = EmptyAccessLogRepository()
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        pass

    async def rollback(self):
        pass
