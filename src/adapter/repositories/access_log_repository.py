from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.access_log_repository import IAccessLogRepository
from src.domain.entities import AccessLog


class SqlAccessLogRepository(IAccessLogRepository):
    """AccessLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_recent(self, limit: int) -> List[AccessLog]:
        stmt = select(AccessLog).order_by(AccessLog.data_hora.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class EmptyAccessLogRepository(IAccessLogRepository):
    """Mock mode has no access log"""

    async def list_recent(self, limit: int) -> List[AccessLog]:
        return []
