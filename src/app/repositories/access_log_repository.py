from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import AccessLog


class IAccessLogRepository(ABC):
    """AccessLog repository interface - application layer (read-only)"""

    @abstractmethod
    async def list_recent(self, limit: int) -> List[AccessLog]:
        """Get at most `limit` access log entries ordered by data_hora DESC"""
        pass
