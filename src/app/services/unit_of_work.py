from abc import ABC, abstractmethod

from src.app.repositories.access_log_repository import IAccessLogRepository
from src.app.repositories.equipment_store import IEquipmentStore


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    equipments: IEquipmentStore
    access_logs: IAccessLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
