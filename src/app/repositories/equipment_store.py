from abc import ABC, abstractmethod
from typing import List, Tuple

from src.domain.entities import Equipment
from src.domain.queries import EquipmentFilter, PageSpec


class IEquipmentStore(ABC):
    """Equipment store interface - application layer"""

    @abstractmethod
    async def list(
        self, filters: EquipmentFilter, page: PageSpec
    ) -> Tuple[int, List[Equipment]]:
        """
        List equipment matching every active filter.

        Returns:
            Tuple of (total, items)
            - total: number of matching records, ignoring pagination
            - items: the requested page, ordered by id
        """
        pass

    @abstractmethod
    async def insert(self, record: Equipment) -> int:
        """Persist a new record and return its assigned id"""
        pass

    @abstractmethod
    async def update(self, equipment_id: int, record: Equipment) -> bool:
        """Replace every field of a record; True even if the id does not exist"""
        pass

    @abstractmethod
    async def remove(self, equipment_id: int) -> bool:
        """Hard delete a record; True even if the id does not exist"""
        pass
