from typing import Iterable, List, Optional, Tuple

from src.app.repositories.equipment_store import IEquipmentStore
from src.domain.entities import Equipment
from src.domain.queries import EquipmentFilter, PageSpec


def seed_equipments() -> List[Equipment]:
    """Records available when the service starts in mock mode"""
    return [
        Equipment(
            id=1,
            tipo="Notebook",
            localizacao="Palmas-Escritório",
            fabricante="Dell",
            modelo="Latitude 3490",
            service_tag="ABC123",
            imei="",
            centro_custo="CC-100",
            estado="EM USO",
        ),
        Equipment(
            id=2,
            tipo="Celular",
            localizacao="Miracema Usina",
            fabricante="Samsung",
            modelo="A34",
            service_tag="",
            imei="359876543210123",
            centro_custo="CC-200",
            estado="Estoque",
        ),
    ]


def matches(record: Equipment, filters: EquipmentFilter) -> bool:
    for column, value in filters.exact_clauses().items():
        if getattr(record, column) != value:
            return False
    for column, value in filters.substring_clauses().items():
        if value.lower() not in (getattr(record, column) or "").lower():
            return False
    return True


class MemoryEquipmentStore(IEquipmentStore):
    """
    Equipment store kept in process memory.

    Records live in insertion order, which is also id order. Nothing here
    awaits; data is lost when the process exits.
    """

    def __init__(self, records: Optional[Iterable[Equipment]] = None):
        self.records: List[Equipment] = list(records or [])

    async def list(
        self, filters: EquipmentFilter, page: PageSpec
    ) -> Tuple[int, List[Equipment]]:
        found = [record for record in self.records if matches(record, filters)]
        return len(found), found[page.offset:page.offset + page.limit]

    async def insert(self, record: Equipment) -> int:
        new_id = max((existing.id for existing in self.records), default=0) + 1
        self.records.append(Equipment(id=new_id, **record.column_values()))
        record.id = new_id
        return new_id

    async def update(self, equipment_id: int, record: Equipment) -> bool:
        for index, existing in enumerate(self.records):
            if existing.id == equipment_id:
                self.records[index] = Equipment(id=equipment_id, **record.column_values())
                break
        return True

    async def remove(self, equipment_id: int) -> bool:
        self.records = [record for record in self.records if record.id != equipment_id]
        return True
