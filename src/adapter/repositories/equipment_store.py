from typing import List, Tuple

from sqlalchemy import delete, func
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.equipment_store import IEquipmentStore
from src.domain.entities import Equipment
from src.domain.queries import EquipmentFilter, PageSpec


def apply_filters(stmt, filters: EquipmentFilter):
    """AND every active filter clause onto a select statement"""
    for column, value in filters.exact_clauses().items():
        stmt = stmt.where(getattr(Equipment, column) == value)
    for column, value in filters.substring_clauses().items():
        stmt = stmt.where(getattr(Equipment, column).icontains(value, autoescape=True))
    return stmt


class SqlEquipmentStore(IEquipmentStore):
    """Equipment store implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(
        self, filters: EquipmentFilter, page: PageSpec
    ) -> Tuple[int, List[Equipment]]:
        stmt = (
            apply_filters(select(Equipment), filters)
            .order_by(Equipment.id)
            .offset(page.offset)
            .limit(page.limit)
        )
        result = await self.session.execute(stmt)
        items = list(result.scalars().all())

        # Count runs without pagination so total reflects the whole match set
        count_stmt = apply_filters(select(func.count()).select_from(Equipment), filters)
        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar_one()

        return total, items

    async def insert(self, record: Equipment) -> int:
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record.id

    async def update(self, equipment_id: int, record: Equipment) -> bool:
        stmt = (
            update(Equipment)
            .where(Equipment.id == equipment_id)
            .values(**record.column_values())
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return True

    async def remove(self, equipment_id: int) -> bool:
        stmt = delete(Equipment).where(Equipment.id == equipment_id)
        await self.session.execute(stmt)
        await self.session.flush()
        return True
