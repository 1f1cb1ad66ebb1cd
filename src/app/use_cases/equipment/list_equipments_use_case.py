"""
List Equipments Use Case

Filtered, paginated listing of the inventory.
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.queries import EquipmentFilter, PageSpec

from .dtos import EquipmentPageResponse

logger = logging.getLogger(__name__)

QUERY_FAILED = Error("EQUIPMENT_QUERY_FAILED", "Falha ao consultar equipamentos.")


class ListEquipmentsUseCase:
    """
    Use case for listing equipment.

    Business Rules:
    - page and page_size are parsed leniently; anything non-numeric or
      non-positive falls back to 1 and 10
    - page_size has no upper bound
    - total counts every match, not just the returned page
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        filters: EquipmentFilter,
        page: Any = None,
        page_size: Any = None,
    ) -> Result[EquipmentPageResponse]:
        page_spec = PageSpec.parse(page, page_size)
        try:
            async with self.uow:
                total, items = await self.uow.equipments.list(filters, page_spec)
                data = [item.model_dump() for item in items]
        except SQLAlchemyError:
            logger.exception("Equipment list failed")
            return Return.err(QUERY_FAILED)

        return Return.ok(
            EquipmentPageResponse(
                total=total,
                page=page_spec.page,
                data=data,
            )
        )
