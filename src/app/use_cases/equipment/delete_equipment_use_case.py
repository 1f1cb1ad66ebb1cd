"""
Delete Equipment Use Case
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import OkResponse
from .list_equipments_use_case import QUERY_FAILED

logger = logging.getLogger(__name__)


class DeleteEquipmentUseCase:
    """Hard delete an equipment. Unknown ids are reported as ok."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, equipment_id: int) -> Result[OkResponse]:
        try:
            async with self.uow:
                await self.uow.equipments.remove(equipment_id)
                await self.uow.commit()
        except SQLAlchemyError:
            logger.exception("Equipment %s delete failed", equipment_id)
            return Return.err(QUERY_FAILED)

        logger.info("Equipment %s deleted", equipment_id)
        return Return.ok(OkResponse())
