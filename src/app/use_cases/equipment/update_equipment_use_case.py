"""
Update Equipment Use Case
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import EquipmentCommand, OkResponse
from .list_equipments_use_case import QUERY_FAILED

logger = logging.getLogger(__name__)


class UpdateEquipmentUseCase:
    """
    Replace every field of an equipment.

    Fields missing from the command are cleared, no defaults are applied.
    Reports ok even when the id does not exist: the store does not tell
    "no row matched" apart from a successful update.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, equipment_id: int, command: EquipmentCommand) -> Result[OkResponse]:
        record = command.to_equipment()
        try:
            async with self.uow:
                await self.uow.equipments.update(equipment_id, record)
                await self.uow.commit()
        except SQLAlchemyError:
            logger.exception("Equipment %s update failed", equipment_id)
            return Return.err(QUERY_FAILED)

        return Return.ok(OkResponse())
