"""
Create Equipment Use Case
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import CreateEquipmentResponse, EquipmentCommand
from .list_equipments_use_case import QUERY_FAILED

logger = logging.getLogger(__name__)


class CreateEquipmentUseCase:
    """
    Register a new equipment.

    Business Logic:
    1. Classify the identifier into service_tag / imei
    2. Default estado to "EM USO" and centro_custo to ""
    3. Insert and commit
    4. Return the id assigned by the store
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: EquipmentCommand) -> Result[CreateEquipmentResponse]:
        record = command.to_equipment(apply_defaults=True)
        try:
            async with self.uow:
                equipment_id = await self.uow.equipments.insert(record)
                await self.uow.commit()
        except SQLAlchemyError:
            logger.exception("Equipment insert failed")
            return Return.err(QUERY_FAILED)

        logger.info("Equipment %s created", equipment_id)
        return Return.ok(CreateEquipmentResponse(id=equipment_id))
