"""
Equipment Use Cases

Inventory CRUD over whichever equipment store is active.
"""

from .dtos import (
    CreateEquipmentResponse,
    EquipmentCommand,
    EquipmentPageResponse,
    OkResponse,
)
from .list_equipments_use_case import ListEquipmentsUseCase
from .create_equipment_use_case import CreateEquipmentUseCase
from .update_equipment_use_case import UpdateEquipmentUseCase
from .delete_equipment_use_case import DeleteEquipmentUseCase

__all__ = [
    "ListEquipmentsUseCase",
    "CreateEquipmentUseCase",
    "UpdateEquipmentUseCase",
    "DeleteEquipmentUseCase",
    "EquipmentCommand",
    "EquipmentPageResponse",
    "CreateEquipmentResponse",
    "OkResponse",
]
