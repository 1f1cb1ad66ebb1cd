"""
Use Cases

Organized into domain folders:
- equipment/: Inventory CRUD
- access_logs/: Access log listing
"""

from .equipment import (
    ListEquipmentsUseCase,
    CreateEquipmentUseCase,
    UpdateEquipmentUseCase,
    DeleteEquipmentUseCase,
)
from .access_logs import (
    ListAccessLogsUseCase,
)

__all__ = [
    # Equipment
    "ListEquipmentsUseCase",
    "CreateEquipmentUseCase",
    "UpdateEquipmentUseCase",
    "DeleteEquipmentUseCase",
    # Access logs
    "ListAccessLogsUseCase",
]
