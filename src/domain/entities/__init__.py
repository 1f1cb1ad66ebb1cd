"""
Inventory Domain Entities

Each entity in its own file.
"""

from .equipment import DEFAULT_ESTADO, Equipment
from .access_log import AccessLog

__all__ = [
    "DEFAULT_ESTADO",
    "Equipment",
    "AccessLog",
]
