"""
Equipment Use Case DTOs (Data Transfer Objects)

Command and Response classes for the equipment inventory.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, field_validator

from src.domain.entities import DEFAULT_ESTADO, Equipment
from src.domain.identifier import resolve_identificador


# ============================================================================
# Command DTOs
# ============================================================================


class EquipmentCommand(BaseModel):
    """
    Create/update payload.

    identificador, service_tag and imei all feed the same classifier; the
    first non-empty one wins.
    """

    tipo: Optional[str] = None
    localizacao: Optional[str] = None
    fabricante: Optional[str] = None
    modelo: Optional[str] = None
    identificador: Optional[str] = None
    service_tag: Optional[str] = None
    imei: Optional[str] = None
    centro_custo: Optional[str] = None
    estado: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        # Numeric JSON values are stored as text
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_equipment(self, apply_defaults: bool = False) -> Equipment:
        identifiers = resolve_identificador(self.identificador, self.service_tag, self.imei)
        centro_custo = self.centro_custo
        estado = self.estado
        if apply_defaults:
            centro_custo = centro_custo or ""
            estado = estado or DEFAULT_ESTADO
        return Equipment(
            tipo=self.tipo,
            localizacao=self.localizacao,
            fabricante=self.fabricante,
            modelo=self.modelo,
            service_tag=identifiers.service_tag,
            imei=identifiers.imei,
            centro_custo=centro_custo,
            estado=estado,
        )


# ============================================================================
# Response DTOs
# ============================================================================


class EquipmentPageResponse(BaseModel):
    """Page envelope for equipment listings"""

    total: int
    page: int
    data: List[Dict[str, Any]]


class CreateEquipmentResponse(BaseModel):
    """Response for create equipment use case"""

    id: int


class OkResponse(BaseModel):
    """Response for update/delete use cases"""

    ok: bool = True
