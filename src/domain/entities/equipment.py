"""
Equipment Entity

An inventoried asset (notebook, phone, ...).
"""

from typing import Optional

from sqlmodel import Field, SQLModel

DEFAULT_ESTADO = "EM USO"


class Equipment(SQLModel, table=True):
    """
    Equipment entity - one inventoried asset.

    Business Rules:
    - id is assigned by the store and never reused
    - service_tag and imei are filled from a single identifier, at most one is set
    - estado defaults to "EM USO" on creation
    - Hard delete, no tombstone
    """

    __tablename__ = "equipamentos"

    id: Optional[int] = Field(default=None, primary_key=True)

    tipo: Optional[str] = Field(default=None, max_length=50)
    localizacao: Optional[str] = Field(default=None, max_length=80)
    fabricante: Optional[str] = Field(default=None, max_length=80)
    modelo: Optional[str] = Field(default=None, max_length=120)

    service_tag: Optional[str] = Field(default=None, max_length=120)
    imei: Optional[str] = Field(default=None, max_length=32)

    centro_custo: Optional[str] = Field(default=None, max_length=80)
    estado: Optional[str] = Field(default=None, max_length=40)

    def column_values(self) -> dict:
        """Every column except id"""
        return self.model_dump(exclude={"id"})
