"""
AccessLog Entity

Read-only login events joined with the user's notebook, exposed by the
database view vw_inventario_acessos. Populated outside this service.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel, String


class AccessLog(SQLModel, table=True):
    """
    AccessLog entity - one access attempt with denormalized user context.

    Business Rules:
    - Never written by this service
    - Listed newest first (data_hora DESC)
    """

    __tablename__ = "vw_inventario_acessos"

    id: Optional[int] = Field(default=None, primary_key=True)

    data_hora: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    email: Optional[str] = Field(default=None, sa_column=Column("email_log", String(255)))
    ip: Optional[str] = Field(default=None, max_length=64)
    sucesso: Optional[bool] = Field(default=None)
    mensagem: Optional[str] = Field(default=None, max_length=255)

    # Denormalized user / notebook context
    login_edp: Optional[str] = Field(default=None, max_length=120)
    nome: Optional[str] = Field(default=None, max_length=255)
    notebook_modelo: Optional[str] = Field(default=None, max_length=120)
    notebook_tag: Optional[str] = Field(default=None, max_length=120)
    notebook_hostname: Optional[str] = Field(default=None, max_length=120)
