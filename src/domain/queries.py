"""
Query value objects shared by every equipment store.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# Largest OFFSET/LIMIT a signed 64-bit database integer holds
MAX_QUERY_INT = 2**63 - 1

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(raw: Any) -> Optional[int]:
    """
    Best-effort integer parsing.

    Reads the leading integer of a string ("3abc" -> 3) and returns None when
    there is none.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


def positive_int_or_default(raw: Any, default: int) -> int:
    value = parse_int(raw)
    if value is None or value <= 0:
        return default
    return value


class EquipmentFilter(BaseModel):
    """
    Active list filters. Empty values are inactive.

    tipo, localizacao, fabricante and modelo match exactly; tag (service_tag),
    imei and centro_custo match as case-insensitive substrings.
    """

    tipo: Optional[str] = None
    localizacao: Optional[str] = None
    fabricante: Optional[str] = None
    modelo: Optional[str] = None
    tag: Optional[str] = None
    imei: Optional[str] = None
    centro_custo: Optional[str] = None

    def exact_clauses(self) -> dict:
        fields = {
            "tipo": self.tipo,
            "localizacao": self.localizacao,
            "fabricante": self.fabricante,
            "modelo": self.modelo,
        }
        return {column: value for column, value in fields.items() if value}

    def substring_clauses(self) -> dict:
        fields = {
            "service_tag": self.tag,
            "imei": self.imei,
            "centro_custo": self.centro_custo,
        }
        return {column: value for column, value in fields.items() if value}


class PageSpec(BaseModel):
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def parse(cls, page: Any = None, page_size: Any = None) -> "PageSpec":
        return cls(
            page=min(positive_int_or_default(page, DEFAULT_PAGE), MAX_QUERY_INT),
            page_size=min(positive_int_or_default(page_size, DEFAULT_PAGE_SIZE), MAX_QUERY_INT),
        )

    @property
    def offset(self) -> int:
        return min((self.page - 1) * self.page_size, MAX_QUERY_INT)

    @property
    def limit(self) -> int:
        return self.page_size
