"""
Identifier classification.

Inventory forms accept a single free-text "identificador" that is either a
vendor service tag or a device IMEI. An IMEI is a run of 10 or more decimal
digits; anything else is a service tag. The value is stored verbatim.
"""

import re
from typing import NamedTuple, Optional

IMEI_PATTERN = re.compile(r"[0-9]{10,}")


class Identifiers(NamedTuple):
    service_tag: str
    imei: str


def is_imei(value: str) -> bool:
    return IMEI_PATTERN.fullmatch(value) is not None


def split_identificador(value: Optional[str]) -> Identifiers:
    """Place the identifier in the imei or service_tag slot, leaving the other empty"""
    if not value:
        return Identifiers(service_tag="", imei="")
    if is_imei(value):
        return Identifiers(service_tag="", imei=value)
    return Identifiers(service_tag=value, imei="")


def resolve_identificador(
    identificador: Optional[str] = None,
    service_tag: Optional[str] = None,
    imei: Optional[str] = None,
) -> Identifiers:
    """Classify the first non-empty of identificador, service_tag, imei"""
    return split_identificador(identificador or service_tag or imei)
