"""
List Access Logs Use Case

Retrieves the most recent inventory access events.
"""

import logging
from typing import Any, Dict, List

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.queries import positive_int_or_default

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100
MAX_LIMIT = 500


class AccessLogsResponse(BaseModel):
    """Response for list access logs use case"""

    rows: List[Dict[str, Any]]


def clamp_limit(raw: Any) -> int:
    """Non-numeric or non-positive falls back to 100; capped at 500"""
    return min(positive_int_or_default(raw, DEFAULT_LIMIT), MAX_LIMIT)


class ListAccessLogsUseCase:
    """
    Use case for reading the access log.

    Business Rules:
    - Results ordered by newest first
    - limit defaults to 100 and is clamped to [1, 500]
    - Mock mode has no log and returns no rows
    - Query failures are reported, never retried
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: Any = None) -> Result[AccessLogsResponse]:
        limit = clamp_limit(limit)
        try:
            async with self.uow:
                entries = await self.uow.access_logs.list_recent(limit)
                rows = [entry.model_dump() for entry in entries]
        except SQLAlchemyError:
            logger.exception("Access log query failed")
            return Return.err(
                Error("ACCESS_LOG_QUERY_FAILED", "Falha ao carregar relatório de acessos.")
            )

        return Return.ok(AccessLogsResponse(rows=rows))
