"""
Access Log API Routes

Read-only inventory access report.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access_logs import AccessLogsResponse, ListAccessLogsUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/inventario", tags=["Access Logs"])


@router.get(
    "/logs",
    status_code=status.HTTP_200_OK,
    response_model=AccessLogsResponse,
)
async def list_access_logs(
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: Optional[str] = Query(None, description="Maximum rows (1-500, default 100)"),
):
    """
    List Access Logs

    Newest first. Invalid limits fall back to 100; values above 500 are capped.

    Raises:
        - 500 Internal Server Error: the log view could not be read
    """
    use_case = ListAccessLogsUseCase(uow)
    result = await use_case.execute(limit)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
