"""
Equipment API Routes

Inventory listing and CRUD endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.equipment import (
    CreateEquipmentResponse,
    CreateEquipmentUseCase,
    DeleteEquipmentUseCase,
    EquipmentCommand,
    EquipmentPageResponse,
    ListEquipmentsUseCase,
    OkResponse,
    UpdateEquipmentUseCase,
)
from src.depends import get_unit_of_work
from src.domain.queries import EquipmentFilter

router = APIRouter(prefix="/equipamentos", tags=["Equipment"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=EquipmentPageResponse,
)
async def list_equipments(
    uow: UnitOfWork = Depends(get_unit_of_work),
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Items per page (default 10)"),
    tipo: Optional[str] = Query(None),
    localizacao: Optional[str] = Query(None),
    fabricante: Optional[str] = Query(None),
    modelo: Optional[str] = Query(None),
    tag: Optional[str] = Query(None, description="Substring of the service tag"),
    imei: Optional[str] = Query(None, description="Substring of the IMEI"),
    centro_custo: Optional[str] = Query(None, description="Substring of the cost center"),
):
    """
    List Equipment

    Exact match on tipo, localizacao, fabricante and modelo; case-insensitive
    substring match on tag, imei and centro_custo. Filters are combined with AND.

    Returns:
        - total: number of matching records
        - page: page actually served
        - data: at most pageSize records

    Raises:
        - 500 Internal Server Error: query failure
    """
    filters = EquipmentFilter(
        tipo=tipo,
        localizacao=localizacao,
        fabricante=fabricante,
        modelo=modelo,
        tag=tag,
        imei=imei,
        centro_custo=centro_custo,
    )
    use_case = ListEquipmentsUseCase(uow)
    result = await use_case.execute(filters, page=page, page_size=page_size)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=CreateEquipmentResponse,
)
async def create_equipment(
    request: EquipmentCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Equipment

    The identifier (identificador, else service_tag, else imei) is stored as
    an IMEI when it is 10+ digits and as a service tag otherwise.
    """
    use_case = CreateEquipmentUseCase(uow)
    result = await use_case.execute(request)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.put(
    "/{equipment_id}",
    status_code=status.HTTP_200_OK,
    response_model=OkResponse,
)
async def update_equipment(
    equipment_id: int,
    request: EquipmentCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Equipment

    Replaces every field. Answers ok even when the id does not exist.
    """
    use_case = UpdateEquipmentUseCase(uow)
    result = await use_case.execute(equipment_id, request)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.delete(
    "/{equipment_id}",
    status_code=status.HTTP_200_OK,
    response_model=OkResponse,
)
async def delete_equipment(
    equipment_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Equipment

    Hard delete. Answers ok even when the id does not exist.
    """
    use_case = DeleteEquipmentUseCase(uow)
    result = await use_case.execute(equipment_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
