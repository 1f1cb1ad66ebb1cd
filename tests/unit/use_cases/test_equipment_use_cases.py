"""
Unit tests for the equipment use cases.
Tests business logic in isolation with a mocked unit of work.
"""

import pytest
from unittest.mock import AsyncMock
from sqlalchemy.exc import OperationalError

from src.app.use_cases.equipment import (
    CreateEquipmentUseCase,
    DeleteEquipmentUseCase,
    EquipmentCommand,
    ListEquipmentsUseCase,
    UpdateEquipmentUseCase,
)
from src.domain.entities import Equipment
from src.domain.queries import EquipmentFilter, PageSpec


def db_down():
    return OperationalError("SELECT 1", {}, Exception("connection refused"))


@pytest.mark.asyncio
async def test_list_builds_page_envelope(mock_uow):
    """Test listing returns total, page and serialized data"""
    # Arrange
    record = Equipment(id=7, tipo="Notebook", service_tag="ABC123", imei="", estado="EM USO")
    mock_uow.equipments.list = AsyncMock(return_value=(31, [record]))
    filters = EquipmentFilter(tipo="Notebook")

    # Act
    use_case = ListEquipmentsUseCase(mock_uow)
    result = await use_case.execute(filters, page="4", page_size="10")

    # Assert
    assert result.is_ok()
    assert result.value.total == 31
    assert result.value.page == 4
    assert result.value.data[0]["id"] == 7
    assert result.value.data[0]["service_tag"] == "ABC123"
    mock_uow.equipments.list.assert_called_once_with(filters, PageSpec(page=4, page_size=10))


@pytest.mark.asyncio
async def test_list_coerces_malformed_pagination(mock_uow):
    """Test non-numeric page/pageSize fall back to 1 and 10"""
    mock_uow.equipments.list = AsyncMock(return_value=(0, []))

    use_case = ListEquipmentsUseCase(mock_uow)
    result = await use_case.execute(EquipmentFilter(), page="abc", page_size="-3")

    assert result.is_ok()
    assert result.value.page == 1
    page_spec = mock_uow.equipments.list.call_args[0][1]
    assert page_spec == PageSpec(page=1, page_size=10)


@pytest.mark.asyncio
async def test_list_query_failure(mock_uow):
    """Test a database error becomes a query failure result"""
    mock_uow.equipments.list = AsyncMock(side_effect=db_down())

    use_case = ListEquipmentsUseCase(mock_uow)
    result = await use_case.execute(EquipmentFilter())

    assert result.is_err()
    assert result.error.code == "EQUIPMENT_QUERY_FAILED"


@pytest.mark.asyncio
async def test_create_classifies_imei_and_applies_defaults(mock_uow):
    """Test a 15-digit identificador is stored as IMEI with default estado"""
    # Arrange
    mock_uow.equipments.insert = AsyncMock(return_value=3)
    command = EquipmentCommand(tipo="Celular", identificador="359876543210123")

    # Act
    use_case = CreateEquipmentUseCase(mock_uow)
    result = await use_case.execute(command)

    # Assert
    assert result.is_ok()
    assert result.value.id == 3

    record = mock_uow.equipments.insert.call_args[0][0]
    assert record.imei == "359876543210123"
    assert record.service_tag == ""
    assert record.estado == "EM USO"
    assert record.centro_custo == ""
    assert record.id is None

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_keeps_given_estado(mock_uow):
    mock_uow.equipments.insert = AsyncMock(return_value=1)
    command = EquipmentCommand(service_tag="ABC123", estado="Estoque", centro_custo="CC-1")

    result = await CreateEquipmentUseCase(mock_uow).execute(command)

    assert result.is_ok()
    record = mock_uow.equipments.insert.call_args[0][0]
    assert record.service_tag == "ABC123"
    assert record.imei == ""
    assert record.estado == "Estoque"
    assert record.centro_custo == "CC-1"


@pytest.mark.asyncio
async def test_create_query_failure(mock_uow):
    """Test insert failure is reported and nothing is committed"""
    mock_uow.equipments.insert = AsyncMock(side_effect=db_down())

    result = await CreateEquipmentUseCase(mock_uow).execute(EquipmentCommand(tipo="Notebook"))

    assert result.is_err()
    assert result.error.code == "EQUIPMENT_QUERY_FAILED"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_reapplies_classifier_without_defaults(mock_uow):
    """Test update re-splits the identifier and does not default estado"""
    mock_uow.equipments.update = AsyncMock(return_value=True)
    command = EquipmentCommand(tipo="Notebook", identificador="ABC123", imei="359876543210123")

    result = await UpdateEquipmentUseCase(mock_uow).execute(5, command)

    assert result.is_ok()
    assert result.value.ok is True

    equipment_id, record = mock_uow.equipments.update.call_args[0]
    assert equipment_id == 5
    assert record.service_tag == "ABC123"
    assert record.imei == ""
    assert record.estado is None
    assert record.centro_custo is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_query_failure(mock_uow):
    mock_uow.equipments.update = AsyncMock(side_effect=db_down())

    result = await UpdateEquipmentUseCase(mock_uow).execute(5, EquipmentCommand())

    assert result.is_err()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete(mock_uow):
    mock_uow.equipments.remove = AsyncMock(return_value=True)

    result = await DeleteEquipmentUseCase(mock_uow).execute(9)

    assert result.is_ok()
    assert result.value.ok is True
    mock_uow.equipments.remove.assert_called_once_with(9)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_query_failure(mock_uow):
    mock_uow.equipments.remove = AsyncMock(side_effect=db_down())

    result = await DeleteEquipmentUseCase(mock_uow).execute(9)

    assert result.is_err()
    assert result.error.code == "EQUIPMENT_QUERY_FAILED"


def test_command_accepts_numeric_identifiers():
    """A numeric IMEI in the JSON body is classified like its text form"""
    command = EquipmentCommand.model_validate({"tipo": "Celular", "imei": 359876543210123})

    record = command.to_equipment(apply_defaults=True)

    assert record.imei == "359876543210123"
    assert record.service_tag == ""
