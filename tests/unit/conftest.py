import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Unit of work whose equipments/access_logs repositories are configured per test"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.equipments = MagicMock()
    uow.access_logs = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow
