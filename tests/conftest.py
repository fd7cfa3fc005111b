# tests/conftest.py
from datetime import date
from unittest.mock import Mock

import pytest

from src.common.config.settings import settings
from src.inventory_domain.application.inventory_service import InventoryApplicationService
from src.inventory_domain.domain.entities.catalog import Catalog
from src.inventory_domain.domain.entities.expiry_date import ExpiryDate
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.domain.entities.quantity import Quantity
from src.inventory_domain.domain.repositories.inventory_repository import IInventoryRepository

FAR_FUTURE = "2099-01-01"
LONG_AGO = "2000-01-01"
FIXED_TODAY = date(2024, 6, 1)


@pytest.fixture(autouse=True)
def mock_settings(mocker) -> None:
    """Pins timezone and report window so expiry checks do not depend on the environment."""
    mocker.patch.object(settings, "TIMEZONE", "UTC")
    mocker.patch.object(settings, "EXPIRING_SOON_DAYS", 7)


@pytest.fixture
def fixed_today(mocker) -> date:
    """Freezes 'today' for expiry checks at FIXED_TODAY."""
    mocker.patch("src.inventory_domain.domain.entities.expiry_date.today", return_value=FIXED_TODAY)
    return FIXED_TODAY


@pytest.fixture
def bread() -> Product:
    """Sample product without items."""
    return Product("Bread", "Bakery", "Whole wheat loaf", "2.50")


@pytest.fixture
def milk() -> Product:
    """Second sample product without items."""
    return Product("Milk", "Dairy", "1L full cream", "3.20")


@pytest.fixture
def bread_item(bread) -> Item:
    """Five units of bread expiring far in the future."""
    return Item(bread, ExpiryDate(FAR_FUTURE), Quantity(5))


@pytest.fixture
def catalog(bread, milk) -> Catalog:
    """Catalog with bread and milk, in that order."""
    return Catalog([bread, milk])


@pytest.fixture
def mock_inventory_repository() -> Mock:
    """Mock for the inventory repository."""
    return Mock(spec=IInventoryRepository)


@pytest.fixture
def inventory_service(mock_inventory_repository, catalog) -> InventoryApplicationService:
    """Instance of InventoryApplicationService with a mocked repository."""
    return InventoryApplicationService(inventory_repo=mock_inventory_repository, catalog=catalog)
