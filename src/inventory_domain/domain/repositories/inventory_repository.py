"""Inventory repository interface."""
from abc import ABC, abstractmethod

from src.inventory_domain.domain.entities.catalog import Catalog


class IInventoryRepository(ABC):

    @abstractmethod
    def load_catalog(self) -> Catalog:
        """Loads the whole catalog, returning an empty one when nothing was stored yet."""
        pass

    @abstractmethod
    def save_catalog(self, catalog: Catalog) -> None:
        """Stores every product of the catalog together with its items."""
        pass
