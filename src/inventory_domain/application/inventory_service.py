# src/inventory_domain/application/inventory_service.py
"""Application service for managing products and their stock items."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError, InvalidArgumentError
from src.inventory_domain.domain.entities.catalog import Catalog, ProductPredicate
from src.inventory_domain.domain.entities.expiry_date import ExpiryDate
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.domain.entities.product_fields import Category, Description, Name, Price
from src.inventory_domain.domain.entities.quantity import Quantity
from src.inventory_domain.domain.repositories.inventory_repository import IInventoryRepository

logger = logging.getLogger(__name__)

MESSAGE_INVALID_PRODUCT_DISPLAYED_INDEX = "The product index provided is invalid"
MESSAGE_INVALID_ITEM_DISPLAYED_INDEX = "The item index provided is invalid"
MESSAGE_NOT_UPDATED = "At least one field to update must be provided."


@dataclass
class UpdateProductDescriptor:
    """Stores the details to update a product with. Each field that is set replaces the current value."""

    name: Name | None = None
    category: Category | None = None
    description: Description | None = None
    price: Price | None = None

    def is_any_field_updated(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))


class InventoryApplicationService:
    """Runs inventory operations against the catalog and persists the result.

    Products are addressed by their 1-based position in the currently displayed
    (filtered) list, items by their 1-based position within the product. Every
    mutation holds the service lock, so the catalog invariants hold even when
    several threads share one service. A mutation that cannot be saved is rolled back
    before the storage error reaches the caller. Reads return snapshots taken under the lock.
    """

    def __init__(self, inventory_repo: IInventoryRepository, catalog: Catalog | None = None) -> None:
        """Initializes the InventoryApplicationService."""
        self.inventory_repo = inventory_repo
        self.catalog = catalog if catalog is not None else Catalog()
        self.displayed_products = self.catalog.filtered_view()
        self._lock = threading.RLock()

    def load(self) -> None:
        """Replaces the in-memory catalog content with what the repository holds."""
        loaded = self.inventory_repo.load_catalog()
        with self._lock:
            self.catalog.set_products(list(loaded))
        logger.info(f"Inventory loaded with {len(self.catalog)} product(s).")

    @contextmanager
    def _persisted_change(self) -> Iterator[None]:
        """Saves the catalog after the enclosed change, or restores the previous state if saving fails.

        Must be entered with the service lock held.
        """
        products_before = [(product, list(product.items)) for product in self.catalog]
        predicate_before = self.displayed_products.predicate

        yield

        try:
            self.inventory_repo.save_catalog(self.catalog)
        except ApplicationError as e:
            logger.error(f"Failed to persist inventory, change rolled back: {e}")
            for product, items in products_before:
                product.set_items(items)
            self.catalog.set_products(product for product, _ in products_before)
            self.displayed_products.set_predicate(predicate_before)
            raise

    def _product_at(self, index: int) -> Product:
        if index < 1 or index > len(self.displayed_products):
            raise InvalidArgumentError(MESSAGE_INVALID_PRODUCT_DISPLAYED_INDEX)
        return self.displayed_products[index - 1]

    @staticmethod
    def _item_at(product: Product, index: int) -> Item:
        items = product.items
        if index < 1 or index > len(items):
            raise InvalidArgumentError(MESSAGE_INVALID_ITEM_DISPLAYED_INDEX)
        return items[index - 1]

    def add_product(
        self, name: str, category: str, description: str, price: Decimal | float | str
    ) -> Product:
        """Adds a new product with no items."""
        product = Product(name, category, description, price)
        with self._lock, self._persisted_change():
            self.catalog.add_product(product)
        logger.info(f"New product added: {product}")
        return product

    def update_product(self, index: int, descriptor: UpdateProductDescriptor) -> Product:
        """Replaces the fields of the displayed product at ``index``, keeping its items."""
        if not descriptor.is_any_field_updated():
            raise InvalidArgumentError(MESSAGE_NOT_UPDATED)

        with self._lock, self._persisted_change():
            product_to_update = self._product_at(index)
            updated_product = product_to_update.with_updates(
                name=descriptor.name,
                category=descriptor.category,
                description=descriptor.description,
                price=descriptor.price,
            )
            self.catalog.set_product(product_to_update, updated_product)
            self.displayed_products.set_predicate(None)
        logger.info(f"Updated Product: {updated_product}")
        return updated_product

    def delete_product(self, index: int) -> Product:
        """Deletes the displayed product at ``index`` together with all its items."""
        with self._lock, self._persisted_change():
            product_to_delete = self._product_at(index)
            self.catalog.remove_product(product_to_delete)
        logger.info(f"Deleted Product: {product_to_delete}")
        return product_to_delete

    def add_item(self, index: int, expiry_date: ExpiryDate | date | str, quantity: Quantity | int) -> Item:
        """Adds a stock item to the displayed product at ``index``."""
        with self._lock, self._persisted_change():
            product = self._product_at(index)
            to_add = Item(product, expiry_date, quantity)
            self.catalog.add_item(product, to_add)
        logger.info(f"New item added: {to_add}")
        return to_add

    def delete_item(self, product_index: int, item_index: int) -> Item:
        with self._lock, self._persisted_change():
            product = self._product_at(product_index)
            item = self._item_at(product, item_index)
            self.catalog.remove_item(product, item)
        logger.info(f"Deleted item: {item}")
        return item

    def set_item_quantity(self, product_index: int, item_index: int, quantity: Quantity | int) -> Item:
        """Sets an item's quantity; setting it to zero removes the item."""
        if not isinstance(quantity, Quantity):
            quantity = Quantity(quantity)
        with self._lock, self._persisted_change():
            product = self._product_at(product_index)
            item = self._item_at(product, item_index)
            self.catalog.set_item_count(product, item, quantity)
        logger.info(f"Item quantity set to {quantity}: {item.expiry_date} of {product.name}")
        return item.with_quantity(quantity)

    def increase_item_quantity(self, product_index: int, item_index: int, delta: Quantity | int = 1) -> Item:
        if not isinstance(delta, Quantity):
            delta = Quantity(delta)
        with self._lock:
            with self._persisted_change():
                product = self._product_at(product_index)
                item = self._item_at(product, item_index)
                self.catalog.increment_item_count(product, item, delta)
            updated = product.get_item(item)
        logger.info(f"Item quantity increased by {delta}: {updated}")
        return updated

    def decrease_item_quantity(self, product_index: int, item_index: int, delta: Quantity | int = 1) -> Item:
        """Decreases an item's quantity; reaching exactly zero removes the item, going below raises."""
        if not isinstance(delta, Quantity):
            delta = Quantity(delta)
        with self._lock, self._persisted_change():
            product = self._product_at(product_index)
            item = self._item_at(product, item_index)
            self.catalog.decrement_item_count(product, item, delta)
        remaining = item.decrement(delta)
        if remaining.is_empty():
            logger.info(f"Item removed after its quantity reached zero: {item.expiry_date} of {product.name}")
        else:
            logger.info(f"Item quantity decreased by {delta}: {remaining}")
        return remaining

    def filter_products(self, predicate: ProductPredicate) -> list[Product]:
        """Restricts the displayed list to products matching ``predicate``."""
        with self._lock:
            self.displayed_products.set_predicate(predicate)
            return self.displayed_products.snapshot()

    def show_all_products(self) -> list[Product]:
        with self._lock:
            self.displayed_products.set_predicate(None)
            return self.displayed_products.snapshot()

    def get_displayed_products(self) -> list[Product]:
        with self._lock:
            return self.displayed_products.snapshot()

    def get_expired_items(self) -> list[Item]:
        with self._lock:
            return self.catalog.get_expired_items()

    def get_items_expiring_soon(self, days: int | None = None) -> list[Item]:
        """Items that are still good but expire within ``days`` days (settings default)."""
        if days is None:
            days = settings.EXPIRING_SOON_DAYS
        with self._lock:
            return self.catalog.get_items_expiring_within(days)

    def get_stock_statistics(self) -> dict:
        """Returns statistics about the stock data."""
        with self._lock:
            products = list(self.catalog)
            total_items = sum(len(product.items) for product in products)
            total_quantity = self.catalog.get_total_quantity()
            expired = self.catalog.get_expired_items()

        return {
            "total_products": len(products),
            "total_items": total_items,
            "total_quantity": total_quantity,
            "expired_items": len(expired),
            "expired_quantity": sum(item.quantity.value for item in expired),
            "average_quantity_per_product": round(total_quantity / len(products), 2) if products else 0,
        }
