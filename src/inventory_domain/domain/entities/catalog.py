"""Catalog aggregate: every product tracked by the ibook."""

from collections.abc import Iterable, Iterator
from typing import Callable

from src.common.exceptions.custom_exceptions import DuplicateProductError, ProductNotFoundError
from src.inventory_domain.domain.events.list_change import (
    ChangeKind,
    ChangeListener,
    ChangeNotifier,
    ListChange,
)

from .item import Item
from .list_view import FilteredListView
from .product import Product
from .quantity import Quantity

ProductPredicate = Callable[[Product], bool]
ProductListView = FilteredListView[Product]


class Catalog:
    """Top-level collection of products, unique by ``Product.is_same_product``.

    Item-level operations locate the stored product by identity and delegate to it.
    Every successful mutation is announced to subscribers as a ``ListChange``; item
    changes are reported as a REPLACED change of the owning product.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: list[Product] = []
        self._notifier = ChangeNotifier()
        self.set_products(products)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        return self._notifier.subscribe(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        self._notifier.unsubscribe(listener)

    def _index_of(self, product: Product) -> int:
        for index, existing in enumerate(self._products):
            if existing.is_same_product(product):
                return index
        return -1

    def _require_index(self, product: Product) -> int:
        index = self._index_of(product)
        if index == -1:
            raise ProductNotFoundError()
        return index

    def has_product(self, product: Product) -> bool:
        return self._index_of(product) != -1

    def get_product(self, product: Product) -> Product:
        """Returns the stored product with the same name and category as ``product``."""
        return self._products[self._require_index(product)]

    def add_product(self, product: Product) -> None:
        if self.has_product(product):
            raise DuplicateProductError()
        self._products.append(product)
        self._notifier.notify(ListChange(ChangeKind.ADDED, index=len(self._products) - 1, new=product))

    def remove_product(self, product: Product) -> None:
        """Removes the product together with all of its items."""
        index = self._require_index(product)
        removed = self._products.pop(index)
        self._notifier.notify(ListChange(ChangeKind.REMOVED, index=index, old=removed))

    def set_product(self, target: Product, edited: Product) -> None:
        """Replaces ``target`` with ``edited``.

        ``edited`` may share its identity with ``target`` itself, but not with any other product.
        """
        index = self._require_index(target)
        if not target.is_same_product(edited) and self.has_product(edited):
            raise DuplicateProductError()
        old = self._products[index]
        self._products[index] = edited
        self._notifier.notify(ListChange(ChangeKind.REPLACED, index=index, old=old, new=edited))

    def set_products(self, products: Iterable[Product]) -> None:
        """Replaces the whole catalog. Fails on duplicates without modifying the catalog."""
        replacement: list[Product] = []
        for product in products:
            if any(existing.is_same_product(product) for existing in replacement):
                raise DuplicateProductError()
            replacement.append(product)
        self._products[:] = replacement
        self._notifier.notify(ListChange(ChangeKind.RESET))

    def _mutate_items(self, product: Product, mutation: Callable[[Product], None]) -> None:
        index = self._require_index(product)
        stored = self._products[index]
        mutation(stored)
        self._notifier.notify(ListChange(ChangeKind.REPLACED, index=index, old=stored, new=stored))

    def add_item(self, product: Product, item: Item) -> None:
        self._mutate_items(product, lambda stored: stored.add_item(item.with_product(stored)))

    def remove_item(self, product: Product, item: Item) -> None:
        self._mutate_items(product, lambda stored: stored.remove_item(item.with_product(stored)))

    def set_item_count(self, product: Product, item: Item, quantity: Quantity) -> None:
        self._mutate_items(product, lambda stored: stored.set_item_count(item.with_product(stored), quantity))

    def increment_item_count(self, product: Product, item: Item, delta: Quantity | None = None) -> None:
        self._mutate_items(product, lambda stored: stored.increment_item_count(item.with_product(stored), delta))

    def decrement_item_count(self, product: Product, item: Item, delta: Quantity | None = None) -> None:
        self._mutate_items(product, lambda stored: stored.decrement_item_count(item.with_product(stored), delta))

    def filtered_view(self, predicate: ProductPredicate | None = None) -> ProductListView:
        """Live view of the products matching ``predicate`` (all products by default)."""
        return FilteredListView(self._products, predicate)

    def get_total_quantity(self) -> int:
        return sum(product.get_total_quantity() for product in self._products)

    def get_expired_items(self) -> list[Item]:
        """All expired items across the catalog, earliest expiry first."""
        return sorted(item for product in self._products for item in product.expired_items())

    def get_items_expiring_within(self, days: int) -> list[Item]:
        """Items that have not expired yet but will within ``days`` days, earliest first."""
        return sorted(
            item
            for product in self._products
            for item in product.items
            if 0 <= item.expiry_date.days_until() <= days
        )

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products))

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product: object) -> bool:
        return isinstance(product, Product) and self.has_product(product)
