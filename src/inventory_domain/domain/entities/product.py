"""Product entity."""

from collections.abc import Iterable
from decimal import Decimal
from typing import Callable, Optional

from src.common.exceptions.custom_exceptions import InvalidArgumentError
from src.inventory_domain.domain.events.list_change import ChangeListener

from .item import Item
from .product_fields import Category, Description, Name, Price
from .quantity import Quantity
from .unique_item_list import ItemListView, ItemPredicate, UniqueItemList


class Product:
    """A sellable good identified by name and category, owning its dated stock items.

    The four scalar fields never change after construction; updating them means
    building a new Product (see ``with_updates``). The item collection is the only
    mutable state and is changed through the item methods below.
    """

    def __init__(
        self,
        name: Name | str,
        category: Category | str,
        description: Description | str,
        price: Price | Decimal | float | str,
        items: Iterable[Item] = (),
    ) -> None:
        # Identity fields
        self._name = name if isinstance(name, Name) else Name(name)
        self._category = category if isinstance(category, Category) else Category(category)

        # Data fields
        self._description = description if isinstance(description, Description) else Description(description)
        self._price = price if isinstance(price, Price) else Price(price)

        self._items = UniqueItemList()
        # Carried-over items become values owned by this product, never a shared list
        self.set_items(items)

    @property
    def name(self) -> Name:
        return self._name

    @property
    def category(self) -> Category:
        return self._category

    @property
    def description(self) -> Description:
        return self._description

    @property
    def price(self) -> Price:
        return self._price

    @property
    def items(self) -> ItemListView:
        """Live read-only view of the items in insertion order."""
        return self._items.as_unmodifiable_view()

    def filtered_items(self, predicate: ItemPredicate | None = None) -> ItemListView:
        return self._items.as_unmodifiable_view(predicate)

    def expired_items(self) -> list[Item]:
        return [item for item in self._items.sorted_by_expiry() if item.is_expired()]

    def subscribe_items(self, listener: ChangeListener) -> Callable[[], None]:
        return self._items.subscribe(listener)

    def get_total_quantity(self) -> int:
        return self._items.get_total_quantity()

    def has_item(self, item: Item) -> bool:
        return self._items.contains(item)

    def get_item(self, item: Item) -> Item:
        return self._items.get(item)

    def add_item(self, item: Item) -> None:
        """Adds ``item``, which must have been created for this product (or an equal one)."""
        if item.product is not self:
            if item.product != self:
                raise InvalidArgumentError(f"Item does not belong to product {self._name}.")
            item = item.with_product(self)
        self._items.add(item)

    def set_items(self, items: Iterable[Item]) -> None:
        """Replaces all items of this product; nothing changes if ``items`` holds duplicates."""
        self._items.set_items(item.with_product(self) for item in items)

    def remove_item(self, item: Item) -> None:
        self._items.remove(item)

    def set_item_count(self, item: Item, quantity: Quantity) -> None:
        self._items.set_item_count(item, quantity)

    def increment_item_count(self, item: Item, delta: Quantity | None = None) -> None:
        self._items.increment_item_count(item, delta)

    def decrement_item_count(self, item: Item, delta: Quantity | None = None) -> None:
        self._items.decrement_item_count(item, delta)

    def with_updates(
        self,
        name: Name | None = None,
        category: Category | None = None,
        description: Description | None = None,
        price: Price | None = None,
    ) -> "Product":
        """Returns a new Product with the given fields replaced, carrying over the current items."""
        return Product(
            name if name is not None else self._name,
            category if category is not None else self._category,
            description if description is not None else self._description,
            price if price is not None else self._price,
            items=list(self._items),
        )

    def is_same_product(self, other: Optional["Product"]) -> bool:
        """Weak identity: same name and category."""
        if other is self:
            return True
        return isinstance(other, Product) and other.name == self._name and other.category == self._category

    def __eq__(self, other: object) -> bool:
        """Strong equality over the four scalar fields; items are not compared."""
        if other is self:
            return True
        if not isinstance(other, Product):
            return NotImplemented
        return (
            self._name == other.name
            and self._category == other.category
            and self._description == other.description
            and self._price == other.price
        )

    def __hash__(self) -> int:
        return hash((self._name, self._category, self._description, self._price))

    def __repr__(self) -> str:
        return (
            f"Product(name={self._name.value!r}, category={self._category.value!r}, "
            f"description={self._description.value!r}, price={str(self._price)!r})"
        )

    def __str__(self) -> str:
        return f"{self._name}; Category: {self._category}; Description: {self._description}; Price: {self._price}"
