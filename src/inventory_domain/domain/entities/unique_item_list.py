"""Ordered collection of Items that are unique by item identity."""

from collections.abc import Iterable, Iterator
from typing import Callable

from src.common.exceptions.custom_exceptions import (
    DuplicateItemError,
    InvalidArgumentError,
    ItemNotFoundError,
)
from src.inventory_domain.domain.events.list_change import (
    ChangeKind,
    ChangeListener,
    ChangeNotifier,
    ListChange,
)

from .item import Item
from .list_view import FilteredListView
from .quantity import Quantity

ItemPredicate = Callable[[Item], bool]
ItemListView = FilteredListView[Item]

MESSAGE_EMPTY_ITEM = "Items with a quantity of zero cannot be stored."


class UniqueItemList:
    """Items owned by a single product.

    Uniqueness is checked with ``Item.is_same_item``, so at most one item exists per
    expiry date. Insertion order is kept. Stored items always have a positive quantity:
    empty items are rejected and setting an item's count to zero removes it.
    """

    def __init__(self) -> None:
        self._items: list[Item] = []
        self._notifier = ChangeNotifier()

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        return self._notifier.subscribe(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        self._notifier.unsubscribe(listener)

    def _index_of(self, item: Item) -> int:
        for index, existing in enumerate(self._items):
            if existing.is_same_item(item):
                return index
        return -1

    def contains(self, item: Item) -> bool:
        """Returns True if an item with the same identity is present."""
        return self._index_of(item) != -1

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Item) and self.contains(item)

    def get(self, item: Item) -> Item:
        """Returns the stored item that has the same identity as ``item``."""
        index = self._index_of(item)
        if index == -1:
            raise ItemNotFoundError()
        return self._items[index]

    def add(self, to_add: Item) -> None:
        if to_add.is_empty():
            raise InvalidArgumentError(MESSAGE_EMPTY_ITEM)
        if self.contains(to_add):
            raise DuplicateItemError()
        self._items.append(to_add)
        self._notifier.notify(ListChange(ChangeKind.ADDED, index=len(self._items) - 1, new=to_add))

    def remove(self, to_remove: Item) -> None:
        index = self._index_of(to_remove)
        if index == -1:
            raise ItemNotFoundError()
        removed = self._items.pop(index)
        self._notifier.notify(ListChange(ChangeKind.REMOVED, index=index, old=removed))

    def set_item_count(self, target: Item, quantity: Quantity) -> None:
        """Replaces the quantity of ``target``; an empty quantity removes the item."""
        index = self._index_of(target)
        if index == -1:
            raise ItemNotFoundError()

        if quantity.is_empty():
            removed = self._items.pop(index)
            self._notifier.notify(ListChange(ChangeKind.REMOVED, index=index, old=removed))
            return

        old = self._items[index]
        updated = old.with_quantity(quantity)
        self._items[index] = updated
        self._notifier.notify(ListChange(ChangeKind.REPLACED, index=index, old=old, new=updated))

    def increment_item_count(self, target: Item, delta: Quantity | None = None) -> None:
        """Adds ``delta`` (one unit by default) to the stored quantity of ``target``."""
        stored = self.get(target)
        self.set_item_count(stored, stored.quantity.add(delta or Quantity(1)))

    def decrement_item_count(self, target: Item, delta: Quantity | None = None) -> None:
        """Removes ``delta`` (one unit by default); going below zero raises and changes nothing."""
        stored = self.get(target)
        self.set_item_count(stored, stored.quantity.subtract(delta or Quantity(1)))

    def set_items(self, items: Iterable[Item]) -> None:
        """Replaces the whole content. Fails on duplicates in ``items`` without modifying the list."""
        replacement: list[Item] = []
        for item in items:
            if item.is_empty():
                raise InvalidArgumentError(MESSAGE_EMPTY_ITEM)
            if any(existing.is_same_item(item) for existing in replacement):
                raise DuplicateItemError()
            replacement.append(item)

        self._items[:] = replacement
        self._notifier.notify(ListChange(ChangeKind.RESET))

    def get_total_quantity(self) -> int:
        return sum(item.quantity.value for item in self._items)

    def sorted_by_expiry(self) -> list[Item]:
        return sorted(self._items)

    def as_unmodifiable_view(self, predicate: ItemPredicate | None = None) -> ItemListView:
        return FilteredListView(self._items, predicate)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueItemList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"UniqueItemList({self._items!r})"
