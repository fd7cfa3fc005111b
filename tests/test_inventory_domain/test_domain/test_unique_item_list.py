"""Tests for UniqueItemList."""

import pytest

from src.common.exceptions.custom_exceptions import (
    DuplicateItemError,
    InvalidArgumentError,
    ItemNotFoundError,
    ValidationError,
)
from src.inventory_domain.domain.entities.expiry_date import ExpiryDate
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.quantity import Quantity
from src.inventory_domain.domain.entities.unique_item_list import UniqueItemList
from src.inventory_domain.domain.events.list_change import ChangeKind

FAR_FUTURE = "2099-01-01"


@pytest.fixture
def item_list() -> UniqueItemList:
    return UniqueItemList()


def test_add_keeps_insertion_order(bread, item_list) -> None:
    late = Item(bread, ExpiryDate("2030-01-01"))
    early = Item(bread, ExpiryDate("2025-01-01"))

    item_list.add(late)
    item_list.add(early)

    assert list(item_list) == [late, early]
    assert item_list.sorted_by_expiry() == [early, late]


def test_add_duplicate_identity_fails(bread, item_list) -> None:
    item_list.add(Item(bread, ExpiryDate(FAR_FUTURE), Quantity(5)))

    with pytest.raises(DuplicateItemError):
        item_list.add(Item(bread, ExpiryDate(FAR_FUTURE), Quantity(1)))
    assert len(item_list) == 1


def test_remove_matches_by_identity_not_quantity(bread, item_list) -> None:
    item_list.add(Item(bread, ExpiryDate(FAR_FUTURE), Quantity(5)))

    item_list.remove(Item(bread, ExpiryDate(FAR_FUTURE), Quantity(1)))

    assert len(item_list) == 0


def test_remove_missing_item_fails(bread, item_list) -> None:
    with pytest.raises(ItemNotFoundError):
        item_list.remove(Item(bread, ExpiryDate(FAR_FUTURE)))


def test_set_item_count_replaces_in_place(bread, item_list) -> None:
    first = Item(bread, ExpiryDate("2030-01-01"), Quantity(1))
    second = Item(bread, ExpiryDate("2031-01-01"), Quantity(1))
    item_list.add(first)
    item_list.add(second)

    item_list.set_item_count(first, Quantity(10))

    assert [item.quantity for item in item_list] == [Quantity(10), Quantity(1)]


def test_set_item_count_to_zero_removes_item(bread, bread_item, item_list) -> None:
    item_list.add(bread_item)

    item_list.set_item_count(bread_item, Quantity(0))

    assert not item_list.contains(bread_item)
    assert len(item_list) == 0


def test_set_item_count_on_missing_item_fails(bread_item, item_list) -> None:
    with pytest.raises(ItemNotFoundError):
        item_list.set_item_count(bread_item, Quantity(3))


def test_increment_and_decrement_default_to_one_unit(bread_item, item_list) -> None:
    item_list.add(bread_item)

    item_list.increment_item_count(bread_item)
    assert item_list.get(bread_item).quantity == Quantity(6)

    item_list.decrement_item_count(bread_item)
    item_list.decrement_item_count(bread_item)
    assert item_list.get(bread_item).quantity == Quantity(4)


def test_decrement_to_exactly_zero_removes_item(bread_item, item_list) -> None:
    item_list.add(bread_item)

    item_list.decrement_item_count(bread_item, Quantity(5))

    assert not item_list.contains(bread_item)


def test_decrement_past_zero_fails_without_mutation(bread_item, item_list) -> None:
    item_list.add(bread_item)
    events = []
    item_list.subscribe(events.append)

    with pytest.raises(ValidationError):
        item_list.decrement_item_count(bread_item, Quantity(6))

    assert item_list.get(bread_item).quantity == Quantity(5)
    assert events == []


def test_get_total_quantity(bread, item_list) -> None:
    assert item_list.get_total_quantity() == 0

    item_list.add(Item(bread, ExpiryDate("2030-01-01"), Quantity(3)))
    item_list.add(Item(bread, ExpiryDate("2031-01-01"), Quantity(4)))

    assert item_list.get_total_quantity() == 7


def test_set_items_replaces_content(bread, bread_item, item_list) -> None:
    item_list.add(bread_item)
    replacement = [Item(bread, ExpiryDate("2030-01-01")), Item(bread, ExpiryDate("2031-01-01"))]

    item_list.set_items(replacement)

    assert list(item_list) == replacement


def test_set_items_with_duplicates_fails_and_keeps_content(bread, bread_item, item_list) -> None:
    item_list.add(bread_item)

    with pytest.raises(DuplicateItemError):
        item_list.set_items([Item(bread, ExpiryDate("2030-01-01")), Item(bread, ExpiryDate("2030-01-01"), 4)])

    assert list(item_list) == [bread_item]


def test_unmodifiable_view_is_live(bread, bread_item, item_list) -> None:
    view = item_list.as_unmodifiable_view()
    assert len(view) == 0

    item_list.add(bread_item)
    assert list(view) == [bread_item]

    item_list.set_items([])
    assert len(view) == 0
    assert not hasattr(view, "append")


def test_filtered_view_applies_predicate(bread, item_list) -> None:
    small = Item(bread, ExpiryDate("2030-01-01"), Quantity(1))
    large = Item(bread, ExpiryDate("2031-01-01"), Quantity(50))
    item_list.set_items([small, large])

    view = item_list.as_unmodifiable_view(lambda item: item.quantity.value > 10)

    assert list(view) == [large]
    view.set_predicate(None)
    assert list(view) == [small, large]


def test_listeners_receive_changes(bread, bread_item, item_list) -> None:
    events = []
    unsubscribe = item_list.subscribe(events.append)

    item_list.add(bread_item)
    item_list.set_item_count(bread_item, Quantity(2))
    item_list.remove(bread_item)
    unsubscribe()
    item_list.add(bread_item)

    assert [event.kind for event in events] == [ChangeKind.ADDED, ChangeKind.REPLACED, ChangeKind.REMOVED]
    assert events[0].index == 0 and events[0].new == bread_item
    assert events[1].old == bread_item and events[1].new.quantity == Quantity(2)
    assert events[2].old.quantity == Quantity(2)


def test_empty_items_are_never_stored(bread, bread_item, item_list) -> None:
    with pytest.raises(InvalidArgumentError):
        item_list.add(Item(bread, ExpiryDate(FAR_FUTURE), Quantity(0)))
    assert len(item_list) == 0

    item_list.add(bread_item)
    with pytest.raises(InvalidArgumentError):
        item_list.set_items([Item(bread, ExpiryDate("2030-01-01"), 2), Item(bread, ExpiryDate("2031-01-01"), 0)])
    assert list(item_list) == [bread_item]
