"""Tests for the Item entity."""

import gc

import pytest

from src.common.exceptions.custom_exceptions import InvalidArgumentError, ValidationError
from src.inventory_domain.domain.entities.expiry_date import ExpiryDate
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.domain.entities.quantity import Quantity

FAR_FUTURE = "2099-01-01"
LONG_AGO = "2000-01-01"


def test_item_defaults_to_quantity_of_one(bread) -> None:
    item = Item(bread, ExpiryDate(FAR_FUTURE))

    assert item.quantity == Quantity(1)
    assert item.product is bread
    assert item.expiry_date == ExpiryDate(FAR_FUTURE)


def test_item_requires_product_and_expiry_date(bread) -> None:
    with pytest.raises(ValidationError):
        Item(None, ExpiryDate(FAR_FUTURE))
    with pytest.raises(ValidationError):
        Item(bread, None)
    with pytest.raises(ValidationError):
        Item(bread, ExpiryDate(FAR_FUTURE), -2)


def test_is_same_item_ignores_quantity(bread) -> None:
    first = Item(bread, ExpiryDate(FAR_FUTURE), Quantity(5))
    second = Item(bread, ExpiryDate(FAR_FUTURE), Quantity(2))

    assert first.is_same_item(second)
    assert first != second
    assert first.is_same_item(first)
    assert not first.is_same_item(None)


def test_is_same_item_uses_product_value_equality(bread) -> None:
    bread_copy = Product("Bread", "Bakery", "Whole wheat loaf", "2.50")
    edited_bread = Product("Bread", "Bakery", "Rye loaf", "2.50")

    item = Item(bread, ExpiryDate(FAR_FUTURE))

    assert item.is_same_item(Item(bread_copy, ExpiryDate(FAR_FUTURE)))
    assert not item.is_same_item(Item(edited_bread, ExpiryDate(FAR_FUTURE)))
    assert not item.is_same_item(Item(bread, ExpiryDate(LONG_AGO)))


def test_add_same_items_sums_quantities(bread) -> None:
    first = Item(bread, ExpiryDate(FAR_FUTURE), Quantity(5))
    second = Item(bread, ExpiryDate(FAR_FUTURE), Quantity(3))

    result = first.add(second)

    assert result.quantity == Quantity(8)
    assert result.is_same_item(first)
    assert result.is_same_item(second)
    assert first.quantity == Quantity(5)


def test_add_and_subtract_reject_different_items(bread, milk) -> None:
    item = Item(bread, ExpiryDate(FAR_FUTURE))

    with pytest.raises(InvalidArgumentError):
        item.add(Item(milk, ExpiryDate(FAR_FUTURE)))
    with pytest.raises(InvalidArgumentError):
        item.subtract(Item(bread, ExpiryDate(LONG_AGO)))


def test_subtract_does_not_clamp(bread) -> None:
    item = Item(bread, ExpiryDate(FAR_FUTURE), Quantity(2))

    assert item.subtract(Item(bread, ExpiryDate(FAR_FUTURE), Quantity(2))).is_empty()
    with pytest.raises(ValidationError):
        item.subtract(Item(bread, ExpiryDate(FAR_FUTURE), Quantity(3)))


def test_increment_and_decrement_return_new_items(bread_item) -> None:
    assert bread_item.increment(Quantity(3)).quantity == Quantity(8)
    assert bread_item.decrement(Quantity(5)).is_empty()
    assert bread_item.quantity == Quantity(5)

    with pytest.raises(ValidationError):
        bread_item.decrement(Quantity(6))


def test_is_expired(bread) -> None:
    assert Item(bread, ExpiryDate(LONG_AGO)).is_expired()
    assert not Item(bread, ExpiryDate(FAR_FUTURE)).is_expired()


def test_items_order_by_expiry_date_only(bread) -> None:
    late = Item(bread, ExpiryDate("2030-01-01"), Quantity(1))
    early = Item(bread, ExpiryDate("2025-01-01"), Quantity(9))

    assert sorted([late, early]) == [early, late]
    assert early.compare(late) == -1
    assert early.compare(Item(bread, ExpiryDate("2025-01-01"), Quantity(1))) == 0


def test_equal_items_hash_equally(bread) -> None:
    bread_copy = Product("Bread", "Bakery", "Whole wheat loaf", "2.50")
    first = Item(bread, ExpiryDate(FAR_FUTURE), Quantity(5))
    second = Item(bread_copy, ExpiryDate(FAR_FUTURE), Quantity(5))

    assert first == second
    assert hash(first) == hash(second)


def test_item_does_not_keep_its_product_alive() -> None:
    product = Product("Cake", "Bakery", "Chocolate", "12.00")
    item = Item(product, ExpiryDate(FAR_FUTURE))

    del product
    gc.collect()

    assert item.product is None


def test_quantity_arithmetic_works_after_product_is_gone() -> None:
    product = Product("Cake", "Bakery", "Chocolate", "12.00")
    item = Item(product, ExpiryDate(FAR_FUTURE), Quantity(5))
    del product
    gc.collect()

    assert item.increment(Quantity(1)).quantity == Quantity(6)
    assert item.decrement(Quantity(5)).is_empty()
    assert item.with_quantity(Quantity(2)).expiry_date == item.expiry_date
    assert item.add(item).quantity == Quantity(10)


def test_items_without_product_match_no_other_item() -> None:
    cake = Product("Cake", "Bakery", "Chocolate", "12.00")
    pie = Product("Pie", "Bakery", "Apple", "8.00")
    cake_item = Item(cake, ExpiryDate(FAR_FUTURE), Quantity(1))
    pie_item = Item(pie, ExpiryDate(FAR_FUTURE), Quantity(1))
    del cake, pie
    gc.collect()

    assert not cake_item.is_same_item(pie_item)
    assert cake_item != pie_item
    assert cake_item.is_same_item(cake_item)
    assert cake_item == cake_item


def test_hash_is_stable_when_product_is_gone() -> None:
    product = Product("Cake", "Bakery", "Chocolate", "12.00")
    item = Item(product, ExpiryDate(FAR_FUTURE), Quantity(3))
    stock = {item}
    hash_before = hash(item)
    del product
    gc.collect()

    assert hash(item) == hash_before
    assert item in stock


def test_with_product_rebinds_item(bread, milk) -> None:
    item = Item(bread, ExpiryDate(FAR_FUTURE), Quantity(4))
    moved = item.with_product(milk)

    assert moved.product is milk
    assert moved.quantity == Quantity(4)
    assert moved.expiry_date == item.expiry_date
