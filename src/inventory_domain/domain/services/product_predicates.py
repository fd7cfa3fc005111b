"""Predicates used to filter the product and item views."""

from decimal import Decimal
from typing import Callable

from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.product import Product

ProductPredicate = Callable[[Product], bool]
ItemPredicate = Callable[[Item], bool]


def SHOW_ALL_PRODUCTS(product: Product) -> bool:
    return True


def name_contains_keywords(keywords: list[str]) -> ProductPredicate:
    """Matches products whose name contains any of the keywords, ignoring case."""
    lowered = [keyword.lower() for keyword in keywords if keyword.strip()]

    def predicate(product: Product) -> bool:
        name = product.name.value.lower()
        return any(keyword in name for keyword in lowered)

    return predicate


def category_matches(category: str) -> ProductPredicate:
    wanted = category.strip().lower()
    return lambda product: product.category.value.lower() == wanted


def description_contains(text: str) -> ProductPredicate:
    wanted = text.strip().lower()
    return lambda product: wanted in product.description.value.lower()


def price_in_range(start: Decimal | float | str | None = None, end: Decimal | float | str | None = None) -> ProductPredicate:
    """Matches products priced within [start, end]; a missing bound is open."""
    low = Decimal(str(start)) if start is not None else None
    high = Decimal(str(end)) if end is not None else None

    def predicate(product: Product) -> bool:
        price = product.price.value
        if low is not None and price < low:
            return False
        if high is not None and price > high:
            return False
        return True

    return predicate


def has_expired_items(product: Product) -> bool:
    return any(item.is_expired() for item in product.items)


def all_of(*predicates: ProductPredicate) -> ProductPredicate:
    return lambda product: all(predicate(product) for predicate in predicates)


def item_is_expired(item: Item) -> bool:
    return item.is_expired()


def item_expires_within(days: int) -> ItemPredicate:
    """Matches items that are still good today but expire within ``days`` days."""
    return lambda item: 0 <= item.expiry_date.days_until() <= days
