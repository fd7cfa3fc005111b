"""Item entity."""

import weakref
from typing import TYPE_CHECKING, Optional

from src.common.exceptions.custom_exceptions import InvalidArgumentError, ValidationError

from .expiry_date import ExpiryDate
from .quantity import Quantity

if TYPE_CHECKING:
    from .product import Product

ITEMS_MUST_BE_SAME_CONSTRAINT = "Items must have the same product and expiry date."


class Item:
    """A quantified batch of a Product expiring on a specific date.

    Items are immutable: every quantity change produces a new Item. The product is
    held through a weak reference, so an Item never keeps its owner alive.
    """

    __slots__ = ("_product_ref", "_product_hash", "_expiry_date", "_quantity", "__weakref__")

    def __init__(self, product: "Product", expiry_date: ExpiryDate, quantity: Quantity | None = None) -> None:
        if product is None or expiry_date is None:
            raise ValidationError("Item requires a product and an expiry date.")
        if not isinstance(expiry_date, ExpiryDate):
            expiry_date = ExpiryDate(expiry_date)
        if quantity is None:
            quantity = Quantity(1)
        elif not isinstance(quantity, Quantity):
            quantity = Quantity(quantity)

        self._product_ref = weakref.ref(product)
        # Product fields are immutable, so its hash can be taken once
        self._product_hash = hash(product)
        self._expiry_date = expiry_date
        self._quantity = quantity

    @classmethod
    def _copy_with(cls, source: "Item", quantity: Quantity) -> "Item":
        """Copies ``source`` with a new quantity, sharing its product reference."""
        item = cls.__new__(cls)
        item._product_ref = source._product_ref
        item._product_hash = source._product_hash
        item._expiry_date = source._expiry_date
        item._quantity = quantity
        return item

    @property
    def product(self) -> Optional["Product"]:
        """The owning product, or None once that product no longer exists."""
        return self._product_ref()

    @property
    def expiry_date(self) -> ExpiryDate:
        return self._expiry_date

    @property
    def quantity(self) -> Quantity:
        return self._quantity

    def add(self, other: "Item") -> "Item":
        if not self.is_same_item(other):
            raise InvalidArgumentError(ITEMS_MUST_BE_SAME_CONSTRAINT)
        return self.with_quantity(self._quantity.add(other.quantity))

    def subtract(self, other: "Item") -> "Item":
        if not self.is_same_item(other):
            raise InvalidArgumentError(ITEMS_MUST_BE_SAME_CONSTRAINT)
        return self.with_quantity(self._quantity.subtract(other.quantity))

    def increment(self, delta: Quantity) -> "Item":
        return self.with_quantity(self._quantity.add(delta))

    def decrement(self, delta: Quantity) -> "Item":
        return self.with_quantity(self._quantity.subtract(delta))

    def with_quantity(self, quantity: Quantity) -> "Item":
        return Item._copy_with(self, quantity)

    def with_product(self, product: "Product") -> "Item":
        """Returns a copy of this item that belongs to ``product``."""
        return Item(product, self._expiry_date, self._quantity)

    def is_empty(self) -> bool:
        return self._quantity.is_empty()

    def is_expired(self) -> bool:
        return self._expiry_date.is_past()

    def _has_same_product(self, other: "Item") -> bool:
        # An item whose product no longer exists matches no other item
        product = self.product
        other_product = other.product
        return product is not None and other_product is not None and other_product == product

    def is_same_item(self, other: Optional["Item"]) -> bool:
        """Weak identity: same product and same expiry date, quantity ignored."""
        if other is self:
            return True
        return (
            isinstance(other, Item)
            and self._has_same_product(other)
            and other.expiry_date == self._expiry_date
        )

    def compare(self, other: "Item") -> int:
        """Orders items by expiry date only."""
        return self._expiry_date.compare(other.expiry_date)

    def __lt__(self, other: "Item") -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self._expiry_date < other.expiry_date

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Item):
            return NotImplemented
        return (
            self._has_same_product(other)
            and other.expiry_date == self._expiry_date
            and other.quantity == self._quantity
        )

    def __hash__(self) -> int:
        return hash((self._product_hash, self._expiry_date, self._quantity))

    def __repr__(self) -> str:
        return f"Item(product={self.product!r}, expiry_date={self._expiry_date!s}, quantity={self._quantity!s})"

    def __str__(self) -> str:
        return f"{self.product}; ExpiryDate: {self._expiry_date}; Quantity: {self._quantity}"
