"""Data Transfer Objects for stored inventory data."""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any

from src.common.exceptions.custom_exceptions import StorageError
from src.inventory_domain.domain.entities.expiry_date import ExpiryDate
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.domain.entities.quantity import Quantity

logger = logging.getLogger(__name__)


@dataclass
class ItemDTO:
    """DTO for a stored item. The owning product is implied by where the item is stored."""

    expiry_date: str
    quantity: int

    @classmethod
    def from_item(cls, item: Item) -> "ItemDTO":
        return cls(expiry_date=str(item.expiry_date), quantity=item.quantity.value)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ItemDTO":
        if not isinstance(data, dict) or "expiry_date" not in data or "quantity" not in data:
            raise StorageError(f"Item entry is missing 'expiry_date' or 'quantity': {data!r}")
        return cls(expiry_date=data["expiry_date"], quantity=data["quantity"])

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    def to_item(self, product: Product) -> Item:
        return Item(product, ExpiryDate.parse(self.expiry_date), Quantity(self.quantity))


@dataclass
class ProductDTO:
    """DTO for a stored product and its items, in insertion order."""

    name: str
    category: str
    description: str
    price: str  # Kept as text so two-decimal prices survive a round trip exactly
    items: list[ItemDTO] = field(default_factory=list)

    @classmethod
    def from_product(cls, product: Product) -> "ProductDTO":
        return cls(
            name=product.name.value,
            category=product.category.value,
            description=product.description.value,
            price=str(product.price),
            items=[ItemDTO.from_item(item) for item in product.items],
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProductDTO":
        required = ("name", "category", "description", "price")
        if not isinstance(data, dict) or any(key not in data for key in required):
            raise StorageError(f"Product entry is missing one of {required}: {data!r}")
        items = data.get("items") or []
        if not isinstance(items, list):
            raise StorageError(f"Items of product '{data['name']}' must be a list")
        return cls(
            name=data["name"],
            category=data["category"],
            description=data["description"],
            price=str(data["price"]),
            items=[ItemDTO.from_dict(item) for item in items],
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    def to_product(self) -> Product:
        """Builds the product first, then re-attaches each stored item to it."""
        product = Product(self.name, self.category, self.description, self.price)
        for item_dto in self.items:
            product.add_item(item_dto.to_item(product))
        logger.debug(f"Loaded product '{self.name}' with {len(self.items)} item(s)")
        return product
