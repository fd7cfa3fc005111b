"""Value objects for the scalar fields of a Product."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from src.common.exceptions.custom_exceptions import ValidationError


def _require_text(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be provided as text.")
    return value.strip()


@dataclass(frozen=True)
class Name:
    """Product name. Must not be blank."""

    MESSAGE_CONSTRAINTS = "Names should not be blank and should not exceed 100 characters."

    value: str

    def __post_init__(self) -> None:
        text = _require_text(self.value, "Name")
        if not text or len(text) > 100:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", text)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Category:
    """Product category. Must not be blank."""

    MESSAGE_CONSTRAINTS = "Categories should not be blank and should not exceed 50 characters."

    value: str

    def __post_init__(self) -> None:
        text = _require_text(self.value, "Category")
        if not text or len(text) > 50:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", text)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Description:
    """Free-form product description. May be empty but never missing."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _require_text(self.value, "Description"))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Price:
    """Non-negative price with at most two decimal places, e.g. 2.50."""

    MESSAGE_CONSTRAINTS = "Price should be a non-negative number with at most 2 decimal places."

    value: Decimal

    def __post_init__(self) -> None:
        raw = self.value
        if isinstance(raw, bool) or raw is None:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        try:
            # str() keeps floats like 2.5 from turning into long binary expansions
            amount = raw if isinstance(raw, Decimal) else Decimal(str(raw).strip())
        except InvalidOperation as e:
            raise ValidationError(self.MESSAGE_CONSTRAINTS, original_exception=e)
        if not amount.is_finite() or amount < 0 or amount.normalize().as_tuple().exponent < -2:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        try:
            # Fails for amounts with more digits than the decimal context can hold
            cents = amount.quantize(Decimal("0.01"))
        except InvalidOperation as e:
            raise ValidationError(self.MESSAGE_CONSTRAINTS, original_exception=e)
        object.__setattr__(self, "value", cents)

    def __str__(self) -> str:
        return f"{self.value:.2f}"
