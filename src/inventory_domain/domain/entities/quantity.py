"""Quantity value object."""

from dataclasses import dataclass

from src.common.exceptions.custom_exceptions import ValidationError

MESSAGE_CONSTRAINTS = "Quantity should be a non-negative integer."


@dataclass(frozen=True, order=True)  # Value objects are immutable
class Quantity:
    """Represents a non-negative stock count."""

    value: int

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        # bool is an int subclass but never a meaningful count
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(MESSAGE_CONSTRAINTS)
        if self.value < 0:
            raise ValidationError(MESSAGE_CONSTRAINTS)

    def add(self, other: "Quantity") -> "Quantity":
        return Quantity(self.value + other.value)

    def subtract(self, other: "Quantity") -> "Quantity":
        """Returns the difference; fails instead of clamping when it would be negative."""
        if self.value < other.value:
            raise ValidationError(f"Cannot subtract {other.value} from a quantity of {self.value}.")
        return Quantity(self.value - other.value)

    def is_empty(self) -> bool:
        return self.value == 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
