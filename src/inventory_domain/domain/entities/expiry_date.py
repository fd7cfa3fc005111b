"""Expiry date value object."""

from dataclasses import dataclass
from datetime import date, datetime

from src.common.exceptions.custom_exceptions import ParseError, ValidationError
from src.common.utils.date_utils import format_iso_date, parse_iso_date, today

MESSAGE_CONSTRAINTS = "Expiry date should be a valid calendar date in the format YYYY-MM-DD."


@dataclass(frozen=True, order=True)  # Value objects are immutable
class ExpiryDate:
    """Represents the calendar date after which an item is considered expired.

    Past dates are accepted; whether a date has passed is only meaningful relative
    to the moment ``is_past`` is called.
    """

    value: date

    def __post_init__(self) -> None:
        """Accepts either a date or a YYYY-MM-DD string."""
        if isinstance(self.value, str):
            object.__setattr__(self, "value", self._parse(self.value))
        elif isinstance(self.value, datetime):
            object.__setattr__(self, "value", self.value.date())
        elif not isinstance(self.value, date):
            raise ValidationError(MESSAGE_CONSTRAINTS)

    @staticmethod
    def _parse(text: str) -> date:
        parsed = parse_iso_date(text)
        if parsed is None:
            raise ParseError(f"{MESSAGE_CONSTRAINTS} Got: '{text}'")
        return parsed

    @classmethod
    def parse(cls, text: str) -> "ExpiryDate":
        """Builds an ExpiryDate from its YYYY-MM-DD text form."""
        return cls(cls._parse(text))

    @staticmethod
    def is_valid(text: str) -> bool:
        return parse_iso_date(text) is not None

    def is_past(self) -> bool:
        """Returns True if the date lies before today. Evaluated on every call."""
        return self.value < today()

    def days_until(self) -> int:
        """Number of days from today to this date, negative once it has passed."""
        return (self.value - today()).days

    def compare(self, other: "ExpiryDate") -> int:
        """Returns -1, 0 or 1 when this date is before, equal to or after ``other``."""
        if self.value < other.value:
            return -1
        if self.value > other.value:
            return 1
        return 0

    def __str__(self) -> str:
        return format_iso_date(self.value)
