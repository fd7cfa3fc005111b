"""Change notifications emitted by the inventory collections."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class ChangeKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    REPLACED = "replaced"
    RESET = "reset"


@dataclass(frozen=True)
class ListChange:
    """Describes a single mutation of an observed collection.

    ``index`` is the position affected in the collection's order. For REPLACED both
    ``old`` and ``new`` are set; for RESET neither is.
    """

    kind: ChangeKind
    index: int | None = None
    old: Any = None
    new: Any = None


ChangeListener = Callable[[ListChange], None]


class ChangeNotifier:
    """Keeps subscribers and delivers changes to them synchronously, in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Registers ``listener`` and returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, change: ListChange) -> None:
        logger.debug(f"Delivering {change.kind.value} change to {len(self._listeners)} listener(s)")
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(change)
