"""Read-only live views over the inventory collections."""

from collections.abc import Iterator, Sequence
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class FilteredListView(Sequence, Generic[T]):
    """Read-only view over a list, optionally filtered by a predicate.

    The view never copies its source: the predicate is re-applied on every access,
    so changes to the underlying list, to the predicate, or to anything the predicate
    depends on (such as the current date) show up immediately.
    """

    def __init__(self, source: list[T], predicate: Callable[[T], bool] | None = None) -> None:
        self._source = source
        self._predicate = predicate

    @property
    def predicate(self) -> Callable[[T], bool] | None:
        return self._predicate

    def set_predicate(self, predicate: Callable[[T], bool] | None) -> None:
        self._predicate = predicate

    def _visible(self) -> list[T]:
        if self._predicate is None:
            return self._source
        return [element for element in self._source if self._predicate(element)]

    def snapshot(self) -> list[T]:
        """Returns a plain list copy of what the view currently shows."""
        return list(self._visible())

    def __getitem__(self, index):
        return self._visible()[index]

    def __len__(self) -> int:
        return len(self._visible())

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.snapshot()!r})"
