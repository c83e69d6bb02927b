"""Cursor-addressable lists used by the wizard's selection screens.

A :class:`SelectionList` owns an ordered sequence of
:class:`SelectableItem` wrappers plus a cursor.  Navigation wraps around
in both directions and is a no-op on an empty list, so the cursor is
either ``None`` or a valid index at all times.

Two activation strategies sit on top of the shared navigation:

- :class:`InclusionList` flips the ``included`` flag of the item under
  the cursor (education, experience, projects).
- :class:`ChoiceList` returns the item under the cursor as the single
  choice without touching any flag (job titles).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = [
    "ChoiceList",
    "InclusionList",
    "SelectableItem",
    "SelectionList",
]

T = TypeVar("T")


@dataclass(slots=True)
class SelectableItem(Generic[T]):
    """A loaded record plus its inclusion flag.

    Attributes:
        value: The wrapped record.
        included: Whether the record is exported to the document.
    """

    value: T
    included: bool = True


class SelectionList(Generic[T]):
    """Ordered items with a wraparound cursor."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[SelectableItem[T]] = [SelectableItem(v) for v in values]
        self._cursor: int | None = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SelectableItem[T]]:
        return iter(self._items)

    def __getitem__(self, index: int) -> SelectableItem[T]:
        return self._items[index]

    @property
    def cursor(self) -> int | None:
        """Index of the highlighted item, or ``None`` before first navigation."""
        return self._cursor

    def is_empty(self) -> bool:
        return not self._items

    def select_initial(self) -> None:
        """Highlight the first item when a screen is entered."""
        if self._items:
            self._cursor = 0

    def next(self) -> None:
        if not self._items:
            return
        if self._cursor is None or self._cursor >= len(self._items) - 1:
            self._cursor = 0
        else:
            self._cursor += 1

    def previous(self) -> None:
        # An unset cursor lands on the first item regardless of direction.
        if not self._items:
            return
        if self._cursor is None:
            self._cursor = 0
        elif self._cursor == 0:
            self._cursor = len(self._items) - 1
        else:
            self._cursor -= 1

    def current(self) -> SelectableItem[T] | None:
        """Return the highlighted item, or ``None`` if nothing is highlighted."""
        if self._cursor is None or not 0 <= self._cursor < len(self._items):
            return None
        return self._items[self._cursor]

    def values(self) -> list[T]:
        return [item.value for item in self._items]


class InclusionList(SelectionList[T]):
    """Selection list whose activation toggles inclusion."""

    def toggle_current(self) -> None:
        item = self.current()
        if item is not None:
            item.included = not item.included

    def included_values(self) -> list[T]:
        """Return the values still marked as included, in original order."""
        return [item.value for item in self._items if item.included]


class ChoiceList(SelectionList[T]):
    """Selection list whose activation picks a single item."""

    def choose_current(self) -> T | None:
        item = self.current()
        return None if item is None else item.value
