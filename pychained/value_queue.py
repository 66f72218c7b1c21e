"""
FIFO container holding the values accumulated under a single key.

Values come back out in the order they were appended. Iterating does not
drain the queue; pop_front does.
"""

from collections import deque
from typing import Any, Iterable, Iterator


class ValueQueue:
    """A first-in, first-out sequence of values."""

    __slots__ = ('_items',)

    def __init__(self, values: Iterable[Any] = ()):
        self._items = deque(values)

    def append(self, value: Any) -> None:
        """Add value at the back of the queue."""
        self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the oldest value. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop_front from an empty ValueQueue")
        return self._items.popleft()

    def peek_front(self) -> Any:
        """Return the oldest value without removing it."""
        if not self._items:
            raise IndexError("peek_front on an empty ValueQueue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, ValueQueue):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f'ValueQueue({list(self._items)!r})'
