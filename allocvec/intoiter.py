"""Owning, double-ended iterator over the contents of a consumed vector."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class IntoIter(Generic[T]):
    """Yield the elements of a consumed vector from either end.

    The iterator owns the elements and keeps the allocator and capacity of
    the buffer it came from. Once exhausted it stays exhausted.
    """

    def __init__(self, items: Iterable[T], allocator: Any, capacity: int) -> None:
        self._items: Deque[T] = deque(items)
        if capacity < len(self._items):
            raise ValueError(
                f"capacity {capacity} is smaller than the number of elements {len(self._items)}"
            )
        self._allocator = allocator
        self._capacity = capacity

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._items:
            raise StopIteration
        return self._items.popleft()

    def next_back(self) -> T:
        """Remove and return the last remaining element.

        Raises StopIteration once every element has been taken.
        """
        if not self._items:
            raise StopIteration
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def allocator(self) -> Any:
        """Return the allocator that owns the underlying buffer."""
        return self._allocator

    def capacity(self) -> int:
        """Return the capacity of the buffer the elements came from."""
        return self._capacity