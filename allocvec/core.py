"""Growable vector with explicit capacity management backed by an allocator."""

from __future__ import annotations

import copy
import sys
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")

_MAX_LEN = sys.maxsize


class OutOfMemoryError(MemoryError):
    """Raised when an allocator cannot satisfy a request."""


class ExcessiveSliceRequestedError(OutOfMemoryError):
    """Raised when a requested element count cannot be represented."""

    def __init__(self, requested: int) -> None:
        super().__init__(f"excessive slice requested: {requested} elements")
        self.requested = requested


@dataclass(frozen=True)
class Allocator:
    """Hands out element capacity, refusing requests above an optional limit."""

    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValueError("allocator limit must not be negative")

    def _grant(self, capacity: int) -> int:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if capacity > _MAX_LEN:
            raise ExcessiveSliceRequestedError(capacity)
        if self.limit is not None and capacity > self.limit:
            raise OutOfMemoryError(
                f"cannot allocate {capacity} elements (limit is {self.limit})"
            )
        return capacity

    def allocate(self, capacity: int) -> int:
        """Allocate room for `capacity` elements and return the granted capacity."""
        return self._grant(capacity)

    def reallocate(self, old_capacity: int, new_capacity: int) -> int:
        """Resize an allocation of `old_capacity` elements to `new_capacity`."""
        if old_capacity < 0:
            raise ValueError("capacity must not be negative")
        return self._grant(new_capacity)

    def clone(self) -> "Allocator":
        """Return an equivalent allocator."""
        return Allocator(self.limit)


class VecBase(Generic[T]):
    """A vector that tracks its capacity separately from its length.

    Growth goes through the vector's allocator, and every failed
    (re)allocation raises OutOfMemoryError without changing the contents.
    """

    def __init__(self, capacity: int = 0, allocator: Optional[Allocator] = None) -> None:
        self._allocator = allocator if allocator is not None else Allocator()
        self._capacity = self._allocator.allocate(capacity)
        self._items: List[T] = []

    def allocator(self) -> Allocator:
        """Return the allocator associated with this vector."""
        return self._allocator

    def as_slice(self) -> List[T]:
        """Return a list holding every element of the vector."""
        return list(self._items)

    def capacity(self) -> int:
        """Return how many elements fit before reallocating."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def spare_capacity(self) -> int:
        """Return the number of unused slots between length and capacity."""
        return self._capacity - len(self._items)

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self.truncate(0)

    def pop(self) -> Optional[T]:
        """Remove and return the last element, or None if the vector is empty."""
        if not self._items:
            return None
        return self._items.pop()

    def push(self, value: T) -> None:
        """Append `value`, growing the capacity if needed."""
        self.reserve(1)
        self._items.append(value)

    def push_within_capacity(self, value: T) -> bool:
        """Append `value` only if no reallocation is needed; report whether it was added."""
        if len(self._items) < self._capacity:
            self._items.append(value)
            return True
        return False

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of bounds for length {len(self._items)}")

    def remove(self, index: int) -> T:
        """Remove and return the element at `index`, shifting later elements down."""
        self._check_index(index)
        return self._items.pop(index)

    def swap_remove(self, index: int) -> T:
        """Remove and return the element at `index`, moving the last element into its place."""
        self._check_index(index)
        items = self._items
        items[index], items[-1] = items[-1], items[index]
        return items.pop()

    def truncate(self, length: int) -> None:
        """Drop every element at or after `length`; no-op if already shorter."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length < len(self._items):
            del self._items[length:]

    def _required(self, additional: int) -> int:
        if additional < 0:
            raise ValueError("additional must not be negative")
        required = len(self._items) + additional
        if required > _MAX_LEN:
            raise ExcessiveSliceRequestedError(required)
        return required

    def _reallocate(self, new_capacity: int) -> None:
        self._capacity = self._allocator.reallocate(self._capacity, new_capacity)

    def reserve(self, additional: int) -> None:
        """Ensure room for at least `additional` more elements, growing geometrically."""
        required = self._required(additional)
        if required <= self._capacity:
            return
        self._reallocate(max(required, min(self._capacity * 2, _MAX_LEN)))

    def reserve_exact(self, additional: int) -> None:
        """Ensure room for exactly `additional` more elements."""
        required = self._required(additional)
        if required <= self._capacity:
            return
        self._reallocate(required)

    def shrink_to(self, min_capacity: int) -> None:
        """Set the capacity to the larger of `min_capacity` and the length."""
        if min_capacity < 0:
            raise ValueError("capacity must not be negative")
        self._reallocate(max(min_capacity, len(self._items)))

    def shrink_to_fit(self) -> None:
        """Set the capacity to the length."""
        self.shrink_to(len(self._items))

    def resize(self, new_len: int, value: T) -> None:
        """Grow with copies of `value` or truncate so the length becomes `new_len`."""
        self.resize_with(new_len, lambda: copy.copy(value))

    def resize_with(self, new_len: int, factory: Callable[[], T]) -> None:
        """Grow with results of `factory()` or truncate so the length becomes `new_len`."""
        if new_len < 0:
            raise ValueError("length must not be negative")
        if new_len >= len(self._items):
            self.reserve(new_len - len(self._items))
            while len(self._items) < new_len:
                self._items.append(factory())
        else:
            self.truncate(new_len)

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """Keep only the elements for which `predicate` is true, preserving order."""
        self._items[:] = [item for item in self._items if predicate(item)]

    @classmethod
    def from_raw_parts(
        cls,
        items: Iterable[T],
        capacity: int,
        allocator: Optional[Allocator] = None,
    ) -> "VecBase[T]":
        """Build a vector that takes over `items` stored in a buffer of `capacity`."""
        elements = list(items)
        if capacity < len(elements):
            raise ValueError(
                f"capacity {capacity} is smaller than the number of elements {len(elements)}"
            )
        vec = cls(0, allocator)
        vec._capacity = capacity
        vec._items = elements
        return vec

    def into_raw_parts(self) -> Tuple[List[T], int, Any]:
        """Hand over the elements, capacity and allocator, leaving the vector empty."""
        items, capacity = self._items, self._capacity
        self._items = []
        self._capacity = 0
        return items, capacity, self._allocator