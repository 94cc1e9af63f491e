"""Allocator-aware vector with cloning, comparison, indexing and byte-sink support."""

from __future__ import annotations

import copy
import errno
import operator
from typing import Any, Iterable, Iterator, Optional, Tuple, TypeVar, Union, overload

from allocvec.core import Allocator, OutOfMemoryError, VecBase
from allocvec.intoiter import IntoIter

T = TypeVar("T")


class AVec(VecBase[T]):
    """Growable vector whose capacity is obtained from an explicit allocator."""

    @classmethod
    def from_iterable(
        cls, iterable: Iterable[T], allocator: Optional[Allocator] = None
    ) -> "AVec[T]":
        """Build a vector holding every element of `iterable`."""
        vec = cls(0, allocator)
        vec.extend(iterable)
        return vec

    def append(self, other: VecBase[T]) -> None:
        """Move every element of `other` to the end of this vector, emptying `other`.

        Nothing is moved if growing this vector fails.
        """
        if other is self:
            raise ValueError("cannot append a vector to itself")
        self.reserve(len(other))
        self._items.extend(other._items)
        other._items = []

    def extend_from_slice(self, items: Iterable[T]) -> None:
        """Append copies of every element of `items`.

        Nothing is copied if growing the vector fails.
        """
        elements = list(items)
        self.reserve(len(elements))
        self._items.extend(copy.copy(item) for item in elements)

    def extend_from_within(self, start: Optional[int] = None, stop: Optional[int] = None) -> None:
        """Append copies of the elements in `start .. stop` of this vector."""
        length = len(self._items)
        begin = 0 if start is None else start
        end = length if stop is None else stop
        if begin < 0 or end < 0:
            raise IndexError("range bounds must not be negative")
        if begin > end:
            raise IndexError(f"range start {begin} is greater than range end {end}")
        if end > length:
            raise IndexError(f"range end {end} out of bounds for length {length}")
        self.reserve(end - begin)
        self._items.extend(copy.copy(item) for item in self._items[begin:end])

    def extend(self, iterable: Iterable[T]) -> None:
        """Append every element produced by `iterable`."""
        self.reserve(operator.length_hint(iterable))
        for item in iterable:
            self.push(item)

    def into_boxed_slice(self) -> Tuple[T, ...]:
        """Shrink the buffer to the length and hand the elements over as a tuple.

        The vector is left untouched if shrinking fails and empty otherwise.
        """
        self.shrink_to_fit()
        items, _capacity, _allocator = self.into_raw_parts()
        return tuple(items)

    def clone(self) -> "AVec[T]":
        """Return a new vector holding copies of the elements, using a clone of the allocator."""
        return self.clone_in(self._allocator.clone())

    def clone_from(self, source: VecBase[T]) -> None:
        """Replace the contents with copies of `source`, reusing the existing buffer.

        The current contents are kept if growing the buffer fails.
        """
        self.reserve(max(0, len(source) - len(self._items)))
        self.clear()
        self.extend_from_slice(list(source._items))

    def clone_in(self, allocator: Allocator) -> "AVec[T]":
        """Return a new vector holding copies of the elements, using `allocator`."""
        vec: AVec[T] = type(self)(len(self._items), allocator)
        vec.extend_from_slice(self._items)
        return vec

    def into_iter(self) -> IntoIter[T]:
        """Consume the vector, returning an iterator that owns its elements."""
        items, capacity, allocator = self.into_raw_parts()
        return IntoIter(items, allocator, capacity)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list: ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        return self._items[index]

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        if isinstance(index, slice):
            values = list(value)
            expected = len(range(*index.indices(len(self._items))))
            if len(values) != expected:
                raise ValueError(
                    f"cannot assign {len(values)} elements to a range of {expected}"
                )
            self._items[index] = values
        else:
            self._items[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AVec):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AVec):
            return NotImplemented
        return self._items < other._items

    def __le__(self, other: object) -> bool:
        if not isinstance(other, AVec):
            return NotImplemented
        return self._items <= other._items

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, AVec):
            return NotImplemented
        return self._items > other._items

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, AVec):
            return NotImplemented
        return self._items >= other._items

    def __hash__(self) -> int:
        return hash(tuple(self._items))

    def __repr__(self) -> str:
        return (
            f"AVec(allocator={self._allocator!r}, capacity={self._capacity}, "
            f"data={self._items!r})"
        )

    def write(self, data: bytes) -> int:
        """Append the bytes of `data` and return how many were written."""
        try:
            self.extend_from_slice(bytes(data))
        except OutOfMemoryError as err:
            raise OSError(errno.ENOMEM, "out of memory") from err
        return len(data)

    def flush(self) -> None:
        """Confirm that every written byte is stored within the buffer.

        Written bytes are stored immediately, so nothing is pending; an
        inconsistent buffer is reported as an OSError.
        """
        if len(self._items) > self._capacity:
            raise OSError(
                errno.EIO,
                f"length {len(self._items)} exceeds capacity {self._capacity}",
            )