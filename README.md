# allocvec

A growable vector whose capacity is tracked separately from its length and
whose storage is granted by an allocator. When an allocator refuses a request,
`OutOfMemoryError` is raised and the vector's contents are left as they were.

The package is a library only; it has no command-line program.

## Installation

```
pip install allocvec
```

## Modules

- `allocvec.core`: `Allocator`, `VecBase`, `OutOfMemoryError` and
  `ExcessiveSliceRequestedError` (a subclass of `OutOfMemoryError`, which is
  itself a `MemoryError`).
- `allocvec.vector`: `AVec`, the full vector built on `VecBase`.
- `allocvec.intoiter`: `IntoIter`, the iterator that `AVec.into_iter()` returns.

## Usage

```python
from allocvec.core import Allocator, OutOfMemoryError
from allocvec.vector import AVec

v = AVec(4, Allocator(None))           # initial capacity 4, unlimited allocator
v.extend([1, 2, 3, 4, 5])
assert len(v) == 5
assert v.capacity() >= 5                # grows geometrically (at least doubling)

v.retain(lambda x: x % 2 == 0)
assert v.as_slice() == [2, 4]

v.shrink_to_fit()
assert v.capacity() == 2
```

### Bounded allocators

An `Allocator` built with a limit refuses any capacity above it:

```python
small = AVec(0, Allocator(3))
small.extend_from_slice([1, 2, 3])
try:
    small.push(4)
except OutOfMemoryError:
    pass
assert small.as_slice() == [1, 2, 3]    # nothing changed on failure
```

`push_within_capacity(value)` never reallocates: it returns `True` if the value
was appended and `False` if the vector was already full.

### Other operations

- `reserve` (geometric growth) and `reserve_exact`, `shrink_to`,
  `shrink_to_fit`, `spare_capacity`
- `resize(new_len, value)` fills with copies of `value`; `resize_with(new_len,
  factory)` fills with `factory()` results; both truncate when shrinking
- `truncate`, `clear`, `pop` (returns `None` when empty), `remove` and
  `swap_remove` (raise `IndexError` for an index out of range)
- `append(other)` moves every element out of another vector, leaving it empty
- `extend_from_within(start, stop)` appends copies of a range of the vector
- `clone()`, `clone_from(source)`, `clone_in(allocator)`
- `into_boxed_slice()` shrinks to fit and returns the elements as a tuple,
  leaving the vector empty
- `into_iter()` consumes the vector and returns an `IntoIter`; take elements
  from the front with `next()` and from the back with `next_back()`; it also
  reports `len()`, `allocator()` and `capacity()`
- `into_raw_parts()` returns `(items, capacity, allocator)` and empties the
  vector; `AVec.from_raw_parts(items, capacity, allocator)` builds one back
- `AVec.from_iterable(iterable, allocator)` builds a vector from any iterable

Two `AVec` objects compare and hash like lists of their elements. Indexing and
slicing read like a list; assigning to a slice must keep the length the same,
otherwise `ValueError` is raised.

### Writing bytes

`write(data)` appends the bytes of `data` (as integers) and returns how many
were written; if the allocator refuses, it raises `OSError` with `errno.ENOMEM`.
`flush()` has nothing pending to write and returns normally.

```python
buf = AVec(0, Allocator(None))
assert buf.write(b"hi") == 2
assert buf.as_slice() == [104, 105]
```

## Running the tests

```
pip install -e .[test]
pytest
```