import pytest

from allocvec.core import (
    Allocator,
    ExcessiveSliceRequestedError,
    OutOfMemoryError,
    VecBase,
)


class Tester:
    def __init__(self, value):
        self._value = value

    def get(self):
        return self._value


def filled(values, allocator=None):
    v = VecBase(0, allocator)
    for value in values:
        v.push(value)
    return v


def test_retain():
    v = VecBase()
    for x in [1, 2, 3, 4, 5]:
        v.push(x)
    v.retain(lambda x: x % 2 == 0)
    assert v.as_slice() == [2, 4]


def test_retain_objects():
    v = VecBase()
    for i in range(1, 6):
        v.push(Tester(i))
    v.retain(lambda x: x.get() % 2 == 0)
    assert len(v) == 2
    assert v.as_slice()[0].get() == 2
    assert v.as_slice()[1].get() == 4


def test_retain_keeps_everything():
    v = filled([1, 2, 3])
    v.retain(lambda x: True)
    assert v.as_slice() == [1, 2, 3]


def test_retain_calls_predicate_once_in_order():
    seen = []
    v = filled([3, 1, 2])
    v.retain(lambda x: seen.append(x) or x > 1)
    assert seen == [3, 1, 2]
    assert v.as_slice() == [3, 2]


def test_default_vector_is_empty():
    v = VecBase()
    assert v.is_empty()
    assert len(v) == 0
    assert v.capacity() == 0
    assert v.allocator() == Allocator()


def test_with_capacity():
    v = VecBase(4)
    assert v.capacity() == 4
    assert v.spare_capacity() == 4
    assert v.is_empty()


def test_push_and_pop():
    v = filled([1, 2, 3])
    assert len(v) == 3
    assert v.pop() == 3
    assert v.pop() == 2
    assert v.pop() == 1
    assert v.pop() is None
    assert v.is_empty()


def test_growth_doubles_capacity():
    v = VecBase(4)
    for i in range(5):
        v.push(i)
    assert v.capacity() == 8


def test_reserve_takes_required_when_larger_than_double():
    v = VecBase(2)
    v.reserve(10)
    assert v.capacity() == 10


def test_reserve_noop_when_enough():
    v = VecBase(8)
    v.reserve(8)
    assert v.capacity() == 8


def test_reserve_exact():
    v = VecBase(4)
    v.push(1)
    v.reserve_exact(5)
    assert v.capacity() == 6


def test_reserve_overflow():
    v = filled([1])
    with pytest.raises(ExcessiveSliceRequestedError):
        v.reserve(2 ** 80)


def test_push_within_capacity():
    v = VecBase(1)
    assert v.push_within_capacity("x") is True
    assert v.push_within_capacity("y") is False
    assert v.as_slice() == ["x"]
    assert v.capacity() == 1


def test_remove_shifts():
    v = filled([1, 2, 3, 4])
    assert v.remove(1) == 2
    assert v.as_slice() == [1, 3, 4]


def test_remove_out_of_bounds():
    v = filled([1])
    with pytest.raises(IndexError):
        v.remove(1)
    with pytest.raises(IndexError):
        v.remove(-1)


def test_swap_remove():
    v = filled([1, 2, 3, 4])
    assert v.swap_remove(0) == 1
    assert v.as_slice() == [4, 2, 3]
    assert v.swap_remove(2) == 3
    assert v.as_slice() == [4, 2]
    with pytest.raises(IndexError):
        v.swap_remove(2)


def test_truncate_and_clear_keep_capacity():
    v = filled([1, 2, 3, 4])
    cap = v.capacity()
    v.truncate(10)
    assert v.as_slice() == [1, 2, 3, 4]
    v.truncate(2)
    assert v.as_slice() == [1, 2]
    v.clear()
    assert v.is_empty()
    assert v.capacity() == cap


def test_shrink_to_fit():
    v = VecBase(10)
    v.push(1)
    v.push(2)
    v.shrink_to_fit()
    assert v.capacity() == 2
    assert v.as_slice() == [1, 2]


def test_shrink_to_never_below_len():
    v = VecBase(10)
    for i in range(3):
        v.push(i)
    v.shrink_to(1)
    assert v.capacity() == 3
    v.shrink_to(5)
    assert v.capacity() == 5


def test_resize_grow_and_shrink():
    v = filled([1])
    v.resize(3, 0)
    assert v.as_slice() == [1, 0, 0]
    v.resize(1, 9)
    assert v.as_slice() == [1]


def test_resize_copies_value():
    v = VecBase()
    v.resize(2, [])
    items = v.as_slice()
    assert items[0] is not items[1]
    assert items == [[], []]


def test_resize_with_calls_factory():
    counter = iter(range(100))
    v = VecBase()
    v.resize_with(3, lambda: next(counter))
    assert v.as_slice() == [0, 1, 2]


def test_allocator_limit_raises_and_preserves_contents():
    v = filled([1, 2], Allocator(limit=2))
    with pytest.raises(OutOfMemoryError):
        v.push(3)
    assert v.as_slice() == [1, 2]
    assert v.capacity() == 2


def test_constructor_over_limit():
    with pytest.raises(OutOfMemoryError):
        VecBase(5, Allocator(limit=4))


def test_allocator_methods():
    alloc = Allocator(limit=3)
    assert alloc.allocate(3) == 3
    assert alloc.reallocate(3, 1) == 1
    with pytest.raises(OutOfMemoryError):
        alloc.reallocate(1, 4)
    with pytest.raises(ValueError):
        alloc.allocate(-1)
    assert alloc.clone() == alloc


def test_excessive_error_carries_request():
    err = ExcessiveSliceRequestedError(42)
    assert err.requested == 42
    assert isinstance(err, OutOfMemoryError)


def test_raw_parts_round_trip():
    alloc = Allocator(limit=100)
    v = VecBase(6, alloc)
    for i in range(3):
        v.push(i)
    items, capacity, allocator = v.into_raw_parts()
    assert items == [0, 1, 2]
    assert capacity == 6
    assert allocator is alloc
    assert v.is_empty()
    rebuilt = VecBase.from_raw_parts(items, capacity, allocator)
    assert rebuilt.as_slice() == [0, 1, 2]
    assert rebuilt.capacity() == 6
    assert rebuilt.allocator() is alloc


def test_from_raw_parts_rejects_small_capacity():
    with pytest.raises(ValueError):
        VecBase.from_raw_parts([1, 2, 3], 2)


def test_as_slice_is_a_copy():
    v = filled([1, 2])
    view = v.as_slice()
    view.append(3)
    assert v.as_slice() == [1, 2]