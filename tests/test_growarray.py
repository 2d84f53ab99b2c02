import pytest

from fltkit.growarray import GrowableArray


def make(values, initsize=2):
    arr = GrowableArray(initsize, 4)
    for value in values:
        arr.append(value)
    return arr


def test_append_and_iterate():
    arr = make([10, 20, 30])
    assert list(arr) == [10, 20, 30]
    assert len(arr) == 3
    assert arr[1] == 20


def test_capacity_doubles_when_full():
    arr = make([1, 2], initsize=2)
    assert arr.alloc_count() == 2
    arr.append(3)
    assert arr.alloc_count() == 4


def test_capacity_never_below_count():
    arr = GrowableArray(0, 4)
    for i in range(50):
        arr.append(i)
        assert arr.alloc_count() >= len(arr)


def test_insert_middle_shifts():
    arr = make(["a", "b", "c"])
    arr.insert(1, "x")
    assert list(arr) == ["a", "x", "b", "c"]


def test_insert_past_end_appends():
    arr = make(["a", "b"])
    arr.insert(10, "z")
    assert list(arr) == ["a", "b", "z"]


def test_insert_negative_index_raises():
    arr = make([1])
    with pytest.raises(IndexError):
        arr.insert(-1, 5)


def test_remove_keeps_order():
    arr = make([1, 2, 3, 4])
    arr.remove(1)
    assert list(arr) == [1, 3, 4]


def test_remove_last():
    arr = make([1, 2, 3])
    arr.remove(2)
    assert list(arr) == [1, 2]


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_remove_out_of_range_raises(index):
    arr = make([1, 2, 3])
    with pytest.raises(IndexError):
        arr.remove(index)


def test_remove_fast_moves_last_element():
    arr = make([1, 2, 3, 4])
    arr.remove_fast(0)
    assert list(arr) == [4, 2, 3]


def test_remove_fast_last_element():
    arr = make([1, 2, 3])
    arr.remove_fast(2)
    assert list(arr) == [1, 2]


def test_remove_fast_out_of_range_raises():
    arr = make([])
    with pytest.raises(IndexError):
        arr.remove_fast(0)


def test_find():
    arr = make([5, 6, 7, 6])
    assert arr.find(6) == 1
    assert arr.find(42) == -1


def test_set_count_truncates():
    arr = make([1, 2, 3, 4])
    arr.set_count(2)
    assert list(arr) == [1, 2]


def test_set_count_extends_with_none():
    arr = GrowableArray(4, 4)
    arr.append(1)
    arr.set_count(3)
    assert list(arr) == [1, None, None]


def test_set_count_beyond_capacity_raises():
    arr = GrowableArray(2, 4)
    with pytest.raises(ValueError):
        arr.set_count(3)


def test_set_size_and_fit():
    arr = make([1, 2, 3], initsize=2)
    arr.set_size(32)
    assert arr.alloc_count() == 32
    arr.fit()
    assert arr.alloc_count() == len(arr)
    assert list(arr) == [1, 2, 3]


def test_set_size_below_count_raises():
    arr = make([1, 2, 3])
    with pytest.raises(ValueError):
        arr.set_size(1)


def test_elemsize_is_kept():
    arr = GrowableArray(1, 15)
    arr.append(1)
    arr.append(2)
    assert arr.elemsize() == 15


@pytest.mark.parametrize("elemsize", [0, 16])
def test_invalid_elemsize_raises(elemsize):
    with pytest.raises(ValueError):
        GrowableArray(4, elemsize)


def test_negative_initsize_raises():
    with pytest.raises(ValueError):
        GrowableArray(-1, 4)