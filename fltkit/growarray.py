"""A list-like container that tracks its allocated capacity explicitly."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar, overload

T = TypeVar("T")

_MAX_ELEMSIZE = 15


class GrowableArray(Generic[T]):
    """Sequence with an explicit capacity that doubles when it fills up.

    The element size is bookkeeping only (1-15 bytes), kept for callers
    that need to know how large each stored element is meant to be.
    """

    __slots__ = ("_items", "_size", "_elemsize")

    def __init__(self, initsize: int = 8, elemsize: int = 8) -> None:
        if initsize < 0:
            raise ValueError(f"initial size must not be negative, got {initsize}")
        if not 1 <= elemsize <= _MAX_ELEMSIZE:
            raise ValueError(
                f"element size must be between 1 and {_MAX_ELEMSIZE}, got {elemsize}"
            )
        self._items: list[T] = []
        self._size = initsize
        self._elemsize = elemsize

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._items!r}, "
            f"alloc={self._size}, elemsize={self._elemsize})"
        )

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._size:
            self._size = max(self._size << 1, 1)

    def append(self, elem: T) -> None:
        """Add an element at the end, doubling the capacity when full."""
        self._grow_if_full()
        self._items.append(elem)

    def insert(self, index: int, elem: T) -> None:
        """Insert before ``index``; an index at or past the end appends."""
        if index < 0:
            raise IndexError(f"insert index must not be negative, got {index}")
        self._grow_if_full()
        self._items.insert(index, elem)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for array of {len(self._items)} elements"
            )

    def remove(self, index: int) -> None:
        """Remove the element at ``index``, keeping the order of the rest."""
        self._check_index(index)
        del self._items[index]

    def remove_fast(self, index: int) -> None:
        """Remove the element at ``index`` by moving the last element into its slot."""
        self._check_index(index)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last

    def find(self, elem: T) -> int:
        """Return the index of the first element equal to ``elem``, or -1."""
        return next((i for i, item in enumerate(self._items) if item == elem), -1)

    def set_count(self, newcount: int) -> None:
        """Set the number of used elements; new slots are filled with None."""
        if not 0 <= newcount <= self._size:
            raise ValueError(
                f"count {newcount} outside capacity 0..{self._size}"
            )
        current = len(self._items)
        if newcount < current:
            del self._items[newcount:]
        else:
            self._items.extend([None] * (newcount - current))  # type: ignore[list-item]

    def set_size(self, newsize: int) -> None:
        """Change the capacity; it cannot drop below the element count."""
        if newsize < len(self._items):
            raise ValueError(
                f"capacity {newsize} is smaller than element count {len(self._items)}"
            )
        self._size = newsize

    def fit(self) -> None:
        """Shrink the capacity to the element count."""
        self._size = len(self._items)

    def alloc_count(self) -> int:
        """Return the number of allocated element slots."""
        return self._size

    def elemsize(self) -> int:
        """Return the declared size of one element in bytes."""
        return self._elemsize