"""Binary max-heap priority queue.

The heap lives in a Python list indexed from 1 (slot 0 is unused) so that the
parent of slot ``i`` is ``i // 2`` and its children are ``2i`` and ``2i + 1``.
Items are ranked by an optional ``key`` callable; without one, items are
compared directly with ``<``. Only the extraction order is guaranteed:
successive ``remove_max`` calls yield a non-increasing sequence. Ties come out
in no particular order.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TypeVar

from .errors import EmptyQueueError

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class PriorityQueue(Generic[T]):
    """Max-heap over a growable list.

    Parameters
    ----------
    key : callable, optional
        Maps an item to the value it is ranked by. The item with the largest
        key is extracted first.
    """

    def __init__(self, key: Optional[Callable[[T], Any]] = None):
        self._key = key
        self._array: List[Optional[T]] = []
        self._size = 0
        self.clear()

    def clear(self) -> None:
        """Drop every item and reset the capacity."""
        self._size = 0
        self._array = [None] * DEFAULT_CAPACITY

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def _less(self, a: T, b: T) -> bool:
        if self._key is None:
            return a < b  # type: ignore[operator]
        return self._key(a) < self._key(b)

    def _grow(self) -> None:
        new_capacity = len(self._array) * 2 + 1
        self._array.extend([None] * (new_capacity - len(self._array)))

    def add(self, item: T) -> None:
        """Insert ``item`` and percolate it up to its place."""
        if len(self._array) - 1 == self._size:
            self._grow()

        array = self._array
        self._size += 1
        child = self._size
        parent = child // 2
        while parent > 0 and self._less(array[parent], item):  # type: ignore[arg-type]
            array[child] = array[parent]
            child = parent
            parent //= 2
        array[child] = item

    def peek(self) -> T:
        """Return the maximum item without removing it."""
        if self.is_empty():
            raise EmptyQueueError("peek from an empty priority queue")
        return self._array[1]  # type: ignore[return-value]

    def remove_max(self) -> T:
        """Remove and return the maximum item.

        Raises
        ------
        EmptyQueueError
            If the queue holds no items.
        """
        if self.is_empty():
            raise EmptyQueueError("remove_max from an empty priority queue")

        array = self._array
        item = array[1]
        array[1] = array[self._size]
        array[self._size] = None
        self._size -= 1
        if self._size > 0:
            self._percolate_down(1)
        return item  # type: ignore[return-value]

    def _percolate_down(self, parent: int) -> None:
        array = self._array
        size = self._size
        item = array[parent]
        child = parent * 2

        while child <= size:
            # Promote the larger of the two children.
            if child != size and self._less(array[child], array[child + 1]):  # type: ignore[arg-type]
                child += 1
            if not self._less(item, array[child]):  # type: ignore[arg-type]
                break
            array[parent] = array[child]
            parent = child
            child *= 2

        array[parent] = item

    def __repr__(self) -> str:
        return f"PriorityQueue(size={self._size})"
