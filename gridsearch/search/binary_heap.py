"""Array-backed binary min-heap with an injected ordering."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

LessThan = Callable[[T, T], bool]


class BinaryMinHeap(Generic[T]):
    """Min-heap ordered by ``less_than``.

    Equal elements come out in an unspecified order and duplicates are kept;
    callers that push the same key twice must discard stale entries
    themselves.
    """

    def __init__(self, less_than: LessThan) -> None:
        self._items: list[T] = []
        self._less_than = less_than

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def insert(self, value: T) -> None:
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def extract_min(self) -> T | None:
        if not self._items:
            return None
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def peek_min(self) -> T | None:
        if not self._items:
            return None
        return self._items[0]

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not self._less_than(items[index], items[parent]):
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and self._less_than(items[left], items[smallest]):
                smallest = left
            if right < size and self._less_than(items[right], items[smallest]):
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest
