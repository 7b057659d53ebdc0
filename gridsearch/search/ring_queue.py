"""Growable circular-buffer FIFO queue."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class RingQueue(Generic[T]):
    """FIFO queue over a fixed buffer that doubles when full.

    Emptiness is tracked with an explicit count, so ``head`` alone never has
    to distinguish "empty" from "one element".
    """

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("RingQueue capacity must be at least 1.")
        self._items: list[T | None] = [None] * capacity
        self._head = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> Iterator[T]:
        capacity = len(self._items)
        for offset in range(self._count):
            yield self._items[(self._head + offset) % capacity]

    @property
    def capacity(self) -> int:
        return len(self._items)

    def enqueue(self, value: T) -> None:
        if self._count == len(self._items):
            self._grow()
        tail = (self._head + self._count) % len(self._items)
        self._items[tail] = value
        self._count += 1

    def dequeue(self) -> T | None:
        if self._count == 0:
            return None
        value = self._items[self._head]
        self._items[self._head] = None
        self._head = (self._head + 1) % len(self._items)
        self._count -= 1
        return value

    def peek(self) -> T | None:
        if self._count == 0:
            return None
        return self._items[self._head]

    def _grow(self) -> None:
        # The new buffer is complete before it replaces the old one.
        grown: list[T | None] = list(self)
        grown.extend([None] * (len(self._items) * 2 - len(grown)))
        self._items = grown
        self._head = 0
