import pytest

from gridsearch.search.ring_queue import RingQueue


def test_fifo_order() -> None:
    queue: RingQueue[int] = RingQueue(7)
    for value in (25, 50, 75, 100):
        queue.enqueue(value)

    assert [queue.dequeue() for _ in range(4)] == [25, 50, 75, 100]
    assert queue.dequeue() is None

    queue.enqueue(5)
    assert queue.dequeue() == 5
    assert queue.dequeue() is None


def test_single_element_is_not_empty() -> None:
    queue: RingQueue[str] = RingQueue(1)
    queue.enqueue("only")

    assert len(queue) == 1
    assert queue
    assert queue.peek() == "only"
    assert queue.dequeue() == "only"
    assert not queue


def test_growth_preserves_order_after_wraparound() -> None:
    queue: RingQueue[int] = RingQueue(4)
    for value in range(4):
        queue.enqueue(value)
    assert queue.dequeue() == 0
    assert queue.dequeue() == 1
    # Head now sits mid-buffer; fill past capacity to force a wrapped copy.
    for value in range(4, 9):
        queue.enqueue(value)

    assert queue.capacity == 8
    assert list(queue) == [2, 3, 4, 5, 6, 7, 8]
    assert [queue.dequeue() for _ in range(7)] == [2, 3, 4, 5, 6, 7, 8]


def test_interleaved_operations_match_enqueue_order() -> None:
    queue: RingQueue[int] = RingQueue(2)
    expected: list[int] = []
    seen: list[int] = []
    next_value = 0
    for round_size in (3, 1, 5, 2, 8):
        for _ in range(round_size):
            queue.enqueue(next_value)
            expected.append(next_value)
            next_value += 1
        for _ in range(round_size // 2 + 1):
            value = queue.dequeue()
            if value is not None:
                seen.append(value)
    while (value := queue.dequeue()) is not None:
        seen.append(value)

    assert seen == expected


def test_empty_dequeue_has_no_side_effects() -> None:
    queue: RingQueue[int] = RingQueue(3)
    for _ in range(3):
        assert queue.dequeue() is None
    assert len(queue) == 0
    assert queue.capacity == 3

    queue.enqueue(1)
    assert queue.dequeue() == 1


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        RingQueue(0)


class _FailingCopyQueue(RingQueue[int]):
    """Queue whose buffer copy runs out of memory halfway through."""

    fail_copy = False

    def __iter__(self):
        for index, value in enumerate(super().__iter__()):
            if self.fail_copy and index == 2:
                raise MemoryError("out of memory")
            yield value


def test_failed_growth_leaves_queue_intact() -> None:
    queue = _FailingCopyQueue(4)
    for value in range(4):
        queue.enqueue(value)
    assert queue.dequeue() == 0
    queue.enqueue(4)

    queue.fail_copy = True
    with pytest.raises(MemoryError):
        queue.enqueue(5)
    queue.fail_copy = False

    assert len(queue) == 4
    assert queue.capacity == 4
    assert [queue.dequeue() for _ in range(4)] == [1, 2, 3, 4]
    assert queue.dequeue() is None
