from dataclasses import dataclass

from gridsearch.search.binary_heap import BinaryMinHeap


def _int_less_than(a: int, b: int) -> bool:
    return a < b


def test_extract_in_sorted_order() -> None:
    heap = BinaryMinHeap(_int_less_than)
    values = [10, 5, 20, 12, 7, 8, 17, 5, 22]
    for value in values:
        heap.insert(value)

    extracted = [heap.extract_min() for _ in range(len(values))]
    assert extracted == sorted(values)
    assert heap.extract_min() is None

    for value in (10, 5, 20):
        heap.insert(value)
    assert [heap.extract_min() for _ in range(3)] == [5, 10, 20]
    assert heap.extract_min() is None


def test_peek_does_not_mutate() -> None:
    heap = BinaryMinHeap(_int_less_than)
    assert heap.peek_min() is None

    for value in (4, 1, 3):
        heap.insert(value)

    assert heap.peek_min() == 1
    assert heap.peek_min() == 1
    assert len(heap) == 3
    assert heap.extract_min() == 1
    assert heap.peek_min() == 3


def test_non_decreasing_with_many_duplicates() -> None:
    heap = BinaryMinHeap(_int_less_than)
    values = [(index * 7919) % 13 for index in range(200)]
    for value in values:
        heap.insert(value)

    extracted = []
    while heap:
        extracted.append(heap.extract_min())

    assert len(extracted) == len(values)
    assert all(a <= b for a, b in zip(extracted, extracted[1:]))


@dataclass(frozen=True)
class _Entry:
    name: str
    score: int


def test_custom_comparator() -> None:
    heap = BinaryMinHeap(lambda a, b: a.score < b.score)
    for name, score in (("a", 10), ("b", 5), ("c", 20), ("d", 25), ("e", 12), ("f", 8)):
        heap.insert(_Entry(name, score))

    assert heap.extract_min() == _Entry("b", 5)
    assert heap.extract_min() == _Entry("f", 8)


def test_max_ordering_through_comparator() -> None:
    heap = BinaryMinHeap(lambda a, b: a > b)
    for value in (3, 9, 1, 7):
        heap.insert(value)

    assert [heap.extract_min() for _ in range(4)] == [9, 7, 3, 1]
