"""Candidate management for depth-first, breadth-first and A* search."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from gridsearch.errors import InvalidStrategy
from gridsearch.search.binary_heap import BinaryMinHeap
from gridsearch.search.grid import Coord
from gridsearch.search.ring_queue import RingQueue


class StrategyKind(str, Enum):
    DEPTH_FIRST = "depthfirst"
    BREADTH_FIRST = "breadthfirst"
    ASTAR = "astar"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    StrategyKind.DEPTH_FIRST: "Depth First",
    StrategyKind.BREADTH_FIRST: "Breadth First",
    StrategyKind.ASTAR: "AStar",
}


def parse_strategy(name: str) -> StrategyKind:
    key = name.strip().lower().replace("-", "").replace("_", "")
    for kind in StrategyKind:
        if kind.value == key:
            return kind
    choices = ", ".join(kind.value for kind in StrategyKind)
    raise InvalidStrategy(f"Unknown strategy {name!r}; expected one of: {choices}.")


class SearchStrategy(Protocol):
    def add_candidate(self, candidate: Coord, from_: Coord | None = None) -> bool:
        """Offer a coordinate; return True when ``from_`` is its new best parent."""

    def get_candidate(self) -> Coord | None:
        """Return the next coordinate to expand, or None when exhausted."""


class DepthFirstSearch:
    def __init__(self) -> None:
        self._stack: list[Coord] = []

    def add_candidate(self, candidate: Coord, from_: Coord | None = None) -> bool:
        self._stack.append(candidate)
        return True

    def get_candidate(self) -> Coord | None:
        if not self._stack:
            return None
        return self._stack.pop()


class BreadthFirstSearch:
    def __init__(self, capacity: int = 16) -> None:
        self._queue: RingQueue[Coord] = RingQueue(max(1, capacity))

    def add_candidate(self, candidate: Coord, from_: Coord | None = None) -> bool:
        self._queue.enqueue(candidate)
        return True

    def get_candidate(self) -> Coord | None:
        return self._queue.dequeue()


@dataclass(frozen=True)
class ScoreEntry:
    coord: Coord
    f_score: int
    order: int


def score_less_than(a: ScoreEntry, b: ScoreEntry) -> bool:
    # Equal f-scores fall back to insertion order so runs are reproducible.
    return (a.f_score, a.order) < (b.f_score, b.order)


_UNSEEN = float("inf")


class AStarSearch:
    """A* over unit-cost moves with a Manhattan-distance heuristic.

    ``add_candidate`` reports True only when it lowers the candidate's
    g-score; the caller owns the predecessor map and updates it on True.
    The start node is the candidate offered with no ``from_`` and gets g = 0.
    """

    def __init__(self, target: Coord) -> None:
        self.target = target
        self.open_set: set[Coord] = set()
        self.closed_set: set[Coord] = set()
        self.g_score: dict[Coord, int] = {}
        self._heap: BinaryMinHeap[ScoreEntry] = BinaryMinHeap(score_less_than)
        self._counter = itertools.count()

    def add_candidate(self, candidate: Coord, from_: Coord | None = None) -> bool:
        if candidate in self.closed_set:
            return False
        if from_ is None:
            tentative = 0
        else:
            tentative = self.g_score.get(from_, 0) + 1

        self.open_set.add(candidate)
        if tentative >= self.g_score.get(candidate, _UNSEEN):
            return False

        self.g_score[candidate] = tentative
        self._heap.insert(
            ScoreEntry(
                coord=candidate,
                f_score=tentative + candidate.manhattan(self.target),
                order=next(self._counter),
            )
        )
        return True

    def get_candidate(self) -> Coord | None:
        while self.open_set and self._heap:
            entry = self._heap.extract_min()
            if entry is None or entry.coord not in self.open_set:
                continue
            self.open_set.remove(entry.coord)
            self.closed_set.add(entry.coord)
            return entry.coord
        return None


class CandidateSource:
    """One of the three strategies, chosen when the search starts."""

    def __init__(self, kind: StrategyKind, strategy: SearchStrategy) -> None:
        self.kind = kind
        self._strategy = strategy

    @classmethod
    def create(
        cls, kind: StrategyKind, *, target: Coord, capacity: int = 16
    ) -> "CandidateSource":
        if kind == StrategyKind.DEPTH_FIRST:
            return cls(kind, DepthFirstSearch())
        if kind == StrategyKind.BREADTH_FIRST:
            return cls(kind, BreadthFirstSearch(capacity))
        if kind == StrategyKind.ASTAR:
            return cls(kind, AStarSearch(target))
        raise InvalidStrategy(f"Unsupported strategy: {kind!r}")

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    @property
    def reoffers_candidates(self) -> bool:
        """True when queued cells may be offered again with a cheaper parent."""
        return self.kind == StrategyKind.ASTAR

    def add_candidate(self, candidate: Coord, from_: Coord | None = None) -> bool:
        return self._strategy.add_candidate(candidate, from_)

    def get_candidate(self) -> Coord | None:
        return self._strategy.get_candidate()
