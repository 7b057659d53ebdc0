"""Step-wise grid search driver."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from gridsearch.errors import InvalidCoordinate, InvalidTransition
from gridsearch.search.contracts import CellRef, DriverState, EventKind, StepEvent
from gridsearch.search.grid import Coord, Grid, VisitState, build_visit_grid
from gridsearch.search.strategies import CandidateSource, StrategyKind

logger = logging.getLogger(__name__)


class SearchDriver:
    """Owns one search over a grid and advances it one candidate per step.

    The driver moves through ``SELECTING_START -> SELECTING_END -> RUNNING``
    and ends in ``SOLVED`` or ``FAILED``. Terminal states hold until
    ``reset`` or ``set_strategy`` tears everything down.

    Depth-first and breadth-first only ever see ``EMPTY`` neighbours, so each
    cell is offered once. A* also sees neighbours still marked ``CANDIDATE``
    and may re-parent them when it finds a cheaper route.
    """

    def __init__(
        self, grid: Grid, strategy: StrategyKind = StrategyKind.ASTAR
    ) -> None:
        self._grid = grid
        self._strategy = strategy
        self.reset()

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def strategy(self) -> StrategyKind:
        return self._strategy

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def start(self) -> Coord | None:
        return self._start

    @property
    def target(self) -> Coord | None:
        return self._target

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def expanded(self) -> int:
        return self._expanded

    @property
    def source(self) -> CandidateSource | None:
        return self._source

    @property
    def predecessors(self) -> Mapping[Coord, Coord]:
        return MappingProxyType(self._predecessors)

    @property
    def path(self) -> list[Coord]:
        return list(self._path)

    @property
    def visits(self) -> tuple[tuple[VisitState, ...], ...]:
        return tuple(tuple(row) for row in self._visits)

    def visit_state(self, coord: Coord) -> VisitState:
        return self._visits[coord.row][coord.col]

    def reset(self) -> None:
        self._state = DriverState.SELECTING_START
        self._start: Coord | None = None
        self._target: Coord | None = None
        self._visits = build_visit_grid(self._grid)
        self._predecessors: dict[Coord, Coord] = {}
        self._source: CandidateSource | None = None
        self._path: list[Coord] = []
        self._steps = 0
        self._expanded = 0

    def set_strategy(self, strategy: StrategyKind) -> None:
        logger.info("Strategy changed %s -> %s", self._strategy.value, strategy.value)
        self._strategy = strategy
        self.reset()

    def select_start(self, coord: Coord) -> None:
        if self._state != DriverState.SELECTING_START:
            raise InvalidTransition(f"Cannot select start while {self._state.value}.")
        self._check_open(coord, "Start")
        self._start = coord
        self._state = DriverState.SELECTING_END

    def select_end(self, coord: Coord) -> None:
        if self._state != DriverState.SELECTING_END:
            raise InvalidTransition(f"Cannot select end while {self._state.value}.")
        self._check_open(coord, "End")
        if self._start is None:
            raise InvalidTransition("Cannot select end before a start is set.")
        self._target = coord
        self._begin(self._start, coord)

    def begin(self, start: Coord, target: Coord) -> None:
        """Reset and start a new search from ``start`` to ``target``."""
        self.reset()
        self.select_start(start)
        self.select_end(target)

    def step(self) -> list[StepEvent]:
        if self._state != DriverState.RUNNING:
            return []
        if self._source is None or self._start is None or self._target is None:
            raise InvalidTransition("Driver is running without an active search.")
        self._steps += 1

        current = self._source.get_candidate()
        if current is None:
            self._state = DriverState.FAILED
            logger.info(
                "No path found after %s steps (%s)", self._steps, self._strategy.value
            )
            return [StepEvent(kind=EventKind.FAILED)]

        self._expanded += 1
        if current == self._target:
            self._path = self._reconstruct_path(self._start, self._target)
            for coord in self._path:
                self._visits[coord.row][coord.col] = VisitState.PATH
            self._state = DriverState.SOLVED
            logger.info(
                "Path of %s cells found after %s steps (%s)",
                len(self._path),
                self._steps,
                self._strategy.value,
            )
            return [
                StepEvent(
                    kind=EventKind.SOLVED,
                    cell=CellRef.of(current),
                    path=[CellRef.of(coord) for coord in self._path],
                )
            ]

        self._visits[current.row][current.col] = VisitState.VISITED
        events = [StepEvent(kind=EventKind.VISIT, cell=CellRef.of(current))]
        for neighbor in self._open_neighbors(current, self._source):
            self._visits[neighbor.row][neighbor.col] = VisitState.CANDIDATE
            accepted = self._source.add_candidate(neighbor, current)
            if accepted:
                self._predecessors[neighbor] = current
            events.append(
                StepEvent(
                    kind=EventKind.CANDIDATE,
                    cell=CellRef.of(neighbor),
                    source=CellRef.of(current),
                    accepted=accepted,
                )
            )
        logger.debug(
            "Step %s expanded (%s, %s) with %s candidates",
            self._steps,
            current.row,
            current.col,
            len(events) - 1,
        )
        return events

    def _begin(self, start: Coord, target: Coord) -> None:
        self._visits = build_visit_grid(self._grid)
        self._predecessors = {}
        self._path = []
        self._steps = 0
        self._expanded = 0
        self._source = CandidateSource.create(
            self._strategy, target=target, capacity=self._grid.size
        )
        self._source.add_candidate(start, None)
        self._state = DriverState.RUNNING
        logger.info(
            "Search started from (%s, %s) to (%s, %s) using %s",
            start.row,
            start.col,
            target.row,
            target.col,
            self._strategy.value,
        )

    def _check_open(self, coord: Coord, label: str) -> None:
        if not self._grid.in_bounds(coord):
            raise InvalidCoordinate(
                f"{label} ({coord.row}, {coord.col}) is outside the "
                f"{self._grid.rows}x{self._grid.cols} grid."
            )
        if self._grid.is_wall(coord):
            raise InvalidCoordinate(f"{label} ({coord.row}, {coord.col}) is a wall.")

    def _open_neighbors(
        self, current: Coord, source: CandidateSource
    ) -> list[Coord]:
        offerable = _REOFFER_STATES if source.reoffers_candidates else _EMPTY_STATES
        return [
            neighbor
            for neighbor in current.neighbors()
            if self._grid.in_bounds(neighbor)
            and self._visits[neighbor.row][neighbor.col] in offerable
        ]

    def _reconstruct_path(self, start: Coord, target: Coord) -> list[Coord]:
        path = [target]
        current = target
        while current != start:
            current = self._predecessors[current]
            path.append(current)
        path.reverse()
        return path


_EMPTY_STATES = frozenset({VisitState.EMPTY})
_REOFFER_STATES = frozenset({VisitState.EMPTY, VisitState.CANDIDATE})
