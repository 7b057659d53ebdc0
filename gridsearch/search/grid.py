"""Grid, coordinate and per-cell visit state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from gridsearch.errors import InvalidGrid


@dataclass(frozen=True, order=True)
class Coord:
    row: int
    col: int

    def neighbors(self) -> tuple["Coord", "Coord", "Coord", "Coord"]:
        """Orthogonal neighbours in expansion order: up, down, left, right."""
        return (
            Coord(self.row - 1, self.col),
            Coord(self.row + 1, self.col),
            Coord(self.row, self.col - 1),
            Coord(self.row, self.col + 1),
        )

    def manhattan(self, other: "Coord") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)


class VisitState(str, Enum):
    EMPTY = "empty"
    VISITED = "visited"
    CANDIDATE = "candidate"
    BLOCKED = "blocked"
    PATH = "path"


@dataclass(frozen=True)
class Grid:
    """Immutable wall layout. ``True`` marks a wall."""

    cells: tuple[tuple[bool, ...], ...]

    def __post_init__(self) -> None:
        if not self.cells:
            raise InvalidGrid("Grid must have at least one row.")
        width = len(self.cells[0])
        if width == 0:
            raise InvalidGrid("Grid must have at least one column.")
        for index, row in enumerate(self.cells):
            if len(row) != width:
                raise InvalidGrid(
                    f"Row {index} has {len(row)} cells, expected {width}."
                )

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[bool]]) -> "Grid":
        return cls(cells=tuple(tuple(bool(cell) for cell in row) for row in rows))

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.row < self.rows and 0 <= coord.col < self.cols

    def is_wall(self, coord: Coord) -> bool:
        return self.cells[coord.row][coord.col]

    def coords(self) -> Iterator[Coord]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield Coord(row, col)


def build_visit_grid(grid: Grid) -> list[list[VisitState]]:
    return [
        [VisitState.BLOCKED if wall else VisitState.EMPTY for wall in row]
        for row in grid.cells
    ]
