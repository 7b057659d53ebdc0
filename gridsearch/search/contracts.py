"""Serialisable step output for the search driver."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gridsearch.search.grid import Coord


class DriverState(str, Enum):
    SELECTING_START = "selecting_start"
    SELECTING_END = "selecting_end"
    RUNNING = "running"
    SOLVED = "solved"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (DriverState.SOLVED, DriverState.FAILED)


class EventKind(str, Enum):
    VISIT = "VISIT"
    CANDIDATE = "CANDIDATE"
    SOLVED = "SOLVED"
    FAILED = "FAILED"


class CellRef(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    row: int
    col: int

    @classmethod
    def of(cls, coord: Coord) -> "CellRef":
        return cls(row=coord.row, col=coord.col)

    def to_coord(self) -> Coord:
        return Coord(self.row, self.col)


class StepEvent(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: EventKind
    cell: CellRef | None = None
    source: CellRef | None = None
    accepted: bool | None = None
    path: list[CellRef] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_event(self) -> "StepEvent":
        if self.kind in (EventKind.VISIT, EventKind.CANDIDATE) and self.cell is None:
            raise ValueError(f"{self.kind.value} requires a cell")
        if self.kind == EventKind.CANDIDATE and self.accepted is None:
            raise ValueError("CANDIDATE requires accepted")
        if self.kind == EventKind.SOLVED and not self.path:
            raise ValueError("SOLVED requires a path")
        if self.kind == EventKind.FAILED and self.path:
            raise ValueError("FAILED cannot include a path")
        return self


class StepPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    step: int
    state: DriverState
    strategy: str
    events: list[StepEvent] = Field(default_factory=list)


class SearchSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    strategy: str
    state: DriverState
    steps: int
    visited: int
    path: list[CellRef] = Field(default_factory=list)

    @property
    def path_length(self) -> int:
        """Number of moves on the path (cells minus one)."""
        return max(0, len(self.path) - 1)
