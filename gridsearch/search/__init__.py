"""Search core: containers, strategies and the step-wise driver."""

from gridsearch.search.binary_heap import BinaryMinHeap
from gridsearch.search.contracts import (
    CellRef,
    DriverState,
    EventKind,
    SearchSummary,
    StepEvent,
    StepPayload,
)
from gridsearch.search.driver import SearchDriver
from gridsearch.search.grid import Coord, Grid, VisitState
from gridsearch.search.maze_loader import (
    DEFAULT_MAZE,
    list_maze_files,
    load_maze,
    parse_coord,
    parse_maze,
)
from gridsearch.search.ring_queue import RingQueue
from gridsearch.search.step_loop import run_steps, run_to_completion, summarize
from gridsearch.search.strategies import (
    AStarSearch,
    BreadthFirstSearch,
    CandidateSource,
    DepthFirstSearch,
    StrategyKind,
    parse_strategy,
)

__all__ = [
    "AStarSearch",
    "BinaryMinHeap",
    "BreadthFirstSearch",
    "CandidateSource",
    "CellRef",
    "Coord",
    "DEFAULT_MAZE",
    "DepthFirstSearch",
    "DriverState",
    "EventKind",
    "Grid",
    "RingQueue",
    "SearchDriver",
    "SearchSummary",
    "StepEvent",
    "StepPayload",
    "StrategyKind",
    "VisitState",
    "list_maze_files",
    "load_maze",
    "parse_coord",
    "parse_maze",
    "parse_strategy",
    "run_steps",
    "run_to_completion",
    "summarize",
]
