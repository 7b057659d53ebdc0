"""Application entry for running searches outside a UI."""

from __future__ import annotations

import logging
from pathlib import Path

from gridsearch.search.contracts import SearchSummary
from gridsearch.search.driver import SearchDriver
from gridsearch.search.grid import Coord, Grid
from gridsearch.search.maze_loader import DEFAULT_MAZE, load_maze, parse_maze
from gridsearch.search.step_loop import run_to_completion
from gridsearch.search.strategies import StrategyKind

logger = logging.getLogger(__name__)


def resolve_grid(maze_path: Path | None) -> Grid:
    if maze_path is None:
        return parse_maze(DEFAULT_MAZE)
    return load_maze(maze_path)


def run_search(
    grid: Grid,
    start: Coord,
    target: Coord,
    *,
    strategy: StrategyKind = StrategyKind.ASTAR,
    max_steps: int | None = None,
) -> SearchSummary:
    driver = SearchDriver(grid, strategy=strategy)
    driver.begin(start, target)
    return run_to_completion(driver, max_steps=max_steps)


def compare_strategies(
    grid: Grid,
    start: Coord,
    target: Coord,
    *,
    max_steps: int | None = None,
) -> list[SearchSummary]:
    summaries = []
    for kind in StrategyKind:
        summary = run_search(grid, start, target, strategy=kind, max_steps=max_steps)
        logger.info(
            "%s finished %s in %s steps", kind.label, summary.state.value, summary.steps
        )
        summaries.append(summary)
    return summaries
