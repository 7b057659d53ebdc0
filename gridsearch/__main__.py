"""Module entry point for `python -m gridsearch`."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from gridsearch.app import compare_strategies, resolve_grid, run_search
from gridsearch.errors import GridSearchError
from gridsearch.log import configure_logging
from gridsearch.render.summary import render_path, render_summaries
from gridsearch.search.contracts import DriverState
from gridsearch.search.grid import Coord, Grid
from gridsearch.search.maze_loader import list_maze_files, parse_coord
from gridsearch.settings import load_settings


def main(argv: list[str] | None = None, *, console: Console | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    if args.list_mazes is not None:
        mazes = list_maze_files(args.list_mazes)
        if not mazes:
            console.print(f"No maze files found in {args.list_mazes}")
            return 1
        for path in mazes:
            console.print(path.name)
        return 0

    try:
        settings = load_settings(
            strategy=args.strategy,
            maze_path=args.maze,
            max_steps=args.max_steps,
            log_level=args.log_level,
        )
        configure_logging(settings.log_level)
        grid = resolve_grid(settings.maze_path)
        start = parse_coord(args.start) if args.start else Coord(0, 0)
        end = parse_coord(args.end) if args.end else _default_end(grid)

        if args.compare:
            summaries = compare_strategies(
                grid, start, end, max_steps=settings.max_steps
            )
            console.print(render_summaries(summaries))
            return 0 if all(s.state == DriverState.SOLVED for s in summaries) else 2

        summary = run_search(
            grid,
            start,
            end,
            strategy=settings.strategy,
            max_steps=settings.max_steps,
        )
    except (GridSearchError, FileNotFoundError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1

    console.print(render_summaries([summary]))
    console.print(render_path(summary))
    return 0 if summary.state == DriverState.SOLVED else 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search a maze for a path.")
    parser.add_argument(
        "--maze",
        type=Path,
        default=None,
        help="Maze file of '.' and '#' rows (defaults to the built-in maze).",
    )
    parser.add_argument(
        "--list-mazes",
        type=Path,
        default=None,
        metavar="DIR",
        help="List maze files in a directory and exit.",
    )
    parser.add_argument(
        "--start",
        default=None,
        help="Start cell as ROW,COL (defaults to 0,0).",
    )
    parser.add_argument(
        "--end",
        default=None,
        help="End cell as ROW,COL (defaults to the bottom-right cell).",
    )
    parser.add_argument(
        "--strategy",
        default=None,
        help="Search strategy: depthfirst, breadthfirst, or astar.",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Stop after this many steps. Omit to run until solved or failed.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING).",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Run every strategy on the same maze and compare results.",
    )
    return parser


def _default_end(grid: Grid) -> Coord:
    return Coord(grid.rows - 1, grid.cols - 1)


if __name__ == "__main__":
    raise SystemExit(main())
