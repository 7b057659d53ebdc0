"""Load mazes from `.`/`#` text files."""

from __future__ import annotations

import logging
from pathlib import Path

from gridsearch.errors import InvalidCoordinate, InvalidGrid
from gridsearch.search.grid import Coord, Grid

logger = logging.getLogger(__name__)

OPEN_TILE = "."
WALL_TILE = "#"
MAZE_SUFFIXES: set[str] = {".txt", ".maze"}

DEFAULT_MAZE = (
    "....#.....\n"
    ".......###\n"
    ".......#..\n"
    "..######..\n"
    "..#....#..\n"
    "..#.......\n"
    ".##.......\n"
    "........#.\n"
    "#.........\n"
    "......#...\n"
)


def parse_maze(text: str) -> Grid:
    rows: list[tuple[bool, ...]] = []
    width: int | None = None
    for line_no, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.rstrip("\r")
        if not line:
            continue
        if width is None:
            width = len(line)
        elif len(line) != width:
            raise InvalidGrid(
                f"Line {line_no} has {len(line)} cells, expected {width}."
            )
        rows.append(tuple(_parse_tile(char, line_no) for char in line))
    if not rows:
        raise InvalidGrid("Maze contains no rows.")
    return Grid(cells=tuple(rows))


def load_maze(path: Path) -> Grid:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing maze file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise InvalidGrid(f"Maze file {path} is not valid UTF-8 text.") from exc
    grid = parse_maze(text)
    logger.info("Loaded maze %s with %s rows and %s cols", path, grid.rows, grid.cols)
    return grid


def list_maze_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in MAZE_SUFFIXES
    )


def parse_coord(value: str) -> Coord:
    parts = value.replace(" ", "").split(",")
    if len(parts) != 2:
        raise InvalidCoordinate(f"Expected ROW,COL but got {value!r}.")
    try:
        row, col = (int(part) for part in parts)
    except ValueError as exc:
        raise InvalidCoordinate(f"Expected integer ROW,COL but got {value!r}.") from exc
    return Coord(row, col)


def _parse_tile(char: str, line_no: int) -> bool:
    if char == OPEN_TILE:
        return False
    if char == WALL_TILE:
        return True
    raise InvalidGrid(f"Unexpected character {char!r} on line {line_no}.")
