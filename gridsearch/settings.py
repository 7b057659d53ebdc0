"""Runtime settings resolved from arguments and environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from gridsearch.errors import InvalidSetting
from gridsearch.search.strategies import StrategyKind, parse_strategy

DEFAULT_STRATEGY = "astar"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class SearchSettings:
    strategy: StrategyKind
    maze_path: Path | None = None
    max_steps: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(
    *,
    strategy: str | None = None,
    maze_path: Path | None = None,
    max_steps: int | None = None,
    log_level: str | None = None,
) -> SearchSettings:
    strategy_name = strategy or os.getenv("GRIDSEARCH_STRATEGY") or DEFAULT_STRATEGY
    env_maze = os.getenv("GRIDSEARCH_MAZE")
    return SearchSettings(
        strategy=parse_strategy(strategy_name),
        maze_path=maze_path or (Path(env_maze) if env_maze else None),
        max_steps=(
            max_steps if max_steps is not None else _env_int("GRIDSEARCH_MAX_STEPS")
        ),
        log_level=_log_level(
            log_level or os.getenv("GRIDSEARCH_LOG_LEVEL") or DEFAULT_LOG_LEVEL
        ),
    )


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidSetting(f"{name} must be an integer, got {raw!r}.") from exc


def _log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidSetting(f"Unknown log level {raw!r}.")
    return level
