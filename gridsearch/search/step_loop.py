"""Drive a SearchDriver step by step and collect its output."""

from __future__ import annotations

from typing import Iterator

from gridsearch.search.contracts import CellRef, SearchSummary, StepPayload
from gridsearch.search.driver import SearchDriver


def run_steps(driver: SearchDriver, steps: int | None = None) -> Iterator[StepPayload]:
    """Yield one payload per step until the search ends or ``steps`` run out."""
    step_count = 0
    while steps is None or step_count < steps:
        if driver.state.terminal:
            return
        events = driver.step()
        if not events:
            return
        step_count += 1
        yield StepPayload(
            step=driver.steps,
            state=driver.state,
            strategy=driver.strategy.value,
            events=events,
        )


def run_to_completion(
    driver: SearchDriver, *, max_steps: int | None = None
) -> SearchSummary:
    for _ in run_steps(driver, steps=max_steps):
        pass
    return summarize(driver)


def summarize(driver: SearchDriver) -> SearchSummary:
    return SearchSummary(
        strategy=driver.strategy.value,
        state=driver.state,
        steps=driver.steps,
        visited=driver.expanded,
        path=[CellRef.of(coord) for coord in driver.path],
    )
