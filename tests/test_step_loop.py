from gridsearch.search.contracts import DriverState, EventKind
from gridsearch.search.driver import SearchDriver
from gridsearch.search.grid import Coord
from gridsearch.search.maze_loader import DEFAULT_MAZE, parse_maze
from gridsearch.search.step_loop import run_steps, run_to_completion, summarize
from gridsearch.search.strategies import StrategyKind


def _driver(kind: StrategyKind = StrategyKind.BREADTH_FIRST) -> SearchDriver:
    driver = SearchDriver(parse_maze(DEFAULT_MAZE), strategy=kind)
    driver.begin(Coord(0, 0), Coord(9, 9))
    return driver


def test_step_payloads_are_numbered_until_solved() -> None:
    driver = _driver()
    payloads = list(run_steps(driver))

    assert [payload.step for payload in payloads] == list(range(1, len(payloads) + 1))
    assert all(payload.strategy == "breadthfirst" for payload in payloads)
    assert payloads[0].events[0].kind == EventKind.VISIT
    assert payloads[0].events[0].cell.to_coord() == Coord(0, 0)
    assert payloads[-1].state == DriverState.SOLVED
    assert payloads[-1].events[-1].kind == EventKind.SOLVED
    assert all(payload.state == DriverState.RUNNING for payload in payloads[:-1])


def test_step_limit_leaves_search_running() -> None:
    driver = _driver(StrategyKind.DEPTH_FIRST)
    payloads = list(run_steps(driver, steps=3))

    assert len(payloads) == 3
    assert driver.state == DriverState.RUNNING

    rest = list(run_steps(driver))
    assert rest[0].step == 4
    assert driver.state == DriverState.SOLVED


def test_run_steps_yields_nothing_before_start() -> None:
    driver = SearchDriver(parse_maze(DEFAULT_MAZE))
    assert list(run_steps(driver)) == []


def test_summary_reports_path_and_counts() -> None:
    driver = _driver(StrategyKind.ASTAR)
    summary = run_to_completion(driver)

    assert summary.state == DriverState.SOLVED
    assert summary.strategy == "astar"
    assert summary.steps == driver.steps
    assert summary.visited == driver.expanded
    assert summary.path[0].to_coord() == Coord(0, 0)
    assert summary.path[-1].to_coord() == Coord(9, 9)
    assert summary.path_length == 18
    assert summarize(driver) == summary
