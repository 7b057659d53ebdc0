import pytest
from pydantic import ValidationError

from gridsearch.search.contracts import (
    CellRef,
    DriverState,
    EventKind,
    SearchSummary,
    StepEvent,
    StepPayload,
)
from gridsearch.search.grid import Coord


def test_cell_ref_round_trips_coord() -> None:
    ref = CellRef.of(Coord(2, 5))
    assert ref.row == 2
    assert ref.col == 5
    assert ref.to_coord() == Coord(2, 5)


def test_step_event_validation() -> None:
    visit = StepEvent(kind=EventKind.VISIT, cell=CellRef(row=0, col=0))
    assert visit.kind == EventKind.VISIT

    with pytest.raises(ValidationError):
        StepEvent(kind=EventKind.VISIT)
    with pytest.raises(ValidationError):
        StepEvent(kind=EventKind.CANDIDATE, cell=CellRef(row=0, col=1))
    with pytest.raises(ValidationError):
        StepEvent(kind=EventKind.SOLVED)
    with pytest.raises(ValidationError):
        StepEvent(kind=EventKind.FAILED, path=[CellRef(row=0, col=0)])
    with pytest.raises(ValidationError):
        StepEvent(kind=EventKind.FAILED, extra="nope")


def test_step_payload_dump() -> None:
    payload = StepPayload(
        step=3,
        state=DriverState.RUNNING,
        strategy="astar",
        events=[
            StepEvent(
                kind=EventKind.CANDIDATE,
                cell=CellRef(row=1, col=0),
                source=CellRef(row=0, col=0),
                accepted=True,
            )
        ],
    )

    dumped = payload.model_dump(mode="json")

    assert dumped["state"] == "running"
    assert dumped["events"][0]["kind"] == "CANDIDATE"
    assert StepPayload.model_validate(dumped) == payload


def test_summary_path_length() -> None:
    summary = SearchSummary(
        strategy="breadthfirst",
        state=DriverState.SOLVED,
        steps=5,
        visited=5,
        path=[CellRef(row=0, col=col) for col in range(3)],
    )
    assert summary.path_length == 2

    empty = SearchSummary(
        strategy="astar", state=DriverState.FAILED, steps=1, visited=0
    )
    assert empty.path_length == 0
    assert DriverState.FAILED.terminal
    assert not DriverState.RUNNING.terminal
