"""Unit tests for the core schema building blocks."""

import pytest
from pydantic import ValidationError

from campusim.environment import Interval, Route, ScheduleEntry
from campusim.schemas import Event, OperationResult, Priority, ResultStatus


def test_priority_levels_are_ordinal():
    assert Priority.OPTIONAL < Priority.HIGH < Priority.MANDATORY
    assert int(Priority.MANDATORY) == 3


def test_event_is_frozen_and_coerces_priority():
    event = Event(
        event_id="E1",
        event_type="Lecture",
        location="Lab",
        start_time=3,
        end_time=5,
        priority=2,
    )
    assert event.priority is Priority.HIGH

    with pytest.raises(ValidationError):
        event.location = "Hostel"

    moved = event.model_copy(update={"location": "Hostel"})
    assert moved.location == "Hostel"
    assert event.location == "Lab"


def test_event_rejects_unknown_priority():
    with pytest.raises(ValidationError):
        Event(event_id="E", event_type="x", location="Lab", start_time=1, end_time=2, priority=4)


def test_core_does_not_validate_time_order():
    event = Event(event_id="E", event_type="x", location="Lab", start_time=5, end_time=2, priority=1)
    assert event.start_time > event.end_time


def test_operation_result_ok_flag():
    assert OperationResult(status=ResultStatus.OK).ok is True
    failed = OperationResult(status=ResultStatus.UNAVAILABLE, message="busy")
    assert failed.ok is False
    assert failed.event is None
    assert failed.substituted is False


def test_interval_half_open_overlap():
    interval = Interval(9, 10)
    assert interval.overlaps(9, 10)
    assert interval.overlaps(8, 12)
    assert not interval.overlaps(10, 11)
    assert not interval.overlaps(7, 9)


def test_route_and_schedule_entry_serialize():
    route = Route(path=["A", "B"], distance=4)
    assert route.model_dump() == {"path": ["A", "B"], "distance": 4}

    entry = ScheduleEntry(start=1, end=2)
    assert entry.events == []
