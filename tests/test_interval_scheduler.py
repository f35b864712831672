"""Tests for per-location interval bookings."""

import random

from campusim.environment import Interval, IntervalScheduler, LocationGraph, LocationNode
from campusim.scenario import default_campus_graph
from campusim.schemas import Event, Priority


def make_scheduler(**kwargs) -> IntervalScheduler:
    return IntervalScheduler(default_campus_graph(), **kwargs)


def test_book_then_half_open_neighbors_are_free():
    scheduler = make_scheduler()
    assert scheduler.book("Library", 9, 10) is True

    assert scheduler.is_available("Library", 9, 10) is False
    assert scheduler.is_available("Library", 10, 11) is True
    assert scheduler.is_available("Library", 8, 9) is True
    assert scheduler.is_available("Library", 8, 12) is False
    assert scheduler.is_available("Mainhall", 9, 10) is True


def test_booking_same_interval_twice_fails_without_change():
    scheduler = make_scheduler()
    assert scheduler.book("Lab", 1, 4) is True
    assert scheduler.book("Lab", 1, 4) is False
    assert scheduler.book("Lab", 3, 5) is False
    assert scheduler.bookings("Lab") == [Interval(1, 4)]


def test_unknown_location_is_never_available():
    scheduler = make_scheduler()
    assert scheduler.is_available("Observatory", 1, 2) is False
    assert scheduler.book("Observatory", 1, 2) is False
    assert scheduler.cancel("Observatory", 1, 2) is False
    assert scheduler.bookings("Observatory") == []


def test_cancel_exact_match_only_and_preserves_order():
    scheduler = make_scheduler()
    for start in (1, 5, 9):
        scheduler.book("Hostel", start, start + 2)

    # Overlapping but not identical: nothing removed.
    assert scheduler.cancel("Hostel", 5, 6) is False
    assert scheduler.cancel("Hostel", 5, 7) is True
    assert scheduler.bookings("Hostel") == [Interval(1, 3), Interval(9, 11)]
    assert scheduler.is_available("Hostel", 5, 7) is True


def test_find_alternative_scans_in_graph_order():
    scheduler = make_scheduler()
    assert scheduler.find_alternative(1, 2) == "Mainhall"

    scheduler.book("Mainhall", 1, 2)
    scheduler.book("Library", 0, 5)
    assert scheduler.find_alternative(1, 2) == "Cafeteria"


def test_find_alternative_returns_none_when_all_busy():
    scheduler = make_scheduler()
    for location in scheduler.locations:
        scheduler.book(location, 10, 20)

    assert scheduler.find_alternative(12, 13) is None
    assert scheduler.find_alternative(20, 21) == "Mainhall"


def test_availability_matches_brute_force_overlap():
    rng = random.Random(11)
    scheduler = make_scheduler()
    booked: list[tuple[int, int]] = []
    for _ in range(40):
        start = rng.randint(0, 60)
        end = start + rng.randint(1, 6)
        if scheduler.book("Cafeteria", start, end):
            booked.append((start, end))

    for _ in range(200):
        start = rng.randint(0, 70)
        end = start + rng.randint(1, 6)
        expected = all(e <= start or s >= end for s, e in booked)
        assert scheduler.is_available("Cafeteria", start, end) is expected

    alternative = scheduler.find_alternative(0, 70)
    assert alternative is None or scheduler.is_available(alternative, 0, 70)


def test_capacity_limits_bookings_per_location():
    graph = LocationGraph.from_edges(
        [LocationNode(name="Studio", capacity=1), "Annex"],
        [("Studio", "Annex", 1)],
    )
    scheduler = IntervalScheduler(graph, capacity=2)

    assert scheduler.book("Studio", 1, 2) is True
    # Node capacity overrides the scheduler-wide one.
    assert scheduler.is_full("Studio") is True
    assert scheduler.is_available("Studio", 5, 6) is False
    assert scheduler.find_alternative(5, 6) == "Annex"

    assert scheduler.book("Annex", 1, 2) is True
    assert scheduler.book("Annex", 3, 4) is True
    assert scheduler.book("Annex", 5, 6) is False
    assert scheduler.find_alternative(7, 8) is None

    scheduler.cancel("Studio", 1, 2)
    assert scheduler.book("Studio", 5, 6) is True


def test_snapshot_joins_all_matching_events():
    scheduler = make_scheduler()
    scheduler.book("Lab", 9, 10)
    scheduler.book("Lab", 12, 14)
    first = Event(event_id="A", event_type="lab", location="Lab", start_time=9, end_time=10, priority=Priority.HIGH)
    twin = Event(event_id="B", event_type="lab", location="Lab", start_time=9, end_time=10, priority=Priority.OPTIONAL)
    elsewhere = Event(event_id="C", event_type="talk", location="Library", start_time=9, end_time=10, priority=Priority.HIGH)

    schedule = scheduler.snapshot([first, twin, elsewhere])

    assert list(schedule) == scheduler.locations
    lab = schedule["Lab"]
    assert [(entry.start, entry.end) for entry in lab] == [(9, 10), (12, 14)]
    assert [e.event_id for e in lab[0].events] == ["A", "B"]
    assert lab[1].events == []
    assert schedule["Library"] == []
