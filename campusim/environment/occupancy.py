"""Per-location interval bookings for campus graphs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..schemas import Event
from .graph import LocationGraph
from .schemas import ScheduleEntry


@dataclass(frozen=True)
class Interval:
    """Half-open time range ``[start, end)``."""

    start: int
    end: int

    def overlaps(self, start: int, end: int) -> bool:
        # Adjacent intervals ([9, 10) and [10, 11)) do not overlap.
        return not (end <= self.start or start >= self.end)


class IntervalScheduler:
    """Tracks booked intervals per location and keeps them disjoint.

    Locations and their scan order come from the graph. Every location may
    carry a booking cap: ``LocationNode.capacity`` when set, otherwise the
    scheduler-wide ``capacity``. ``None`` means unbounded. A location at its
    cap reports itself unavailable, so a full room is skipped by
    ``find_alternative`` exactly like a busy one.
    """

    def __init__(self, graph: LocationGraph, capacity: Optional[int] = None):
        self.graph = graph
        self.capacity = capacity
        # Maps location -> intervals in booking order. Insertion order of the
        # dict follows the graph's node order.
        self._bookings: Dict[str, List[Interval]] = {name: [] for name in graph.names}

    @property
    def locations(self) -> List[str]:
        return list(self._bookings)

    def bookings(self, location: str) -> List[Interval]:
        """Copy of the intervals booked at ``location`` (empty if unknown)."""

        return list(self._bookings.get(location, []))

    def capacity_for(self, location: str) -> Optional[int]:
        node = self.graph.nodes.get(location)
        if node is not None and node.capacity is not None:
            return node.capacity
        return self.capacity

    def is_full(self, location: str) -> bool:
        cap = self.capacity_for(location)
        return cap is not None and len(self._bookings.get(location, [])) >= cap

    def is_available(self, location: str, start: int, end: int) -> bool:
        """True iff the location exists, has room, and no booking overlaps [start, end)."""

        intervals = self._bookings.get(location)
        if intervals is None:
            return False
        if self.is_full(location):
            return False
        return not any(interval.overlaps(start, end) for interval in intervals)

    def book(self, location: str, start: int, end: int) -> bool:
        """Append the interval if available. Returns False with no change otherwise."""

        if not self.is_available(location, start, end):
            return False
        self._bookings[location].append(Interval(start, end))
        return True

    def cancel(self, location: str, start: int, end: int) -> bool:
        """Remove the first booking equal to (start, end); the rest keep their order."""

        intervals = self._bookings.get(location)
        if intervals is None:
            return False
        target = Interval(start, end)
        for i, interval in enumerate(intervals):
            if interval == target:
                del intervals[i]
                return True
        return False

    def find_alternative(self, start: int, end: int) -> Optional[str]:
        """First location, in graph order, free for [start, end)."""

        for location in self._bookings:
            if self.is_available(location, start, end):
                return location
        return None

    def snapshot(self, events: Iterable[Event] = ()) -> Dict[str, List[ScheduleEntry]]:
        """Per-location bookings joined to events by exact (location, start, end).

        Every matching event is attached, so coincident duplicates all show up.
        """

        events = list(events)
        schedule: Dict[str, List[ScheduleEntry]] = {}
        for location, intervals in self._bookings.items():
            entries: List[ScheduleEntry] = []
            for interval in intervals:
                matches = [
                    event
                    for event in events
                    if event.location == location
                    and event.start_time == interval.start
                    and event.end_time == interval.end
                ]
                entries.append(ScheduleEntry(start=interval.start, end=interval.end, events=matches))
            schedule[location] = entries
        return schedule
