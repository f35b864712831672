"""
Campus coordinating layer.

Sequences calls into the three independent core components:
1. IntervalScheduler - single source of truth for room occupancy
2. EventQueue - priority ordering of live events
3. LocationGraph - routing between locations

Add/update book first and insert second; remove cancels first and rebuilds
the queue second. Each pair runs as a unit: when the second step cannot
complete the first is undone, so every queued event owns exactly one booking.
"""

from typing import Dict, List, Optional

from .config import Config
from .environment import (
    IntervalScheduler,
    LocationGraph,
    Route,
    ScheduleEntry,
    shortest_path,
)
from .event_queue import EventQueue
from .logging_utils import log_deterministic, log_error, log_info, log_success, log_warning
from .scenario import CampusLoader, DEFAULT_CAMPUS, default_campus_graph
from .schemas import Event, OperationResult, Priority, ResultStatus


class Campus:
    """
    Event scheduling over a campus graph.

    All failures are returned as OperationResult values. Logging happens only
    here, and only when ``verbose`` is enabled.
    """

    def __init__(
        self,
        graph: Optional[LocationGraph] = None,
        *,
        event_capacity: Optional[int] = None,
        booking_capacity: Optional[int] = None,
        verbose: Optional[bool] = None,
    ):
        """
        Args:
            graph: Campus layout. Defaults to the reference six-location campus.
            event_capacity: Queue cap; falls back to Config.EVENT_CAPACITY (None = unbounded).
            booking_capacity: Per-location booking cap; falls back to Config.BOOKING_CAPACITY.
            verbose: Print color-coded operation logs; falls back to Config.VERBOSE.
        """
        self.graph = graph if graph is not None else default_campus_graph()
        if event_capacity is None or booking_capacity is None:
            Config.validate()
        if event_capacity is None:
            event_capacity = Config.EVENT_CAPACITY
        if booking_capacity is None:
            booking_capacity = Config.BOOKING_CAPACITY
        self.verbose = Config.VERBOSE if verbose is None else verbose

        self.scheduler = IntervalScheduler(self.graph, capacity=booking_capacity)
        self._queue = EventQueue(capacity=event_capacity)

    # =============================
    # Event lifecycle
    # =============================

    def add_event(
        self,
        event_id: str,
        event_type: str,
        location: str,
        start_time: int,
        end_time: int,
        priority: Priority = Priority.OPTIONAL,
    ) -> OperationResult:
        """Book a location and queue the event.

        Falls back to the first free location (in graph order) when the
        requested one is busy; the result's ``location`` and ``substituted``
        report where the event landed.
        """
        if self._queue.find(event_id) is not None:
            return self._fail(ResultStatus.DUPLICATE_ID, f"Event {event_id} already exists")
        if not self.graph.has_node(location):
            return self._fail(ResultStatus.NOT_FOUND, f"Unknown location {location}")

        requested = Event(
            event_id=event_id,
            event_type=event_type,
            location=location,
            start_time=start_time,
            end_time=end_time,
            priority=priority,
        )

        booked = location
        if not self.scheduler.book(location, start_time, end_time):
            alternative = self.scheduler.find_alternative(start_time, end_time)
            if alternative is None or not self.scheduler.book(alternative, start_time, end_time):
                return self._fail(
                    ResultStatus.UNAVAILABLE, f"No available rooms for event {event_id}"
                )
            booked = alternative
            if self.verbose:
                log_warning(f"Room {location} unavailable. Using alternative: {booked}")

        event = requested.model_copy(update={"location": booked})
        if not self._queue.insert(event):
            self.scheduler.cancel(booked, start_time, end_time)
            return self._fail(
                ResultStatus.CAPACITY_EXCEEDED, f"Event queue full; {event_id} not scheduled"
            )

        if self.verbose:
            log_success(f"Scheduled: {event_id} in {booked}")
        return OperationResult(
            status=ResultStatus.OK,
            event=event,
            location=booked,
            substituted=booked != location,
        )

    def update_event(
        self,
        event_id: str,
        *,
        event_type: Optional[str] = None,
        location: Optional[str] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        priority: Optional[Priority] = None,
    ) -> OperationResult:
        """Replace an event; omitted fields keep their current value.

        The new interval must fit the requested location (no substitution).
        On failure the previous booking and queue are left as they were.
        """
        current = self._queue.find(event_id)
        if current is None:
            return self._fail(ResultStatus.NOT_FOUND, f"Event {event_id} not found")

        changes = {
            key: value
            for key, value in {
                "event_type": event_type,
                "location": location,
                "start_time": start_time,
                "end_time": end_time,
                "priority": priority,
            }.items()
            if value is not None
        }
        replacement = Event(**{**current.model_dump(), **changes})
        if not self.graph.has_node(replacement.location):
            return self._fail(ResultStatus.NOT_FOUND, f"Unknown location {replacement.location}")

        remaining = self._queue.rebuild_excluding(event_id)
        self.scheduler.cancel(current.location, current.start_time, current.end_time)

        if not self.scheduler.book(
            replacement.location, replacement.start_time, replacement.end_time
        ):
            self.scheduler.book(current.location, current.start_time, current.end_time)
            return self._fail(ResultStatus.UNAVAILABLE, "Room unavailable. Update failed.")

        if not remaining.insert(replacement):
            self.scheduler.cancel(
                replacement.location, replacement.start_time, replacement.end_time
            )
            self.scheduler.book(current.location, current.start_time, current.end_time)
            return self._fail(ResultStatus.CAPACITY_EXCEEDED, "Event queue full. Update failed.")

        self._queue = remaining
        if self.verbose:
            log_success(f"Updated: {event_id}")
        return OperationResult(
            status=ResultStatus.OK, event=replacement, location=replacement.location
        )

    def remove_event(self, event_id: str) -> OperationResult:
        """Cancel the booking of every event with ``event_id`` and drop them all."""
        matches = [event for event in self._queue.peek_all() if event.event_id == event_id]
        if not matches:
            return self._fail(ResultStatus.NOT_FOUND, f"Event {event_id} not found")

        for event in matches:
            self.scheduler.cancel(event.location, event.start_time, event.end_time)
        self._queue = self._queue.rebuild_excluding(event_id)

        if self.verbose:
            log_success(f"Removed: {event_id}")
        return OperationResult(
            status=ResultStatus.OK, event=matches[-1], location=matches[-1].location
        )

    # =============================
    # Queries
    # =============================

    def get_event(self, event_id: str) -> Optional[Event]:
        return self._queue.find(event_id)

    def list_events(self) -> List[Event]:
        """All live events in queue storage order (not sorted)."""
        return self._queue.peek_all()

    def next_event(self) -> Optional[Event]:
        """Highest-ranked live event without removing it."""
        return self._queue.peek()

    def room_schedule(self) -> Dict[str, List[ScheduleEntry]]:
        return self.scheduler.snapshot(self._queue.peek_all())

    def route(self, source: str, target: str) -> Optional[Route]:
        """Shortest route between two locations, or None if unknown/unreachable."""
        found = shortest_path(self.graph, source, target)
        if self.verbose:
            if found is None:
                log_error(f"No route found from {source} to {target}")
            else:
                log_deterministic(
                    f"Shortest path: {' -> '.join(found.path)} (Distance: {found.distance})"
                )
        return found

    def __len__(self) -> int:
        return len(self._queue)

    def _fail(self, status: ResultStatus, message: str) -> OperationResult:
        if self.verbose:
            log_error(message)
        return OperationResult(status=status, message=message)


def load_campus(
    campus_name: Optional[str] = None,
    *,
    loader: Optional[CampusLoader] = None,
    **campus_kwargs,
) -> Campus:
    """Build a Campus from a campus file and schedule its initial events.

    Args:
        campus_name: Campus file name; None uses the built-in reference campus
        loader: Loader to read from (defaults to CampusLoader())
        **campus_kwargs: Forwarded to Campus (capacities, verbose)

    Raises:
        ValueError: If an initial event cannot be scheduled
    """
    loader = loader or CampusLoader()
    if campus_name is None:
        graph, events = loader.parse(DEFAULT_CAMPUS)
    else:
        graph, events = loader.load(campus_name)

    campus = Campus(graph, **campus_kwargs)
    for event in events:
        result = campus.add_event(
            event.event_id,
            event.event_type,
            event.location,
            event.start_time,
            event.end_time,
            event.priority,
        )
        if not result.ok:
            raise ValueError(
                f"Initial event {event.event_id} could not be scheduled: {result.status.value}"
            )

    if campus.verbose:
        log_info(
            f"Loaded campus {campus_name or 'default'}: "
            f"{len(graph)} locations, {len(campus)} events"
        )
    return campus
