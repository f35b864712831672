"""
campusim - event scheduling over a campus location graph.

Priority-ordered events, per-location interval bookings with room
substitution, and shortest routes between locations.

No file I/O required. No global state. Everything lives in a Campus
instance built from an explicit (or default) location graph.
"""

__version__ = "0.1.0"

# Coordinating layer
from .campus import Campus, load_campus

# Core components
from .event_queue import EventQueue, compare_events
from .environment import (
    NO_EDGE,
    CampusGraphState,
    EdgeState,
    Interval,
    IntervalScheduler,
    LocationGraph,
    LocationNode,
    LocationNodeState,
    Route,
    ScheduleEntry,
    shortest_path,
)

# Core schemas
from .schemas import Event, OperationResult, Priority, ResultStatus

# Campus loader helpers
from .scenario import CampusLoader, DEFAULT_CAMPUS, default_campus_graph

__all__ = [
    # Main class
    "Campus",
    "load_campus",
    # Core components
    "EventQueue",
    "compare_events",
    "IntervalScheduler",
    "Interval",
    "LocationGraph",
    "LocationNode",
    "NO_EDGE",
    "shortest_path",
    # Schemas
    "Event",
    "Priority",
    "OperationResult",
    "ResultStatus",
    "CampusGraphState",
    "EdgeState",
    "LocationNodeState",
    "Route",
    "ScheduleEntry",
    # Loader helpers
    "CampusLoader",
    "DEFAULT_CAMPUS",
    "default_campus_graph",
]
