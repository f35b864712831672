"""Campus environment: location graph, routing, and interval bookings."""

from .graph import NO_EDGE, LocationGraph, LocationNode
from .schemas import (
    CampusGraphState,
    EdgeState,
    LocationNodeState,
    Route,
    ScheduleEntry,
)
from .helpers import shortest_path
from .occupancy import Interval, IntervalScheduler

__all__ = [
    "NO_EDGE",
    "LocationGraph",
    "LocationNode",
    "CampusGraphState",
    "EdgeState",
    "LocationNodeState",
    "Route",
    "ScheduleEntry",
    "shortest_path",
    "Interval",
    "IntervalScheduler",
]
