"""Pydantic schemas for the campus environment.

These models mirror the lightweight dataclasses in ``graph.py`` and
``occupancy.py`` but keep graph definitions, routes and schedule snapshots
serializable.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..schemas import Event


class LocationNodeState(BaseModel):
    """Represents a named location in the campus graph."""

    name: str
    capacity: Optional[int] = Field(
        None, ge=1, description="Maximum number of bookings; None means unbounded",
    )
    metadata: Dict[str, str] = Field(
        default_factory=dict,
        description="Free-form metadata (e.g., building, floor)",
    )


class EdgeState(BaseModel):
    """Undirected weighted edge between two locations."""

    source: str
    target: str
    weight: int = Field(..., ge=0, description="Non-negative travel cost")


class CampusGraphState(BaseModel):
    """Ordered node list plus edge list; node order fixes scan and tie-break order."""

    nodes: List[LocationNodeState] = Field(default_factory=list)
    edges: List[EdgeState] = Field(default_factory=list)


class Route(BaseModel):
    """Shortest route between two locations, listed from source to target."""

    path: List[str]
    distance: int


class ScheduleEntry(BaseModel):
    """One booked interval and every event sharing its exact (location, start, end)."""

    start: int
    end: int
    events: List[Event] = Field(default_factory=list)
