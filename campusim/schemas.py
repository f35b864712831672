"""
Pydantic schemas for campusim.

Value types shared by the event queue, the interval scheduler and the
coordinating Campus layer.

Design Philosophy:
- Events are immutable once constructed (updates build a new Event)
- Failures are reported through OperationResult values, never raised
- Times are abstract integer ticks on one shared timeline (no wall clock)
"""

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Priority(IntEnum):
    """Ordinal importance of an event; primary sort key of the event queue."""

    OPTIONAL = 1
    HIGH = 2
    MANDATORY = 3


class Event(BaseModel):
    """A scheduled event occupying one location for a half-open interval.

    The core does not validate ``start_time < end_time`` nor id uniqueness;
    callers (the Campus layer) are responsible for both.
    """

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(..., description="Caller-supplied identifier")
    event_type: str = Field(..., description="Free-text label (lecture, exam, etc.)")
    location: str = Field(..., description="Name of a node in the campus graph")
    start_time: int = Field(..., description="Inclusive start tick")
    end_time: int = Field(..., description="Exclusive end tick")
    priority: Priority = Field(..., description="Optional=1, High=2, Mandatory=3")


class ResultStatus(str, Enum):
    """Outcome tags for Campus operations."""

    OK = "ok"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    DUPLICATE_ID = "duplicate_id"


class OperationResult(BaseModel):
    """Tagged result of an event lifecycle operation.

    ``location`` is the location actually booked, which differs from the
    requested one when ``substituted`` is True.
    """

    status: ResultStatus
    event: Optional[Event] = None
    location: Optional[str] = None
    substituted: bool = False
    message: Optional[str] = Field(None, description="Short human-readable reason")

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK
