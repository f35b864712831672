"""
campusim Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _optional_int(raw: Optional[str]) -> Optional[int]:
    """Parse an integer env value; unset or blank means None (unbounded)."""
    if raw is None or not raw.strip():
        return None
    return int(raw)


def _flag(raw: Optional[str]) -> bool:
    return (raw or "").strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # Capacity limits. Unset keeps containers unbounded.
    EVENT_CAPACITY: Optional[int] = _optional_int(os.getenv("CAMPUSIM_EVENT_CAPACITY"))
    BOOKING_CAPACITY: Optional[int] = _optional_int(os.getenv("CAMPUSIM_BOOKING_CAPACITY"))

    # Logging (Campus layer only)
    VERBOSE: bool = _flag(os.getenv("CAMPUSIM_VERBOSE"))

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    CAMPUSES_DIR: Path = Path(
        os.getenv("CAMPUSIM_CAMPUSES_DIR", str(PROJECT_ROOT / "examples" / "campuses"))
    )

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        for name in ("EVENT_CAPACITY", "BOOKING_CAPACITY"):
            value = getattr(cls, name)
            if value is not None and value < 1:
                raise ValueError(
                    f"CAMPUSIM_{name} must be a positive integer (got {value}). "
                    "Leave it unset for unbounded storage."
                )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "campusim Configuration:",
            f"  Event capacity: {cls.EVENT_CAPACITY or 'unbounded'}",
            f"  Booking capacity: {cls.BOOKING_CAPACITY or 'unbounded'}",
            f"  Verbose: {cls.VERBOSE}",
            f"  Campuses dir: {cls.CAMPUSES_DIR}",
        ]
        return "\n".join(lines)
