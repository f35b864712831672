"""
Campus loading for JSON-defined campus layouts.

This module provides CampusLoader for converting JSON campus files into a
LocationGraph plus the events that should be scheduled at startup. A campus
file defines:
- The ordered location list (order fixes alternative-room scans and routing ties)
- Undirected weighted edges between locations
- Optional per-location booking capacity
- Optional initial events

Campus file structure:
```json
{
  "name": "Reference Campus",
  "description": "...",
  "locations": ["Mainhall", {"name": "Lab", "capacity": 4}],
  "edges": [["Mainhall", "Library", 2],
            {"source": "Lab", "target": "Hostel", "weight": 6}],
  "events": [{"event_id": "E1", "event_type": "Lecture", "location": "Lab",
              "start_time": 9, "end_time": 10, "priority": 3}]
}
```

Usage:
    loader = CampusLoader()
    graph, events = loader.load("reference")
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .config import Config
from .environment import (
    CampusGraphState,
    EdgeState,
    LocationGraph,
    LocationNodeState,
)
from .schemas import Event, Priority


# Reference configuration: six locations, seven edges.
DEFAULT_CAMPUS: Dict[str, Any] = {
    "name": "Reference Campus",
    "description": "Six-building campus used when no campus file is given",
    "locations": ["Mainhall", "Library", "Cafeteria", "Lab", "Hostel", "Guardroom"],
    "edges": [
        ["Mainhall", "Library", 2],
        ["Mainhall", "Cafeteria", 4],
        ["Library", "Lab", 3],
        ["Lab", "Hostel", 6],
        ["Hostel", "Guardroom", 2],
        ["Cafeteria", "Guardroom", 5],
        ["Library", "Cafeteria", 3],
    ],
    "events": [],
}


class CampusLoader:
    """Load and validate campus layouts from JSON files.

    Directory structure:
    - Default: Config.CAMPUSES_DIR ({PROJECT_ROOT}/examples/campuses)
    - Override via constructor: CampusLoader(Path("/custom/campuses"))
    - Campus files: {campus_name}.json (e.g., "reference.json")

    Validation:
    - Required fields: locations, edges
    - At least one location
    - Edges must name known locations and carry non-negative weights
    - Raises ValueError if validation fails
    """

    def __init__(self, campuses_dir: Optional[Path] = None):
        self.campuses_dir = campuses_dir or Config.CAMPUSES_DIR

    def load(self, campus_name: str) -> Tuple[LocationGraph, List[Event]]:
        """Load a campus by name from JSON file.

        Args:
            campus_name: Name of campus (without .json extension)

        Returns:
            Tuple of (LocationGraph, initial events in file order)

        Raises:
            FileNotFoundError: If campus file doesn't exist in campuses_dir
            ValueError: If campus JSON missing required fields or malformed
            json.JSONDecodeError: If file contains invalid JSON
        """
        campus_path = self.campuses_dir / f"{campus_name}.json"

        if not campus_path.exists():
            raise FileNotFoundError(
                f"Campus '{campus_name}' not found at {campus_path}"
            )

        data = json.loads(campus_path.read_text())
        return self.parse(data)

    def parse(self, data: Dict[str, Any]) -> Tuple[LocationGraph, List[Event]]:
        """Build graph and initial events from already-decoded campus data."""
        self._validate_campus(data)

        state = CampusGraphState(
            nodes=self._parse_locations(data["locations"]),
            edges=self._parse_edges(data["edges"]),
        )
        known = {node.name for node in state.nodes}
        for edge in state.edges:
            unknown = [name for name in (edge.source, edge.target) if name not in known]
            if unknown:
                raise ValueError(f"Edge {edge.source}-{edge.target} names unknown locations: {unknown}")

        graph = LocationGraph.from_state(state)
        events = [self._parse_event(raw) for raw in data.get("events", [])]
        return graph, events

    def _validate_campus(self, data: Dict) -> None:
        required = ["locations", "edges"]
        missing = [field for field in required if field not in data]

        if missing:
            raise ValueError(f"Campus missing required fields: {missing}")

        if not data["locations"]:
            raise ValueError("Campus must have at least one location")

    def _parse_locations(self, raw: List[Any]) -> List[LocationNodeState]:
        # Accepts bare names or {"name": ..., "capacity": ..., "metadata": {...}}.
        nodes: List[LocationNodeState] = []
        for item in raw:
            if isinstance(item, dict):
                nodes.append(LocationNodeState(**item))
            else:
                nodes.append(LocationNodeState(name=str(item)))
        return nodes

    def _parse_edges(self, raw: List[Any]) -> List[EdgeState]:
        # Accepts [source, target, weight] triples or {"source", "target", "weight"} dicts.
        edges: List[EdgeState] = []
        for item in raw:
            if isinstance(item, dict):
                edges.append(EdgeState(**item))
            elif isinstance(item, (list, tuple)) and len(item) == 3:
                source, target, weight = item
                edges.append(EdgeState(source=source, target=target, weight=weight))
            else:
                raise ValueError(f"Malformed edge entry: {item!r}")
        return edges

    def _parse_event(self, data: Dict[str, Any]) -> Event:
        required = ["event_id", "location", "start_time", "end_time"]
        missing = [field for field in required if field not in data]

        if missing:
            raise ValueError(f"Event missing required fields: {missing}")

        return Event(
            event_id=str(data["event_id"]),
            event_type=data.get("event_type", "event"),
            location=data["location"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            priority=Priority(data.get("priority", Priority.OPTIONAL)),
        )

    def list_campuses(self) -> List[str]:
        """List all available campus files (names without .json extension)."""
        if not self.campuses_dir.exists():
            return []

        return sorted(
            f.stem for f in self.campuses_dir.glob("*.json")
            if not f.name.startswith("_")
        )

    def get_campus_info(self, campus_name: str) -> Dict[str, Any]:
        """Get campus metadata without building the graph."""
        campus_path = self.campuses_dir / f"{campus_name}.json"
        data = json.loads(campus_path.read_text())

        return {
            "name": data.get("name", campus_name),
            "description": data.get("description", "No description"),
            "num_locations": len(data.get("locations", [])),
            "num_edges": len(data.get("edges", [])),
            "num_events": len(data.get("events", [])),
        }


def default_campus_graph() -> LocationGraph:
    """Build the reference six-location campus graph."""
    graph, _ = CampusLoader().parse(DEFAULT_CAMPUS)
    return graph
