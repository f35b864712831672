"""Campus location graph.

Locations are kept in a fixed order; that order drives the scheduler's
alternative-location scan and the shortest-path tie-break. Weights live in a
dense symmetric matrix where ``NO_EDGE`` marks a missing direct edge.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .schemas import CampusGraphState, EdgeState, LocationNodeState

# Larger than any real path sum.
NO_EDGE = math.inf


@dataclass
class LocationNode:
    """A named location; ``capacity`` caps how many bookings it can hold."""

    name: str
    capacity: int | None = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class LocationGraph:
    """Undirected, non-negatively weighted graph over a fixed node set."""

    nodes: Dict[str, LocationNode] = field(default_factory=dict)
    _weights: List[List[float]] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        n = len(self.nodes)
        self._weights = [[0 if i == j else NO_EDGE for j in range(n)] for i in range(n)]

    @classmethod
    def from_edges(
        cls,
        locations: Iterable[Union[str, LocationNode]],
        edges: Iterable[Tuple[str, str, int]] = (),
    ) -> "LocationGraph":
        nodes: Dict[str, LocationNode] = {}
        for location in locations:
            node = location if isinstance(location, LocationNode) else LocationNode(name=location)
            nodes[node.name] = node
        graph = cls(nodes=nodes)
        for source, target, weight in edges:
            graph.add_edge(source, target, weight)
        return graph

    @classmethod
    def from_state(cls, state: CampusGraphState) -> "LocationGraph":
        locations = [
            LocationNode(name=node.name, capacity=node.capacity, metadata=dict(node.metadata))
            for node in state.nodes
        ]
        edges = [(edge.source, edge.target, edge.weight) for edge in state.edges]
        return cls.from_edges(locations, edges)

    def to_state(self) -> CampusGraphState:
        names = self.names
        edges: List[EdgeState] = []
        # Upper triangle only; the matrix is symmetric.
        for i, source in enumerate(names):
            for j in range(i + 1, len(names)):
                weight = self._weights[i][j]
                if weight != NO_EDGE:
                    edges.append(EdgeState(source=source, target=names[j], weight=int(weight)))
        nodes = [
            LocationNodeState(name=node.name, capacity=node.capacity, metadata=dict(node.metadata))
            for node in self.nodes.values()
        ]
        return CampusGraphState(nodes=nodes, edges=edges)

    @property
    def names(self) -> List[str]:
        return list(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def has_node(self, name: str) -> bool:
        return name in self.nodes

    def index(self, name: str) -> Optional[int]:
        for i, node_name in enumerate(self.nodes):
            if node_name == name:
                return i
        return None

    def add_edge(self, source: str, target: str, weight: int) -> bool:
        """Set a symmetric edge weight. Returns False if either endpoint is unknown.

        Raises:
            ValueError: If ``weight`` is not a non-negative integer, or if the
                edge is a self-loop (the diagonal stays zero)
        """

        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f"Edge {source}-{target} weight must be an integer, got {weight!r}")
        if weight < 0:
            raise ValueError(f"Edge {source}-{target} has negative weight {weight}")
        i, j = self.index(source), self.index(target)
        if i is None or j is None:
            return False
        if i == j:
            raise ValueError(f"Self-loop on {source} is not allowed")
        self._weights[i][j] = weight
        self._weights[j][i] = weight
        return True

    def weight(self, source: str, target: str) -> float:
        """Direct edge weight, ``NO_EDGE`` when absent or when a name is unknown."""

        i, j = self.index(source), self.index(target)
        if i is None or j is None:
            return NO_EDGE
        return self._weights[i][j]

    def weight_row(self, i: int) -> Sequence[float]:
        return self._weights[i]

    def neighbors(self, name: str) -> List[str]:
        i = self.index(name)
        if i is None:
            return []
        return [
            other
            for j, other in enumerate(self.nodes)
            if j != i and self._weights[i][j] != NO_EDGE
        ]
