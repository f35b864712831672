"""Routing utilities for campus graphs."""

from __future__ import annotations

from typing import List, Optional

from .graph import NO_EDGE, LocationGraph
from .schemas import Route


def shortest_path(graph: LocationGraph, source: str, target: str) -> Optional[Route]:
    """Return the shortest route from source to target using Dijkstra.

    Dense variant: each round scans every node for the unvisited one with the
    smallest tentative distance. Ties go to the lowest index in the graph's
    node order, and a neighbor is only relaxed on a strict improvement, so the
    chosen path is deterministic. Returns None for unknown names or when the
    target is unreachable.
    """

    src, dest = graph.index(source), graph.index(target)
    if src is None or dest is None:
        return None

    n = len(graph)
    dist: List[float] = [NO_EDGE] * n
    prev: List[Optional[int]] = [None] * n
    visited = [False] * n
    dist[src] = 0

    for _ in range(n):
        # Strict '<' keeps the lowest index on ties and never picks an unreached node.
        u, best = None, NO_EDGE
        for i in range(n):
            if not visited[i] and dist[i] < best:
                u, best = i, dist[i]
        if u is None:
            break
        visited[u] = True
        row = graph.weight_row(u)
        for v in range(n):
            if row[v] == NO_EDGE or visited[v]:
                continue
            if dist[v] > dist[u] + row[v]:
                dist[v] = dist[u] + row[v]
                prev[v] = u

    if dist[dest] == NO_EDGE:
        return None

    names = graph.names
    path: List[str] = []
    node: Optional[int] = dest
    while node is not None:
        path.append(names[node])
        node = prev[node]
    path.reverse()
    return Route(path=path, distance=dist[dest])
