"""Query helpers over navigation nodes and adjacency snapshots."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from ..errors import EmptyGraphError, UnknownNeighborError, UnknownNodeError

if TYPE_CHECKING:
    from .graph import NavigationNode


def nearest_node(
    nodes: Iterable["NavigationNode"],
    point: Tuple[float, float, float],
) -> "NavigationNode":
    """Return the node whose position is closest to ``point``.

    Linear scan; graphs here are scene-sized so no spatial index is kept.
    Strict ``<`` keeps the first node in iteration order on ties.

    Raises:
        EmptyGraphError: If ``nodes`` is empty.
    """
    nearest: Optional["NavigationNode"] = None
    nearest_distance = math.inf
    for node in nodes:
        distance = math.dist(node.position, point)
        if nearest is None or distance < nearest_distance:
            nearest = node
            nearest_distance = distance
    if nearest is None:
        raise EmptyGraphError("Cannot find the nearest node of an empty graph")
    return nearest


def _closest_unvisited(distances: Dict[str, float], visited: Set[str]) -> Optional[str]:
    """Pick the unvisited node with the smallest finite tentative distance.

    Scans in dict insertion order so the first of several equal candidates wins.
    """
    closest: Optional[str] = None
    for node_id, distance in distances.items():
        # Visited nodes are settled; infinite ones were never reached
        if node_id in visited or math.isinf(distance):
            continue
        # Strict < so an equal later candidate does not replace the first
        if closest is None or distance < distances[closest]:
            closest = node_id
    return closest


def shortest_path(
    adjacency: Mapping[str, Mapping[str, float]],
    start: str,
    goal: str,
) -> Optional[List[str]]:
    """Return node ids from start to goal (inclusive) using Dijkstra.

    Follows edges only in their declared direction. Returns None when the goal
    is unreachable from start. ``shortest_path(adj, a, a)`` is ``[a]``.

    Raises:
        EmptyGraphError: If the adjacency snapshot has no entries (not yet computed).
        UnknownNodeError: If start or goal is not a key of the snapshot.
        UnknownNeighborError: If an edge points at an id that is not a key of
            the snapshot (the mapping was not built by ``recompute_graph``).
    """
    # An empty snapshot means recompute_graph() has not run yet
    if not adjacency:
        raise EmptyGraphError("Unable to find a path in an empty graph; recompute it first")
    for node_id in (start, goal):
        if node_id not in adjacency:
            raise UnknownNodeError(node_id)
    # Every edge target must be expandable later on
    for node_id, edges in adjacency.items():
        for neighbor_id in edges:
            if neighbor_id not in adjacency:
                raise UnknownNeighborError(node_id, neighbor_id)

    # Goal is seeded as unreached; direct edges from start overwrite it.
    distances: Dict[str, float] = {goal: math.inf}
    # Predecessor on the best known path, keyed by real node ids.
    parents: Dict[str, Optional[str]] = {goal: None}
    for child, weight in adjacency[start].items():
        if child == start:
            continue
        distances[child] = weight
        parents[child] = start

    visited: Set[str] = set()
    # Greedy selection is valid because weights are Euclidean distances (>= 0)
    node = _closest_unvisited(distances, visited)
    while node is not None:
        distance = distances[node]
        for child, weight in adjacency[node].items():
            # The start is never re-entered
            if child == start:
                continue
            candidate = distance + weight
            # First sighting or strictly shorter route: record it and its predecessor
            if child not in distances or candidate < distances[child]:
                distances[child] = candidate
                parents[child] = node
        # Settled: its distance can no longer improve
        visited.add(node)
        node = _closest_unvisited(distances, visited)

    # Trivial case: already at goal
    if start == goal:
        return [start]
    # Goal never relaxed - no directed route exists
    if parents.get(goal) is None:
        return None

    # Walk predecessors back from goal; start has no entry and ends the walk
    path = [goal]
    parent = parents[goal]
    while parent is not None:
        path.append(parent)
        parent = parents.get(parent)
    path.reverse()
    return path


def path_cost(adjacency: Mapping[str, Mapping[str, float]], path: Sequence[str]) -> float:
    """Sum the edge weights along ``path``.

    Raises:
        KeyError: If two consecutive ids are not joined by a declared edge.
    """
    return sum(adjacency[source][target] for source, target in zip(path, path[1:]))
