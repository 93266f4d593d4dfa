"""Exception taxonomy for navigation graph ingestion, recompute and queries.

Every error is raised synchronously to the immediate caller. None of them are
retried or logged inside the graph code; boundary layers (scene loading, click
handlers) decide whether to warn and continue or abort.
"""

from __future__ import annotations

from typing import Optional


class PathfinderError(Exception):
    """Base class for all navigation graph errors."""


# =============================
# Ingestion
# =============================

class IngestError(PathfinderError):
    """Raised when a scene record cannot be added to the graph."""


class MalformedIdentifierError(IngestError):
    """Raised when path metadata is missing, unprefixed, or badly structured."""

    def __init__(self, message: str, *, identifier: Optional[str] = None) -> None:
        self.identifier = identifier
        super().__init__(message)


class DuplicateNodeError(IngestError):
    """Raised when a node id is already present in the graph."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' already exists in the navigation graph")


# =============================
# Recompute
# =============================

class GraphError(PathfinderError):
    """Raised when the adjacency snapshot cannot be rebuilt."""


class UnknownNeighborError(GraphError):
    """Raised when a node declares a neighbor id that has no matching node."""

    def __init__(self, node_id: str, neighbor_id: str) -> None:
        self.node_id = node_id
        self.neighbor_id = neighbor_id
        super().__init__(
            f"Node '{node_id}' declares unknown neighbor '{neighbor_id}'"
        )


# =============================
# Queries
# =============================

class QueryError(PathfinderError):
    """Raised when a nearest-node or shortest-path query cannot be answered."""


class EmptyGraphError(QueryError):
    """Raised when querying a graph with no nodes or no computed adjacency."""


class UnknownNodeError(QueryError):
    """Raised when a query references an id absent from the adjacency snapshot."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Missing node '{node_id}' in the navigation graph")


class NoPathError(QueryError):
    """Raised when the goal cannot be reached from the start node.

    Edges are directed as declared, so a one-sided declaration (``A`` lists
    ``B`` but ``B`` does not list ``A``) makes ``B -> A`` unreachable.
    """

    def __init__(self, start_id: str, goal_id: str) -> None:
        self.start_id = start_id
        self.goal_id = goal_id
        super().__init__(f"No path from '{start_id}' to '{goal_id}'")
