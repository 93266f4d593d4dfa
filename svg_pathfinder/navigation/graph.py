"""Navigation graph built from prefixed scene path records.

Nodes are ingested one at a time while the scene loads. Their positions are
unknown until ``recompute_graph()`` asks the rendering side for each scene
object's bounding-volume center, then derives the weighted adjacency snapshot
used by the shortest-path search.

Edges are directed exactly as declared. ``PATHFINDER_A__B`` creates ``A -> B``
only; ``B -> A`` exists only if ``B`` also lists ``A``. The graph never
symmetrizes declarations, so a one-sided declaration makes the reverse route
unreachable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from ..errors import (
    DuplicateNodeError,
    NoPathError,
    UnknownNeighborError,
    UnknownNodeError,
)
from .helpers import nearest_node, shortest_path
from .identifier import parse_identifier
from .schemas import NavigationGraphState, NavigationNodeState


class Vector3(NamedTuple):
    """Point in scene space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance_to(self, other: Tuple[float, float, float]) -> float:
        return math.dist(self, other)


# Read-only node id -> {neighbor id -> Euclidean distance}
Adjacency = Mapping[str, Mapping[str, float]]
PositionFn = Callable[[Any], Vector3]

EMPTY_ADJACENCY: Adjacency = MappingProxyType({})


@dataclass
class NavigationNode:
    """A graph vertex anchored to a scene object.

    ``scene_ref`` is a back-reference to the visual object; its lifetime belongs
    to the rendering side and the graph never copies it.
    """

    id: str
    neighbor_ids: Tuple[str, ...] = ()
    position: Vector3 = field(default_factory=Vector3)
    scene_ref: Any = field(default=None, repr=False, compare=False)


class NavigationGraph:
    """Owns navigation nodes and publishes adjacency snapshots.

    Args:
        position_of: Returns the bounding-volume center of a scene object.
            Called for every node on each ``recompute_graph()``.
        hide: Optional presentation hook applied to a scene object once its
            node has been added (navigation markers start out invisible).
    """

    def __init__(self, position_of: PositionFn, *, hide: Optional[Callable[[Any], None]] = None):
        self._position_of = position_of
        self._hide = hide
        # Insertion order matters: nearest() ties resolve to the earliest node.
        self._nodes: Dict[str, NavigationNode] = {}
        self._adjacency: Adjacency = EMPTY_ADJACENCY

    # ------------------------------------------------------------------
    # Node set
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[NavigationNode]:
        return iter(self._nodes.values())

    @property
    def nodes(self) -> List[NavigationNode]:
        return list(self._nodes.values())

    def get_node(self, node_id: str) -> NavigationNode:
        node = self._nodes.get(node_id)
        if node is None:
            raise UnknownNodeError(node_id)
        return node

    def add_node(self, scene_ref: Any, metadata: Optional[Mapping[str, Any]]) -> NavigationNode:
        """Ingest a scene object whose metadata carries a navigation identifier.

        The node starts at the origin; call ``recompute_graph()`` once all nodes
        are in to resolve positions and edges.

        Raises:
            MalformedIdentifierError: If the metadata does not decode.
            DuplicateNodeError: If the decoded id is already in the graph.
        """
        payload = parse_identifier(metadata)
        if payload.node_id in self._nodes:
            raise DuplicateNodeError(payload.node_id)

        node = NavigationNode(
            id=payload.node_id,
            neighbor_ids=payload.neighbor_ids,
            scene_ref=scene_ref,
        )
        self._nodes[node.id] = node
        if self._hide is not None:
            self._hide(scene_ref)
        return node

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    @property
    def adjacency(self) -> Adjacency:
        """Last published snapshot. Stale once scene objects move."""
        return self._adjacency

    def is_graph_computed(self) -> bool:
        return len(self._adjacency) > 0

    def recompute_graph(self) -> Adjacency:
        """Refresh node positions and rebuild edge weights.

        Positions and edges are computed into fresh containers first; nodes and
        the published snapshot are only touched once every declared neighbor
        resolved. A failure leaves the previous positions and snapshot intact.

        Raises:
            UnknownNeighborError: If a node declares a neighbor id with no node.
        """
        positions = {
            node_id: Vector3(*self._position_of(node.scene_ref))
            for node_id, node in self._nodes.items()
        }

        adjacency: Dict[str, Mapping[str, float]] = {}
        for node_id, node in self._nodes.items():
            edges: Dict[str, float] = {}
            for neighbor_id in node.neighbor_ids:
                if neighbor_id not in positions:
                    raise UnknownNeighborError(node_id, neighbor_id)
                edges[neighbor_id] = positions[node_id].distance_to(positions[neighbor_id])
            adjacency[node_id] = MappingProxyType(edges)

        for node_id, position in positions.items():
            self._nodes[node_id].position = position
        self._adjacency = MappingProxyType(adjacency)
        return self._adjacency

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def nearest(self, point: Tuple[float, float, float]) -> NavigationNode:
        """Return the node closest to ``point`` (first inserted wins ties)."""
        return nearest_node(self._nodes.values(), point)

    def shortest_path_ids(self, start_id: str, goal_id: str, *, lazy: bool = False) -> List[str]:
        """Return node ids from ``start_id`` to ``goal_id`` inclusive.

        Args:
            lazy: Recompute first when no adjacency has been published yet.
                Without it an uncomputed graph raises ``EmptyGraphError``.

        Raises:
            EmptyGraphError: If the adjacency snapshot is empty.
            UnknownNodeError: If either id is missing from the snapshot.
            NoPathError: If the goal is unreachable along declared edges.
        """
        if lazy and not self.is_graph_computed():
            self.recompute_graph()
        path = shortest_path(self._adjacency, start_id, goal_id)
        if path is None:
            raise NoPathError(start_id, goal_id)
        return path

    def shortest_path(self, start_id: str, goal_id: str, *, lazy: bool = False) -> List[Vector3]:
        """Return the ordered node positions of the shortest route.

        Same contract as ``shortest_path_ids``; positions reflect the last
        recompute.
        """
        return [
            self._nodes[node_id].position
            for node_id in self.shortest_path_ids(start_id, goal_id, lazy=lazy)
        ]

    def route_from(
        self,
        point: Tuple[float, float, float],
        goal_id: str,
        *,
        lazy: bool = False,
    ) -> List[Vector3]:
        """Route from the node nearest to ``point`` to ``goal_id``."""
        if lazy and not self.is_graph_computed():
            self.recompute_graph()
        start = self.nearest(point)
        return self.shortest_path(start.id, goal_id)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def to_state(self) -> NavigationGraphState:
        """Serializable copy of the nodes and the current adjacency snapshot."""
        return NavigationGraphState(
            nodes={
                node.id: NavigationNodeState(
                    id=node.id,
                    position=tuple(node.position),
                    neighbor_ids=list(node.neighbor_ids),
                )
                for node in self._nodes.values()
            },
            adjacency={
                node_id: dict(edges) for node_id, edges in self._adjacency.items()
            },
        )
