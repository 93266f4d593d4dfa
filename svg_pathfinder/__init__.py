"""
svg_pathfinder - navigation graphs extracted from vector illustrations.

Paths tagged ``PATHFINDER_<id>__<neighbors>`` in an illustration become nodes
of a directed, distance-weighted graph. The graph answers nearest-node and
shortest-path queries so a 3D scene can draw a route from any point to a
known destination.

No rendering, no file-format parsing, no global state: the caller owns each
NavigationGraph and supplies how scene objects are positioned.
"""

__version__ = "0.1.0"

from .errors import (
    PathfinderError,
    IngestError,
    GraphError,
    QueryError,
    MalformedIdentifierError,
    DuplicateNodeError,
    UnknownNeighborError,
    EmptyGraphError,
    UnknownNodeError,
    NoPathError,
)
from .navigation import (
    IdentifierPayload,
    SENTINEL_PREFIX,
    decode_identifier,
    encode_identifier,
    is_part_of_graph,
    parse_identifier,
    Adjacency,
    NavigationGraph,
    NavigationNode,
    Vector3,
    NavigationGraphState,
    NavigationNodeState,
    nearest_node,
    path_cost,
    shortest_path,
)
from .route import (
    CatmullRomCurve,
    RouteState,
    build_route,
    route_length,
    route_segments,
    sample_route_curve,
)
from .scene import (
    BoundingBox,
    Scene,
    ScenePath,
    SceneLoader,
    load_navigation_graph,
    position_of,
)

__all__ = [
    # Errors
    "PathfinderError",
    "IngestError",
    "GraphError",
    "QueryError",
    "MalformedIdentifierError",
    "DuplicateNodeError",
    "UnknownNeighborError",
    "EmptyGraphError",
    "UnknownNodeError",
    "NoPathError",
    # Identifier codec
    "IdentifierPayload",
    "SENTINEL_PREFIX",
    "decode_identifier",
    "encode_identifier",
    "is_part_of_graph",
    "parse_identifier",
    # Graph
    "Adjacency",
    "NavigationGraph",
    "NavigationNode",
    "Vector3",
    "NavigationGraphState",
    "NavigationNodeState",
    "nearest_node",
    "path_cost",
    "shortest_path",
    # Routes
    "CatmullRomCurve",
    "RouteState",
    "build_route",
    "route_length",
    "route_segments",
    "sample_route_curve",
    # Scenes
    "BoundingBox",
    "Scene",
    "ScenePath",
    "SceneLoader",
    "load_navigation_graph",
    "position_of",
]
