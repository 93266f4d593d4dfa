"""Navigation graph: identifier codec, graph builder and path queries."""

from .identifier import (
    IdentifierPayload,
    SENTINEL_PREFIX,
    decode_identifier,
    encode_identifier,
    is_part_of_graph,
    parse_identifier,
)
from .graph import Adjacency, NavigationGraph, NavigationNode, Vector3
from .schemas import NavigationGraphState, NavigationNodeState
from .helpers import nearest_node, path_cost, shortest_path

__all__ = [
    "IdentifierPayload",
    "SENTINEL_PREFIX",
    "decode_identifier",
    "encode_identifier",
    "is_part_of_graph",
    "parse_identifier",
    "Adjacency",
    "NavigationGraph",
    "NavigationNode",
    "Vector3",
    "NavigationGraphState",
    "NavigationNodeState",
    "nearest_node",
    "path_cost",
    "shortest_path",
]
