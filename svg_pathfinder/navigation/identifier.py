"""Identifier codec for navigation path records.

Vector illustrations mark the paths that take part in the navigation graph by
giving them an id of the form::

    PATHFINDER_<nodeId>__<neighborId>-<neighborId>-...

``PATHFINDER_A__B-C`` declares node ``A`` with neighbors ``B`` and ``C``. An
empty neighbor segment (``PATHFINDER_D__``) declares a node with no outgoing
edges. The format is shared with the illustration tooling and must stay
bit-exact.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple

from ..errors import MalformedIdentifierError

SENTINEL_PREFIX = "PATHFINDER_"
SEGMENT_DELIMITER = "__"
NEIGHBOR_DELIMITER = "-"


@dataclass(frozen=True)
class IdentifierPayload:
    """Parsed node id and its declared neighbor ids."""

    node_id: str
    neighbor_ids: Tuple[str, ...] = ()


def _raw_identifier(metadata: Optional[Mapping[str, Any]]) -> Optional[Any]:
    """Return ``metadata["node"]["id"]`` or None when any level is missing."""
    if not isinstance(metadata, Mapping):
        return None
    node = metadata.get("node")
    if not isinstance(node, Mapping):
        return None
    return node.get("id")


def is_part_of_graph(metadata: Optional[Mapping[str, Any]]) -> bool:
    """Return True when the record's id carries the navigation sentinel prefix.

    Only the prefix is checked; a prefixed but malformed id still returns True
    and fails later in ``parse_identifier``. Never raises.
    """
    identifier = _raw_identifier(metadata)
    return isinstance(identifier, str) and identifier.startswith(SENTINEL_PREFIX)


def decode_identifier(identifier: str) -> IdentifierPayload:
    """Split a prefixed identifier string into node id and neighbor ids."""
    if not isinstance(identifier, str) or not identifier.startswith(SENTINEL_PREFIX):
        raise MalformedIdentifierError(
            f"Identifier must start with {SENTINEL_PREFIX!r}: {identifier!r}",
            identifier=identifier if isinstance(identifier, str) else None,
        )

    segments = identifier[len(SENTINEL_PREFIX):].split(SEGMENT_DELIMITER)
    if len(segments) != 2:
        raise MalformedIdentifierError(
            f"Identifier must have exactly one {SEGMENT_DELIMITER!r} separating "
            f"node id and neighbors: {identifier!r}",
            identifier=identifier,
        )

    node_id, neighbor_segment = segments
    if not node_id:
        raise MalformedIdentifierError(
            f"Identifier has an empty node id: {identifier!r}",
            identifier=identifier,
        )

    if not neighbor_segment:
        return IdentifierPayload(node_id=node_id)

    neighbor_ids = tuple(neighbor_segment.split(NEIGHBOR_DELIMITER))
    if any(not neighbor_id for neighbor_id in neighbor_ids):
        raise MalformedIdentifierError(
            f"Identifier has an empty neighbor id: {identifier!r}",
            identifier=identifier,
        )
    return IdentifierPayload(node_id=node_id, neighbor_ids=neighbor_ids)


def parse_identifier(metadata: Optional[Mapping[str, Any]]) -> IdentifierPayload:
    """Extract the identifier payload from a path record's user data.

    Args:
        metadata: The record's structured metadata, shaped like
            ``{"node": {"id": "PATHFINDER_A__B-C"}}``. May be None.

    Raises:
        MalformedIdentifierError: If metadata or its id is missing, the id is
            not prefixed, or the id does not split into node and neighbor segments.
    """
    identifier = _raw_identifier(metadata)
    if identifier is None:
        raise MalformedIdentifierError("Unable to retrieve node id from path metadata")
    return decode_identifier(identifier)


def encode_identifier(node_id: str, neighbor_ids: Iterable[str] = ()) -> str:
    """Build the prefixed identifier string for ``node_id`` and its neighbors.

    Raises:
        MalformedIdentifierError: If an id is empty or contains a delimiter that
            would make the string decode differently.
    """
    neighbors = list(neighbor_ids)
    # A trailing underscore would merge into the segment delimiter
    if not node_id or SEGMENT_DELIMITER in node_id or node_id.endswith("_"):
        raise MalformedIdentifierError(f"Cannot encode node id {node_id!r}")
    for neighbor_id in neighbors:
        if (
            not neighbor_id
            or NEIGHBOR_DELIMITER in neighbor_id
            or SEGMENT_DELIMITER in neighbor_id
        ):
            raise MalformedIdentifierError(
                f"Cannot encode neighbor id {neighbor_id!r} of node {node_id!r}"
            )
    return f"{SENTINEL_PREFIX}{node_id}{SEGMENT_DELIMITER}{NEIGHBOR_DELIMITER.join(neighbors)}"
