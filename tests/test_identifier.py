"""Tests for the navigation identifier codec."""

import pytest

from svg_pathfinder.errors import MalformedIdentifierError
from svg_pathfinder.navigation import (
    IdentifierPayload,
    decode_identifier,
    encode_identifier,
    is_part_of_graph,
    parse_identifier,
)


def node_metadata(identifier):
    return {"node": {"id": identifier}}


def test_parse_identifier_extracts_id_and_neighbors():
    payload = parse_identifier(node_metadata("PATHFINDER_A__B-C"))
    assert payload == IdentifierPayload(node_id="A", neighbor_ids=("B", "C"))


def test_empty_neighbor_segment_declares_no_edges():
    payload = decode_identifier("PATHFINDER_D__")
    assert payload.node_id == "D"
    assert payload.neighbor_ids == ()


def test_node_ids_may_contain_single_underscores_and_digits():
    payload = decode_identifier("PATHFINDER_room_12__hall_1-room_13")
    assert payload.node_id == "room_12"
    assert payload.neighbor_ids == ("hall_1", "room_13")


@pytest.mark.parametrize(
    "metadata",
    [
        None,
        {},
        {"node": None},
        {"node": {}},
        {"style": "wall"},
    ],
)
def test_parse_identifier_rejects_missing_metadata(metadata):
    with pytest.raises(MalformedIdentifierError):
        parse_identifier(metadata)


@pytest.mark.parametrize(
    "identifier",
    [
        "A__B-C",              # no prefix
        "pathfinder_A__B",     # prefix is case-sensitive
        "PATHFINDER_A",        # missing neighbor segment
        "PATHFINDER___B",      # empty node id
        "PATHFINDER_A__B__C",  # too many segments
        "PATHFINDER_A__B--C",  # empty neighbor id
        "PATHFINDER_A__B-",    # trailing neighbor delimiter
    ],
)
def test_decode_identifier_rejects_malformed_strings(identifier):
    with pytest.raises(MalformedIdentifierError) as excinfo:
        decode_identifier(identifier)
    assert excinfo.value.identifier == identifier


def test_is_part_of_graph_checks_prefix_only_and_never_raises():
    assert is_part_of_graph(node_metadata("PATHFINDER_A__B")) is True
    # Prefixed but malformed still belongs to the graph; parsing fails later.
    assert is_part_of_graph(node_metadata("PATHFINDER_broken")) is True

    assert is_part_of_graph(node_metadata("wall-3")) is False
    assert is_part_of_graph(node_metadata(42)) is False
    assert is_part_of_graph({"node": "PATHFINDER_A__B"}) is False
    assert is_part_of_graph({}) is False
    assert is_part_of_graph(None) is False
    assert is_part_of_graph("PATHFINDER_A__B") is False


@pytest.mark.parametrize(
    "node_id, neighbor_ids",
    [
        ("A", ("B", "C")),
        ("A", ()),
        ("lobby", ("hall_1",)),
        ("_x", ("_y", "z_")),
    ],
)
def test_decode_inverts_encode(node_id, neighbor_ids):
    identifier = encode_identifier(node_id, neighbor_ids)
    assert decode_identifier(identifier) == IdentifierPayload(node_id, neighbor_ids)


def test_encode_matches_documented_format():
    assert encode_identifier("A", ["B", "C"]) == "PATHFINDER_A__B-C"


@pytest.mark.parametrize(
    "node_id, neighbor_ids",
    [
        ("", ["B"]),
        ("A__B", []),
        ("A_", ["B"]),
        ("A", ["B-C"]),
        ("A", [""]),
    ],
)
def test_encode_rejects_ids_that_would_not_round_trip(node_id, neighbor_ids):
    with pytest.raises(MalformedIdentifierError):
        encode_identifier(node_id, neighbor_ids)
