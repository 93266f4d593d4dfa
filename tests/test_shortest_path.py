"""Tests for the Dijkstra helper over adjacency snapshots."""

import pytest

from svg_pathfinder.errors import EmptyGraphError, UnknownNeighborError, UnknownNodeError
from svg_pathfinder.navigation import path_cost, shortest_path


def test_prefers_cheaper_two_hop_route_over_direct_edge():
    adjacency = {
        "A": {"B": 1.0, "C": 5.0},
        "B": {"C": 1.0},
        "C": {},
    }

    path = shortest_path(adjacency, "A", "C")

    assert path == ["A", "B", "C"]
    assert path_cost(adjacency, path) == pytest.approx(2.0)


def test_start_equals_goal():
    adjacency = {"A": {"B": 1.0}, "B": {"A": 1.0}}
    assert shortest_path(adjacency, "A", "A") == ["A"]


def test_self_loop_on_start_is_ignored():
    adjacency = {"A": {"A": 0.0, "B": 2.0}, "B": {}}
    assert shortest_path(adjacency, "A", "B") == ["A", "B"]
    assert shortest_path(adjacency, "A", "A") == ["A"]


def test_empty_adjacency_raises():
    with pytest.raises(EmptyGraphError):
        shortest_path({}, "A", "B")


@pytest.mark.parametrize("start, goal", [("A", "missing"), ("missing", "A")])
def test_unknown_ids_raise(start, goal):
    adjacency = {"A": {}}
    with pytest.raises(UnknownNodeError) as excinfo:
        shortest_path(adjacency, start, goal)
    assert excinfo.value.node_id == "missing"


def test_unreachable_goal_returns_none():
    # B is declared only by A, so nothing leads back to A.
    adjacency = {"A": {"B": 10.0}, "B": {}}
    assert shortest_path(adjacency, "A", "B") == ["A", "B"]
    assert shortest_path(adjacency, "B", "A") is None


def test_disconnected_components_return_none():
    adjacency = {
        "A": {"B": 1.0},
        "B": {"A": 1.0},
        "X": {"Y": 1.0},
        "Y": {"X": 1.0},
    }
    assert shortest_path(adjacency, "A", "Y") is None


def test_reconstructs_path_for_arbitrary_goal_ids():
    adjacency = {
        "lobby": {"hall_1": 4.0},
        "hall_1": {"lobby": 4.0, "hall_2": 3.0, "stairs": 9.0},
        "hall_2": {"hall_1": 3.0, "stairs": 2.0, "room_204": 6.0},
        "stairs": {"hall_2": 2.0},
        "room_204": {"hall_2": 6.0},
    }

    assert shortest_path(adjacency, "lobby", "stairs") == ["lobby", "hall_1", "hall_2", "stairs"]
    assert shortest_path(adjacency, "lobby", "room_204") == ["lobby", "hall_1", "hall_2", "room_204"]
    assert shortest_path(adjacency, "room_204", "lobby") == ["room_204", "hall_2", "hall_1", "lobby"]


def test_equal_cost_routes_resolve_by_insertion_order():
    adjacency = {
        "S": {"X": 1.0, "Y": 1.0},
        "X": {"G": 1.0},
        "Y": {"G": 1.0},
        "G": {},
    }
    assert shortest_path(adjacency, "S", "G") == ["S", "X", "G"]

    swapped = {**adjacency, "S": {"Y": 1.0, "X": 1.0}}
    assert shortest_path(swapped, "S", "G") == ["S", "Y", "G"]


def test_zero_weight_edges_are_followed():
    adjacency = {
        "A": {"B": 0.0, "C": 3.0},
        "B": {"C": 0.0},
        "C": {},
    }
    path = shortest_path(adjacency, "A", "C")
    assert path == ["A", "B", "C"]
    assert path_cost(adjacency, path) == 0.0


def test_later_relaxation_replaces_predecessor():
    adjacency = {
        "A": {"D": 10.0, "B": 1.0},
        "B": {"C": 1.0},
        "C": {"D": 1.0},
        "D": {"E": 1.0},
        "E": {},
    }
    path = shortest_path(adjacency, "A", "E")
    assert path == ["A", "B", "C", "D", "E"]
    assert path_cost(adjacency, path) == pytest.approx(4.0)


def test_path_cost_rejects_undeclared_edges():
    with pytest.raises(KeyError):
        path_cost({"A": {}, "B": {}}, ["A", "B"])


@pytest.mark.parametrize("start, goal", [("A", "A"), ("A", "C"), ("C", "A")])
def test_edge_to_missing_node_raises_typed_error(start, goal):
    # B is a neighbor of A but has no entry of its own
    adjacency = {"A": {"B": 1.0}, "C": {"A": 2.0}}
    with pytest.raises(UnknownNeighborError) as excinfo:
        shortest_path(adjacency, start, goal)
    assert (excinfo.value.node_id, excinfo.value.neighbor_id) == ("A", "B")
