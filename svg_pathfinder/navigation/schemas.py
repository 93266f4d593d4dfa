"""Pydantic schemas for navigation graph snapshots.

These models mirror the lightweight dataclasses in ``graph.py`` so a computed
graph can be serialized (debug dumps, fixtures) without dragging scene
back-references along.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from pydantic import BaseModel, Field


class NavigationNodeState(BaseModel):
    """Serializable view of a single navigation node."""

    id: str
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    neighbor_ids: List[str] = Field(
        default_factory=list,
        description="Declared neighbors, in identifier order (edges are one-way)",
    )


class NavigationGraphState(BaseModel):
    """Node set plus the adjacency snapshot published by the last recompute."""

    nodes: Dict[str, NavigationNodeState] = Field(
        default_factory=dict,
        description="Map of node_id → node definition",
    )
    adjacency: Dict[str, Dict[str, float]] = Field(
        default_factory=dict,
        description="Map of node_id → {neighbor_id → Euclidean distance}",
    )

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.adjacency.values())
