"""
Scene loading for JSON-described vector illustrations.

This module is the boundary between the rendering side and the navigation
graph. A scene file lists the paths of an illustration after extrusion: each
path has a display name, the illustration's per-path user data and a bounding
volume. Paths whose user data carries a ``PATHFINDER_`` node id become graph
nodes; everything else is decoration and is ignored here.

Scene file structure:
```json
{
  "name": "Office floor",
  "description": "...",
  "depth": -5.0,
  "paths": [
    {
      "name": "path12",
      "userData": {"node": {"id": "PATHFINDER_A__B-C"}},
      "bounds": {"min": [0, 0], "max": [4, 4]}
    }
  ]
}
```

2D bounds are extruded over ``depth`` along z, matching how flat paths are
turned into meshes; 3D bounds are used as given.

Usage:
    loader = SceneLoader()
    scene = loader.load("floorplan/scene")
    graph = loader.build_graph(scene)
    positions = graph.shortest_path("A", "F")
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import Config
from .errors import IngestError
from .logging_utils import log_deterministic, log_success, log_warning
from .navigation import NavigationGraph, Vector3, is_part_of_graph


class BoundingBox(BaseModel):
    """Axis-aligned bounding volume of a scene object."""

    min: Tuple[float, float, float]
    max: Tuple[float, float, float]

    @property
    def center(self) -> Vector3:
        return Vector3(*((lo + hi) / 2 for lo, hi in zip(self.min, self.max)))

    @classmethod
    def extruded(
        cls,
        min_xy: Sequence[float],
        max_xy: Sequence[float],
        depth: float,
    ) -> "BoundingBox":
        """Bounds of a flat shape extruded from z=0 to z=depth."""
        z_lo, z_hi = sorted((0.0, depth))
        return cls(
            min=(min_xy[0], min_xy[1], z_lo),
            max=(max_xy[0], max_xy[1], z_hi),
        )


class ScenePath(BaseModel):
    """One extruded path of the illustration."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Scene-unique display name")
    user_data: Optional[Dict[str, Any]] = Field(
        None,
        alias="userData",
        description="Per-path metadata from the illustration, e.g. {'node': {'id': ...}}",
    )
    bounds: BoundingBox
    color: Optional[str] = None
    visible: bool = True


class Scene(BaseModel):
    """All paths of one illustration."""

    name: str
    description: str = ""
    depth: float = Field(default_factory=lambda: Config.EXTRUDE_DEPTH)
    paths: List[ScenePath] = Field(default_factory=list)

    @field_validator("paths")
    @classmethod
    def _unique_names(cls, paths: List[ScenePath]) -> List[ScenePath]:
        seen = set()
        for path in paths:
            if path.name in seen:
                raise ValueError(f"Duplicate path name '{path.name}'")
            seen.add(path.name)
        return paths

    def navigation_paths(self) -> List[ScenePath]:
        """Paths whose user data marks them as navigation nodes."""
        return [path for path in self.paths if is_part_of_graph(path.user_data)]


def position_of(path: ScenePath) -> Vector3:
    """Bounding-volume center of a scene path."""
    return path.bounds.center


def hide_path(path: ScenePath) -> None:
    """Navigation markers are not drawn; only the route is."""
    path.visible = False


class SceneLoader:
    """Load scene files and turn them into navigation graphs.

    Directory structure:
    - Default: ``Config.SCENES_DIR`` ({PROJECT_ROOT}/examples)
    - Override via constructor: SceneLoader(Path("/custom/scenes"))
    - Scene files: {scene_name}.json (e.g., "floorplan/scene.json")

    Validation:
    - Required fields: name, paths
    - paths must be a list of objects
    - Each path needs a name and bounds with min/max lists of 2 or 3 coordinates
    - Raises ValueError if validation fails
    """

    def __init__(self, scenes_dir: Optional[Path] = None):
        self.scenes_dir = scenes_dir or Config.SCENES_DIR

    def load(self, scene_name: str) -> Scene:
        """Load a scene by name from its JSON file.

        Raises:
            FileNotFoundError: If the scene file doesn't exist in scenes_dir
            ValueError: If the JSON is missing required fields or malformed
            json.JSONDecodeError: If the file contains invalid JSON
        """
        scene_path = self.scenes_dir / f"{scene_name}.json"

        if not scene_path.exists():
            raise FileNotFoundError(
                f"Scene '{scene_name}' not found at {scene_path}"
            )

        data = json.loads(scene_path.read_text())
        return self.parse(data)

    def parse(self, data: Dict[str, Any]) -> Scene:
        """Build a Scene from already-decoded JSON data."""
        self._validate_scene(data)

        depth = float(data.get("depth", Config.EXTRUDE_DEPTH))
        paths = [self._parse_path(entry, depth) for entry in data["paths"]]

        return Scene(
            name=data["name"],
            description=data.get("description", ""),
            depth=depth,
            paths=paths,
        )

    def build_graph(self, scene: Scene, *, strict: bool = False) -> NavigationGraph:
        """Ingest every navigation path of ``scene`` and compute the graph.

        Records rejected by the graph (malformed ids, duplicate node ids) are
        logged and skipped unless ``strict`` is set, in which case the first
        rejection is raised. Recompute failures (unknown neighbors) always raise.
        """
        # Paths are hidden only after the graph computes, so a failed build
        # leaves the scene as it was
        graph = NavigationGraph(position_of)

        for path in scene.navigation_paths():
            try:
                graph.add_node(path, path.user_data)
            except IngestError as exc:
                if strict:
                    raise
                log_warning(f"Skipping path '{path.name}': {exc}")

        graph.recompute_graph()
        for node in graph:
            hide_path(node.scene_ref)

        edge_count = sum(len(edges) for edges in graph.adjacency.values())
        log_deterministic(
            f"Navigation graph for '{scene.name}': {len(graph)} nodes, {edge_count} edges"
        )
        log_success(f"Scene '{scene.name}' loaded")
        return graph

    def _validate_scene(self, data: Dict[str, Any]) -> None:
        """Validate scene data has required fields.

        Raises:
            ValueError: If required fields are missing
        """
        required = ["name", "paths"]
        missing = [field for field in required if field not in data]

        if missing:
            raise ValueError(f"Scene missing required fields: {missing}")

        if not isinstance(data["paths"], list):
            raise ValueError("Scene 'paths' must be a list")

        for entry in data["paths"]:
            if not isinstance(entry, dict):
                raise ValueError("Each path entry must be an object")
            if "name" not in entry or "bounds" not in entry:
                raise ValueError(
                    "Each path entry must include 'name' and 'bounds'"
                )
            bounds = entry["bounds"]
            if not isinstance(bounds, dict) or "min" not in bounds or "max" not in bounds:
                raise ValueError(
                    f"Path '{entry['name']}' bounds must include 'min' and 'max'"
                )
            for corner in (bounds["min"], bounds["max"]):
                if not isinstance(corner, list):
                    raise ValueError(
                        f"Path '{entry['name']}' bounds corners must be coordinate lists"
                    )

    def _parse_path(self, entry: Dict[str, Any], depth: float) -> ScenePath:
        """Convert a raw path entry, extruding 2D bounds over ``depth``."""
        raw_bounds = entry["bounds"]
        lo, hi = raw_bounds["min"], raw_bounds["max"]
        if len(lo) != len(hi) or len(lo) not in (2, 3):
            raise ValueError(
                f"Path '{entry['name']}' bounds must have 2 or 3 coordinates per corner"
            )

        if len(lo) == 2:
            bounds = BoundingBox.extruded(lo, hi, depth)
        else:
            bounds = BoundingBox(min=tuple(lo), max=tuple(hi))

        return ScenePath(**{**entry, "bounds": bounds})


def load_navigation_graph(scene_name: str, *, strict: bool = False) -> NavigationGraph:
    """Convenience function to load a scene and build its navigation graph."""
    loader = SceneLoader()
    return loader.build_graph(loader.load(scene_name), strict=strict)
