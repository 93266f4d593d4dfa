"""Route composition helpers.

Turns the ordered node positions returned by ``NavigationGraph.shortest_path``
into shapes a renderer can draw:

- segmented mode: one directed segment per consecutive pair of positions
  (per-segment animated lines)
- continuous mode: a Catmull-Rom curve through every position, sampled at a
  fixed number of divisions (single smooth line)

Styling (color, width, texture, animation) stays with the renderer.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from .config import CURVE_TYPES, Config
from .navigation.graph import NavigationGraph, Vector3

Segment = Tuple[Vector3, Vector3]

# Below this the chord is treated as degenerate (coincident control points)
_MIN_CHORD = 1e-4


def route_segments(positions: Sequence[Vector3]) -> List[Segment]:
    """Return ``(from, to)`` pairs for every consecutive pair of positions."""
    return [(Vector3(*a), Vector3(*b)) for a, b in zip(positions, positions[1:])]


def route_length(positions: Sequence[Vector3]) -> float:
    """Total polyline length through ``positions``."""
    return sum(a.distance_to(b) for a, b in route_segments(positions))


class _CubicPoly:
    """Hermite cubic ``c0 + c1*t + c2*t^2 + c3*t^3`` for one coordinate."""

    __slots__ = ("c0", "c1", "c2", "c3")

    def __init__(self, x0: float, x1: float, t0: float, t1: float):
        self.c0 = x0
        self.c1 = t0
        self.c2 = -3 * x0 + 3 * x1 - 2 * t0 - t1
        self.c3 = 2 * x0 - 2 * x1 + t0 + t1

    @classmethod
    def uniform(cls, x0: float, x1: float, x2: float, x3: float, tension: float) -> "_CubicPoly":
        return cls(x1, x2, tension * (x2 - x0), tension * (x3 - x1))

    @classmethod
    def nonuniform(
        cls,
        x0: float,
        x1: float,
        x2: float,
        x3: float,
        dt0: float,
        dt1: float,
        dt2: float,
    ) -> "_CubicPoly":
        t1 = (x1 - x0) / dt0 - (x2 - x0) / (dt0 + dt1) + (x2 - x1) / dt1
        t2 = (x2 - x1) / dt1 - (x3 - x1) / (dt1 + dt2) + (x3 - x2) / dt2
        return cls(x1, x2, t1 * dt1, t2 * dt1)

    def calc(self, t: float) -> float:
        t2 = t * t
        return self.c0 + self.c1 * t + self.c2 * t2 + self.c3 * t2 * t


def _reflect(anchor: Vector3, other: Vector3) -> Vector3:
    """Phantom control point mirrored through ``anchor``."""
    return Vector3(*(2 * a - o for a, o in zip(anchor, other)))


class CatmullRomCurve:
    """Open Catmull-Rom spline passing through every control point.

    Args:
        points: Control points, at least one.
        curve_type: ``centripetal`` (default, no cusps or self-intersections
            within a segment), ``chordal`` or ``catmullrom`` (uniform).
        tension: Only used by the uniform ``catmullrom`` parameterization.
    """

    def __init__(
        self,
        points: Sequence[Vector3],
        *,
        curve_type: str = "centripetal",
        tension: float = 0.5,
    ):
        if not points:
            raise ValueError("A curve needs at least one point")
        if curve_type not in CURVE_TYPES:
            raise ValueError(f"Unknown curve type '{curve_type}'")
        self.points = [Vector3(*p) for p in points]
        self.curve_type = curve_type
        self.tension = tension

    def point_at(self, t: float) -> Vector3:
        """Point at parameter ``t`` in ``[0, 1]``; each span gets an equal share."""
        points = self.points
        count = len(points)
        if count == 1:
            return points[0]

        t = min(max(t, 0.0), 1.0)
        p = (count - 1) * t
        index = int(p)
        weight = p - index
        if index >= count - 1:
            index = count - 2
            weight = 1.0

        p0 = points[index - 1] if index > 0 else _reflect(points[0], points[1])
        p1 = points[index]
        p2 = points[index + 1]
        p3 = points[index + 2] if index + 2 < count else _reflect(points[-1], points[-2])

        if self.curve_type == "catmullrom":
            polys = [
                _CubicPoly.uniform(a, b, c, d, self.tension)
                for a, b, c, d in zip(p0, p1, p2, p3)
            ]
        else:
            power = 0.25 if self.curve_type == "centripetal" else 0.5
            # chordal: |chord|, centripetal: sqrt(|chord|)
            dt0 = p1.distance_to(p0) ** (2 * power)
            dt1 = p2.distance_to(p1) ** (2 * power)
            dt2 = p3.distance_to(p2) ** (2 * power)
            if dt1 < _MIN_CHORD:
                dt1 = 1.0
            if dt0 < _MIN_CHORD:
                dt0 = dt1
            if dt2 < _MIN_CHORD:
                dt2 = dt1
            polys = [
                _CubicPoly.nonuniform(a, b, c, d, dt0, dt1, dt2)
                for a, b, c, d in zip(p0, p1, p2, p3)
            ]

        return Vector3(*(poly.calc(weight) for poly in polys))

    def sample(self, divisions: int) -> List[Vector3]:
        """Return ``divisions + 1`` evenly parameterized points, endpoints included."""
        if divisions < 1:
            raise ValueError("divisions must be >= 1")
        if len(self.points) == 1:
            return [self.points[0]]
        return [self.point_at(step / divisions) for step in range(divisions + 1)]


def sample_route_curve(
    positions: Sequence[Vector3],
    divisions: Optional[int] = None,
    *,
    curve_type: Optional[str] = None,
    tension: Optional[float] = None,
) -> List[Vector3]:
    """Sample a smooth curve through ``positions`` using configured defaults."""
    curve = CatmullRomCurve(
        positions,
        curve_type=curve_type or Config.CURVE_TYPE,
        tension=Config.CURVE_TENSION if tension is None else tension,
    )
    return curve.sample(Config.CURVE_DIVISIONS if divisions is None else divisions)


class RouteState(BaseModel):
    """Serializable route between two navigation nodes."""

    node_ids: List[str] = Field(default_factory=list, description="Start to goal, inclusive")
    positions: List[Tuple[float, float, float]] = Field(default_factory=list)
    length: float = Field(0.0, ge=0.0, description="Polyline length through positions")

    @property
    def start_id(self) -> Optional[str]:
        return self.node_ids[0] if self.node_ids else None

    @property
    def goal_id(self) -> Optional[str]:
        return self.node_ids[-1] if self.node_ids else None


def build_route(
    graph: NavigationGraph,
    start_id: str,
    goal_id: str,
    *,
    lazy: Optional[bool] = None,
) -> RouteState:
    """Resolve the shortest path between two nodes into a ``RouteState``.

    ``lazy`` defaults to ``Config.LAZY_RECOMPUTE``.
    """
    if lazy is None:
        lazy = Config.LAZY_RECOMPUTE
    node_ids = graph.shortest_path_ids(start_id, goal_id, lazy=lazy)
    positions = [graph.get_node(node_id).position for node_id in node_ids]
    return RouteState(
        node_ids=node_ids,
        positions=[tuple(p) for p in positions],
        length=route_length(positions),
    )
