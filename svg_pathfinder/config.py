"""
svg_pathfinder Configuration

Loads configuration from environment variables with sensible defaults.
"""

import math
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

CURVE_TYPES = ("centripetal", "chordal", "catmullrom")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # Route curve sampling
    CURVE_DIVISIONS: int = int(os.getenv("PATHFINDER_CURVE_DIVISIONS", "50"))
    CURVE_TYPE: str = os.getenv("PATHFINDER_CURVE_TYPE", "centripetal")
    CURVE_TENSION: float = float(os.getenv("PATHFINDER_CURVE_TENSION", "0.5"))

    # Scene geometry
    # Extrusion depth applied to 2D path bounds (negative extrudes away from viewer)
    EXTRUDE_DEPTH: float = float(os.getenv("PATHFINDER_EXTRUDE_DEPTH", "-5.0"))

    # Recompute the adjacency on first query when it is still empty
    LAZY_RECOMPUTE: bool = _env_flag("PATHFINDER_LAZY_RECOMPUTE")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    SCENES_DIR: Path = Path(os.getenv("PATHFINDER_SCENES_DIR", str(PROJECT_ROOT / "examples")))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are out of range."""
        if cls.CURVE_DIVISIONS < 1:
            raise ValueError(
                f"PATHFINDER_CURVE_DIVISIONS must be >= 1 (got {cls.CURVE_DIVISIONS})"
            )

        if cls.CURVE_TYPE not in CURVE_TYPES:
            raise ValueError(
                f"PATHFINDER_CURVE_TYPE must be one of {', '.join(CURVE_TYPES)} "
                f"(got '{cls.CURVE_TYPE}')"
            )

        if not math.isfinite(cls.CURVE_TENSION) or cls.CURVE_TENSION < 0:
            raise ValueError(
                f"PATHFINDER_CURVE_TENSION must be a finite value >= 0 (got {cls.CURVE_TENSION})"
            )

        if cls.EXTRUDE_DEPTH == 0:
            raise ValueError(
                "PATHFINDER_EXTRUDE_DEPTH must be non-zero; flat paths have no bounding volume depth"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "svg_pathfinder Configuration:",
            f"  Curve: {cls.CURVE_TYPE} ({cls.CURVE_DIVISIONS} divisions, tension {cls.CURVE_TENSION})",
            f"  Extrude Depth: {cls.EXTRUDE_DEPTH}",
            f"  Lazy Recompute: {cls.LAZY_RECOMPUTE}",
            f"  Scenes: {cls.SCENES_DIR}",
        ]
        return "\n".join(lines)
