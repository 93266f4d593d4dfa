"""Logging utilities for svg_pathfinder boundary code.

Provides color-coded output so scene loading and route queries are easy to
tell apart from warnings about rejected records.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Graph computation (recompute, shortest path)
    YELLOW = "\033[93m"    # Skipped records, recoverable problems
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if PATHFINDER_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("PATHFINDER_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_deterministic(message: str) -> None:
    """Log a graph computation step (blue)."""
    print(colored(f"{TAG_GRAPH} {message}", Color.BLUE))


def log_warning(message: str) -> None:
    """Log a recoverable problem (yellow)."""
    print(colored(f"{TAG_WARNING} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{TAG_INFO} {message}", Color.CYAN))


# Markers for message types (color-blind accessible)
TAG_GRAPH = "[•]"
TAG_WARNING = "[?]"
TAG_ERROR = "[!]"
TAG_SUCCESS = "[✓]"
TAG_INFO = "[i]"
