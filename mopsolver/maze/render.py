"""Text renderings of a ``Grid``."""

from __future__ import annotations

from typing import List, Optional

from ..config import Config
from .grid import Grid


def format_matrix(grid: Grid) -> str:
    """Render ``grid`` in the input format (``1`` = wall, ``0`` = open)."""
    lines = [" ".join("1" if wall else "0" for wall in row) for row in grid.iter_rows()]
    return "\n".join(lines) + "\n"


def format_bordered(
    grid: Grid,
    *,
    wall: Optional[str] = None,
    empty: Optional[str] = None,
) -> str:
    """Render ``grid`` inside a border.

    The left edge of the first row (entry) and the right edge of the last row
    (exit) are left open. ``wall``/``empty`` default to the configured glyphs.
    """

    wall = Config.WALL_CHAR if wall is None else wall
    empty = Config.EMPTY_CHAR if empty is None else empty

    edge = "+" + "-" * (2 * grid.cols + 1) + "+"
    lines: List[str] = [edge]
    for index, row in enumerate(grid.iter_rows()):
        left = " " if index == 0 else "|"
        right = " " if index == grid.rows - 1 else "|"
        body = " ".join(wall if cell else empty for cell in row)
        lines.append(f"{left} {body} {right}".rstrip())
    lines.append(edge)
    return "\n".join(lines) + "\n"
