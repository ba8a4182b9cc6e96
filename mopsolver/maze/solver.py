"""Breadth-first shortest-path engine over a ``Grid``."""

from __future__ import annotations

from typing import Optional, Tuple

from .frontier import FrontierQueue
from .grid import Grid, VisitedMap
from .schemas import SolveReport

NO_PATH = 0

# East, South, West, North. Fixed so that ties between equal-length paths are
# always broken the same way.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def shortest_path_length(
    grid: Grid,
    start: Tuple[int, int],
    goal: Tuple[int, int],
    *,
    queue: Optional[FrontierQueue] = None,
) -> int:
    """Return the number of steps from ``start`` to ``goal``, or ``NO_PATH``.

    Entering ``start`` counts as the first step, so any reachable goal yields
    at least 1. ``grid`` is only read. A caller-supplied ``queue`` is used for
    the search and destroyed before returning; if either endpoint is a wall
    the search never starts and the queue is left untouched.

    Raises:
        ValueError: ``start`` or ``goal`` lies outside the grid.
    """

    for label, (row, col) in (("start", start), ("goal", goal)):
        if not grid.contains(row, col):
            raise ValueError(f"{label} {(row, col)} is outside a {grid.rows}x{grid.cols} grid")

    # Walled endpoints can never be reached, even when start == goal.
    if grid.is_wall(*start) or grid.is_wall(*goal):
        return NO_PATH

    frontier = queue if queue is not None else FrontierQueue()
    visited = VisitedMap(grid.rows, grid.cols)

    try:
        # Cells are marked when enqueued, so each one enters the queue once.
        visited.mark(*start)
        frontier.insert(start[0], start[1], 1)

        while not frontier.is_empty():
            entry = frontier.remove()
            if (entry.row, entry.col) == goal:
                return entry.steps

            for d_row, d_col in DIRECTIONS:
                n_row, n_col = entry.row + d_row, entry.col + d_col
                if not grid.contains(n_row, n_col):
                    continue
                if grid.cells[grid.index(n_row, n_col)] or visited.is_visited(n_row, n_col):
                    continue
                visited.mark(n_row, n_col)
                frontier.insert(n_row, n_col, entry.steps + 1)

        return NO_PATH
    finally:
        frontier.destroy()


def solve(grid: Grid, *, queue: Optional[FrontierQueue] = None) -> int:
    """Steps from the top-left to the bottom-right cell; ``0`` means no path."""
    return shortest_path_length(grid, (0, 0), (grid.rows - 1, grid.cols - 1), queue=queue)


def solve_report(grid: Grid) -> SolveReport:
    steps = solve(grid)
    return SolveReport(rows=grid.rows, cols=grid.cols, steps=steps, solvable=steps != NO_PATH)
