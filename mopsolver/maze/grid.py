"""Occupancy grid for parsed mazes.

Cells are stored in one flat row-major tuple (``index = row * cols + col``)
where ``True`` marks a wall and ``False`` an open cell. A ``Grid`` is frozen
once built, so any number of solver runs can share it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .schemas import MazeGridState


@dataclass(frozen=True)
class Grid:
    """Immutable ``rows x cols`` wall map."""

    rows: int
    cols: int
    cells: Tuple[bool, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(bool(cell) for cell in self.cells))
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.rows}x{self.cols}")
        if len(self.cells) != self.rows * self.cols:
            raise ValueError(
                f"expected {self.rows * self.cols} cells for a {self.rows}x{self.cols} grid, "
                f"got {len(self.cells)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "Grid":
        """Build a grid from nested rows of booleans (``True`` = wall)."""
        if not rows or not rows[0]:
            raise ValueError("grid must have at least one row and one column")
        cols = len(rows[0])
        cells: List[bool] = []
        for row in rows:
            if len(row) != cols:
                raise ValueError("every row must have the same number of columns")
            cells.extend(bool(cell) for cell in row)
        return cls(rows=len(rows), cols=cols, cells=tuple(cells))

    def index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_wall(self, row: int, col: int) -> bool:
        if not self.contains(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.rows}x{self.cols} grid")
        return self.cells[self.index(row, col)]

    def is_open(self, row: int, col: int) -> bool:
        return not self.is_wall(row, col)

    def iter_rows(self) -> Iterable[Tuple[bool, ...]]:
        for row in range(self.rows):
            start = row * self.cols
            yield self.cells[start:start + self.cols]

    def to_rows(self) -> List[List[bool]]:
        return [list(row) for row in self.iter_rows()]

    def to_state(self) -> MazeGridState:
        return MazeGridState(rows=self.rows, cols=self.cols, cells=self.to_rows())

    @classmethod
    def from_state(cls, state: MazeGridState) -> "Grid":
        return cls.from_rows(state.cells)


class VisitedMap:
    """Per-run visited flags shaped like a ``Grid``.

    Backed by a flat ``bytearray``; a fresh map is all-unvisited.
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self._flags = bytearray(rows * cols)

    def is_visited(self, row: int, col: int) -> bool:
        return bool(self._flags[row * self.cols + col])

    def mark(self, row: int, col: int) -> None:
        self._flags[row * self.cols + col] = 1
