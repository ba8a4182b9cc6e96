"""Maze text parser.

Each maze row is one line of single-character tokens separated by single
spaces, ``0`` for an open cell and any other glyph for a wall::

    0 0 0
    1 1 0
    0 0 0

Some producers emit one extra space before every newline. The layout is
detected from the character preceding the first newline and then enforced
for every row, so a document mixing both forms is rejected.
"""

from __future__ import annotations

from typing import List, NamedTuple

from ..errors import EmptyMaze, MalformedMaze
from .grid import Grid

OPEN_GLYPH = "0"


class MazeLayout(NamedTuple):
    """Dimensions derived from the raw text."""

    rows: int
    cols: int
    trailing_space: bool

    @property
    def line_width(self) -> int:
        """Characters per encoded row, newline included."""
        return 2 * self.cols + (1 if self.trailing_space else 0)


def _normalize(text: str) -> str:
    if not text or not text.strip():
        raise EmptyMaze("maze text is empty")
    # A final row without its newline is still a complete row.
    if not text.endswith("\n"):
        text += "\n"
    return text


def _cell_offset(layout: MazeLayout, row: int, col: int) -> int:
    offset = 2 * (row * layout.cols + col)
    if layout.trailing_space:
        offset += row
    return offset


def detect_layout(text: str) -> MazeLayout:
    """Work out ``rows``, ``cols`` and the trailing-space form of ``text``.

    Raises:
        EmptyMaze: ``text`` has no content.
        MalformedMaze: the first line has no cells, or the text length is not a
            whole number of rows.
    """
    text = _normalize(text)
    first_newline = text.index("\n")
    cols = sum(1 for ch in text[:first_newline] if ch != " ")
    if cols == 0:
        raise MalformedMaze("first line of the maze has no cells")

    trailing_space = first_newline > 0 and text[first_newline - 1] == " "
    width = 2 * cols + (1 if trailing_space else 0)
    rows, remainder = divmod(len(text), width)
    if remainder or rows < 1:
        raise MalformedMaze(
            f"maze text of {len(text)} characters is not a whole number of "
            f"{cols}-column rows ({width} characters each)"
        )
    return MazeLayout(rows=rows, cols=cols, trailing_space=trailing_space)


def _check_row(text: str, layout: MazeLayout, row: int) -> None:
    """Validate the separators and terminator of one encoded row."""
    start = _cell_offset(layout, row, 0)
    for col in range(layout.cols):
        offset = start + 2 * col
        glyph = text[offset]
        if glyph in (" ", "\n"):
            raise MalformedMaze(f"row {row + 1}: missing cell at column {col + 1}")
        separator = text[offset + 1]
        if col < layout.cols - 1 and separator != " ":
            raise MalformedMaze(
                f"row {row + 1}: expected a single space after column {col + 1}, got {separator!r}"
            )

    end = start + layout.line_width
    tail = text[start + 2 * layout.cols - 1:end]
    expected = " \n" if layout.trailing_space else "\n"
    if tail != expected:
        raise MalformedMaze(
            f"row {row + 1}: expected row to end with {expected!r}, got {tail!r} "
            "(rows must agree on the trailing space)"
        )


def parse(text: str) -> Grid:
    """Convert maze text into a ``Grid`` (``True`` = wall)."""
    text = _normalize(text)
    layout = detect_layout(text)

    cells: List[bool] = []
    for row in range(layout.rows):
        _check_row(text, layout, row)
        for col in range(layout.cols):
            cells.append(text[_cell_offset(layout, row, col)] != OPEN_GLYPH)
    return Grid(rows=layout.rows, cols=layout.cols, cells=tuple(cells))
