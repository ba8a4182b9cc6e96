"""Input boundary: turn a text stream into a parsed maze."""

from __future__ import annotations

from typing import TextIO

from .errors import EmptyMaze
from .maze.grid import Grid
from .maze.parser import parse


def read_maze_text(stream: TextIO) -> str:
    """Read the whole maze document, folding CRLF line endings to LF."""
    return stream.read().replace("\r\n", "\n")


def load_maze(stream: TextIO) -> Grid:
    """Read and parse a maze, rejecting empty input before parsing.

    Raises:
        EmptyMaze: the stream held no maze rows.
        MalformedMaze: the rows do not form a rectangular grid.
    """
    text = read_maze_text(stream)
    if not text.strip():
        raise EmptyMaze("no maze rows were read from the input")
    return parse(text)
