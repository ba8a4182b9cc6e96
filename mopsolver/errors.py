"""Exceptions raised by mopsolver.

Maze input problems derive from ``MazeError`` so the command line front end
can report them in one place. Frontier misuse is a programming error and is
kept outside that hierarchy.
"""


class MazeError(Exception):
    """Base class for invalid maze input."""


class EmptyMaze(MazeError):
    """The maze text contained no rows."""


class MalformedMaze(MazeError):
    """The maze text does not describe a rectangular grid."""


class FrontierEmptyError(IndexError):
    """``remove`` was called on an empty frontier queue."""


class FrontierClosedError(RuntimeError):
    """The frontier queue was used after ``destroy``."""
