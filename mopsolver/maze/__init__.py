"""Maze core: parsing, the frontier queue and the breadth-first solver."""

from .grid import Grid, VisitedMap
from .schemas import MazeGridState, SolveReport
from .parser import MazeLayout, detect_layout, parse
from .frontier import FrontierEntry, FrontierQueue
from .solver import NO_PATH, shortest_path_length, solve, solve_report
from .render import format_bordered, format_matrix

__all__ = [
    "Grid",
    "VisitedMap",
    "MazeGridState",
    "SolveReport",
    "MazeLayout",
    "detect_layout",
    "parse",
    "FrontierEntry",
    "FrontierQueue",
    "NO_PATH",
    "shortest_path_length",
    "solve",
    "solve_report",
    "format_bordered",
    "format_matrix",
]
