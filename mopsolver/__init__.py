"""
mopsolver - shortest paths through ASCII mazes.

Parses space-separated 0/1 maze text into an immutable occupancy grid and
measures the shortest route from the top-left to the bottom-right corner
with a breadth-first search.
"""

__version__ = "0.1.0"

from .errors import (
    MazeError,
    EmptyMaze,
    MalformedMaze,
    FrontierEmptyError,
    FrontierClosedError,
)
from .maze import (
    Grid,
    VisitedMap,
    MazeGridState,
    SolveReport,
    MazeLayout,
    detect_layout,
    parse,
    FrontierEntry,
    FrontierQueue,
    NO_PATH,
    shortest_path_length,
    solve,
    solve_report,
    format_bordered,
    format_matrix,
)
from .reader import load_maze, read_maze_text

__all__ = [
    # Errors
    "MazeError",
    "EmptyMaze",
    "MalformedMaze",
    "FrontierEmptyError",
    "FrontierClosedError",
    # Grid and schemas
    "Grid",
    "VisitedMap",
    "MazeGridState",
    "SolveReport",
    # Parsing
    "MazeLayout",
    "detect_layout",
    "parse",
    "load_maze",
    "read_maze_text",
    # Search
    "FrontierEntry",
    "FrontierQueue",
    "NO_PATH",
    "shortest_path_length",
    "solve",
    "solve_report",
    # Rendering
    "format_bordered",
    "format_matrix",
]
