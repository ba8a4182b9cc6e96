"""Command line front end.

Reads a maze, optionally echoes it back as a matrix or a bordered drawing,
and reports the length of the shortest path from the top-left to the
bottom-right corner.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from .config import Config
from .errors import MazeError
from .logging_utils import log_deterministic, log_error, log_info, log_success
from .maze.render import format_bordered, format_matrix
from .maze.solver import NO_PATH, solve_report
from .reader import load_maze


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mopsolver",
        description="Find the shortest path through a maze of 0 (open) and 1 (wall) cells.",
    )
    parser.add_argument("-b", dest="bordered", action="store_true", help="Add borders and pretty-print")
    parser.add_argument("-s", dest="steps", action="store_true", help="Add shortest solution step total")
    parser.add_argument("-m", dest="matrix", action="store_true", help="Print matrix after reading")
    parser.add_argument("--json", action="store_true", help="Print the solve report as JSON")
    parser.add_argument("-i", dest="infile", metavar="INFILE", help="Read maze from INFILE (default: stdin)")
    parser.add_argument(
        "-o",
        dest="outfile",
        metavar="OUTFILE",
        help="Append output to OUTFILE (default: stdout)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log parse and search details to stderr (same as LOG_LEVEL=DEBUG)",
    )
    return parser


def format_steps(steps: int) -> str:
    if steps == NO_PATH:
        return "No solution.\n"
    return f"Solution in {steps} steps.\n"


def run(args: argparse.Namespace, source: TextIO, sink: TextIO) -> None:
    """Process one maze from ``source`` and write the requested views to ``sink``."""
    debug = args.debug or Config.is_debug()

    grid = load_maze(source)
    if debug:
        log_deterministic(f"Parsed {grid.rows}x{grid.cols} maze")

    if args.matrix:
        sink.write(format_matrix(grid))
    if args.bordered:
        sink.write(format_bordered(grid))

    if args.steps or args.json:
        report = solve_report(grid)
        if debug:
            log_deterministic(f"Breadth-first search finished: steps={report.steps}")
            log_success(format_steps(report.steps).strip())
        if args.steps:
            sink.write(format_steps(report.steps))
        if args.json:
            sink.write(report.model_dump_json() + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        Config.validate()
    except ValueError as exc:
        log_error(f"Invalid configuration: {exc}")
        return 1

    if args.debug or Config.is_debug():
        log_info(Config.display())

    source: TextIO = sys.stdin
    sink: TextIO = sys.stdout
    try:
        if args.infile:
            source = open(args.infile, "r", encoding="utf-8", errors="replace")
        if args.outfile:
            sink = open(args.outfile, "a", encoding="utf-8")
    except OSError as exc:
        log_error(f"Error opening file: {exc}")
        if source is not sys.stdin:
            source.close()
        return 1

    try:
        run(args, source, sink)
    except MazeError as exc:
        log_error(f"{type(exc).__name__}: {exc}")
        return 1
    finally:
        if source is not sys.stdin:
            source.close()
        if sink is not sys.stdout:
            sink.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
