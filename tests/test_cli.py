"""Tests for the mopsolver command line front end."""

from __future__ import annotations

import contextlib
import io
import json

import pytest

from mopsolver import cli
from mopsolver.config import Config
from mopsolver.errors import EmptyMaze
from mopsolver.reader import load_maze


MAZE = "0 0 0\n1 1 0\n0 0 0\n"


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("MOPSOLVER_NO_COLOR", "1")
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(Config, "WALL_CHAR", "#")
    monkeypatch.setattr(Config, "EMPTY_CHAR", ".")


def run_cli(argv: list[str], stdin_text: str, monkeypatch) -> tuple[int, str, str]:
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = cli.main(argv)
    return code, out.getvalue(), err.getvalue()


def test_steps_flag_prints_solution(monkeypatch):
    code, out, _ = run_cli(["-s"], MAZE, monkeypatch)
    assert code == 0
    assert out == "Solution in 5 steps.\n"


def test_steps_flag_reports_no_solution(monkeypatch):
    code, out, _ = run_cli(["-s"], "1 1 1\n0 0 0\n0 0 0\n", monkeypatch)
    assert code == 0
    assert out == "No solution.\n"


def test_matrix_and_bordered_output(monkeypatch):
    code, out, _ = run_cli(["-m", "-b"], "0 0 0 \n1 1 0 \n0 0 0 \n", monkeypatch)
    assert code == 0
    assert out == (
        "0 0 0\n"
        "1 1 0\n"
        "0 0 0\n"
        "+-------+\n"
        "  . . . |\n"
        "| # # . |\n"
        "| . . .\n"
        "+-------+\n"
    )


def test_json_report(monkeypatch):
    code, out, _ = run_cli(["--json"], MAZE, monkeypatch)
    assert code == 0
    assert json.loads(out) == {"rows": 3, "cols": 3, "steps": 5, "solvable": True}


def test_empty_input_is_reported_as_error(monkeypatch):
    code, out, err = run_cli(["-s"], "", monkeypatch)
    assert code == 1
    assert out == ""
    assert "[!] EmptyMaze" in err


def test_malformed_input_is_reported_as_error(monkeypatch):
    code, _, err = run_cli(["-s"], "0 0 0\n1 1\n", monkeypatch)
    assert code == 1
    assert "[!] MalformedMaze" in err


def test_files_in_and_out(tmp_path, monkeypatch):
    infile = tmp_path / "maze.txt"
    infile.write_text(MAZE)
    outfile = tmp_path / "out.txt"
    outfile.write_text("previous run\n")

    code, out, _ = run_cli(["-s", "-i", str(infile), "-o", str(outfile)], "", monkeypatch)

    assert code == 0
    assert out == ""
    # Output is appended, never truncated.
    assert outfile.read_text() == "previous run\nSolution in 5 steps.\n"


def test_missing_input_file(tmp_path, monkeypatch):
    code, _, err = run_cli(["-s", "-i", str(tmp_path / "missing.txt")], "", monkeypatch)
    assert code == 1
    assert "Error opening file" in err


def test_debug_logs_to_stderr_only(monkeypatch):
    code, out, err = run_cli(["-s", "--debug"], MAZE, monkeypatch)
    assert code == 0
    assert out == "Solution in 5 steps.\n"
    assert "[•] Parsed 3x3 maze" in err
    assert "steps=5" in err
    assert "[✓] Solution in 5 steps." in err


def test_invalid_config_is_rejected(monkeypatch):
    monkeypatch.setattr(Config, "WALL_CHAR", ".")
    code, _, err = run_cli(["-s"], MAZE, monkeypatch)
    assert code == 1
    assert "Invalid configuration" in err


def test_load_maze_rejects_blank_stream():
    with pytest.raises(EmptyMaze):
        load_maze(io.StringIO("  \n"))


def test_load_maze_accepts_crlf():
    grid = load_maze(io.StringIO("0 1\r\n0 0\r\n"))
    assert grid.to_rows() == [[False, True], [False, False]]


def test_bordered_output_file_accepts_unicode_glyphs(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "WALL_CHAR", "█")
    outfile = tmp_path / "out.txt"

    code, _, _ = run_cli(["-b", "-o", str(outfile)], "0 1\n0 0\n", monkeypatch)

    assert code == 0
    assert outfile.read_text(encoding="utf-8") == "+-----+\n  . █ |\n| . .\n+-----+\n"
