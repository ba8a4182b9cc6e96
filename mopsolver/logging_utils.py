"""Logging utilities for mopsolver.

Provides color-coded status lines on stderr so that maze output written to
stdout stays machine-readable.
"""

import os
import sys
from enum import Enum
from typing import Optional, TextIO


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Deterministic steps (parse, search)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if MOPSOLVER_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("MOPSOLVER_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def _emit(message: str, color: Color, stream: Optional[TextIO]) -> None:
    print(colored(message, color), file=stream if stream is not None else sys.stderr)


def log_deterministic(message: str, stream: Optional[TextIO] = None) -> None:
    """Log a parse/search step (blue)."""
    _emit(f"{EMOJI_DETERMINISTIC} {message}", Color.BLUE, stream)


def log_error(message: str, stream: Optional[TextIO] = None) -> None:
    """Log an error (red)."""
    _emit(f"{EMOJI_ERROR} {message}", Color.RED, stream)


def log_success(message: str, stream: Optional[TextIO] = None) -> None:
    """Log a success (green)."""
    _emit(f"{EMOJI_SUCCESS} {message}", Color.GREEN, stream)


def log_info(message: str, stream: Optional[TextIO] = None) -> None:
    """Log metadata/info (cyan)."""
    _emit(f"{EMOJI_INFO} {message}", Color.CYAN, stream)


# Markers for message types (color-blind accessible)
EMOJI_DETERMINISTIC = "[•]"
EMOJI_ERROR = "[!]"
EMOJI_SUCCESS = "[✓]"
EMOJI_INFO = "[i]"
