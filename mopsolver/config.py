"""
mopsolver Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Glyphs used by the bordered renderer
    WALL_CHAR: str = os.getenv("MOPSOLVER_WALL_CHAR", "#")
    EMPTY_CHAR: str = os.getenv("MOPSOLVER_EMPTY_CHAR", ".")

    # Logging (DEBUG also reports parse and solve details)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        for name in ("WALL_CHAR", "EMPTY_CHAR"):
            value = getattr(cls, name)
            if len(value) != 1 or value.isspace():
                raise ValueError(
                    f"MOPSOLVER_{name} must be a single visible character, got {value!r}"
                )

        if cls.WALL_CHAR == cls.EMPTY_CHAR:
            raise ValueError(
                "MOPSOLVER_WALL_CHAR and MOPSOLVER_EMPTY_CHAR must differ "
                f"(both are {cls.WALL_CHAR!r})"
            )

    @classmethod
    def is_debug(cls) -> bool:
        return cls.LOG_LEVEL.upper() == "DEBUG"

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "mopsolver Configuration:",
            f"  Wall glyph: {cls.WALL_CHAR}",
            f"  Empty glyph: {cls.EMPTY_CHAR}",
            f"  Log level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
