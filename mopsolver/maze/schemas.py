"""Pydantic schemas for maze snapshots.

These models mirror the frozen ``Grid`` dataclass but keep results
serializable for the ``--json`` output and for callers that store runs.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, model_validator


class MazeGridState(BaseModel):
    """Dense representation of a parsed maze."""

    rows: int = Field(..., ge=1)
    cols: int = Field(..., ge=1)
    cells: List[List[bool]] = Field(
        ...,
        description="Row-major wall map: cells[row][col] is True for a wall",
    )

    @model_validator(mode="after")
    def _check_shape(self) -> "MazeGridState":
        if len(self.cells) != self.rows:
            raise ValueError(f"expected {self.rows} rows, got {len(self.cells)}")
        for index, row in enumerate(self.cells):
            if len(row) != self.cols:
                raise ValueError(f"row {index} has {len(row)} cells, expected {self.cols}")
        return self


class SolveReport(BaseModel):
    """Outcome of one solver run."""

    rows: int
    cols: int
    steps: int = Field(
        ..., ge=0, description="Steps from top-left to bottom-right; 0 when unreachable",
    )
    solvable: bool
