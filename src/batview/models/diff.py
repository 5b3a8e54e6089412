"""
Diff data models.

Models representing a parsed unified diff.
"""

from pathlib import Path

from pydantic import BaseModel, Field

from batview.models.changes import Hunk


class DiffFile(BaseModel):
    """Represents a single file in a diff."""

    path: Path = Field(description="Path to the file, relative to the repository root")
    hunks: list[Hunk] = Field(
        default_factory=list,
        description="Hunks in this file, in diff order",
    )
    added_lines: int = Field(default=0, description="Total lines added")
    removed_lines: int = Field(default=0, description="Total lines removed")

    class Config:
        frozen = True
