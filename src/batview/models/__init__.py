"""
Data models for batview.

This package contains Pydantic models for diff hunks, parsed diff files
and per-line change classifications.
"""

from batview.models.changes import (
    Hunk,
    LineChange,
    LineChanges,
)
from batview.models.diff import DiffFile

__all__ = [
    # Change models
    "Hunk",
    "LineChange",
    "LineChanges",
    # Diff models
    "DiffFile",
]
