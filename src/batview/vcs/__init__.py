"""
Version control package for batview.

This package contains modules for:
- Diff parsing (using unidiff)
- Per-line change annotations (using GitPython)
"""

from batview.vcs.annotator import classify_hunks, get_line_changes
from batview.vcs.diff_parser import DiffParser, DiffParserError

__all__ = [
    "DiffParser",
    "DiffParserError",
    "classify_hunks",
    "get_line_changes",
]
