"""
Line change models.

Models describing how a line of the working copy differs from the index.
"""

from enum import Enum

from pydantic import BaseModel, Field


class LineChange(str, Enum):
    """Change classification of a single line in the working copy."""

    ADDED = "added"
    REMOVED_ABOVE = "removed_above"   # Lines were deleted before line 1
    REMOVED_BELOW = "removed_below"   # Lines were deleted right after this line
    MODIFIED = "modified"


# 1-based line number -> change. Missing keys are unchanged lines.
LineChanges = dict[int, LineChange]


class Hunk(BaseModel):
    """A contiguous block of changes between the index and the working copy."""

    old_start: int = Field(ge=0, description="Starting line in the index version")
    old_lines: int = Field(ge=0, description="Number of lines in the index version")
    new_start: int = Field(ge=0, description="Starting line in the working copy")
    new_lines: int = Field(ge=0, description="Number of lines in the working copy")

    class Config:
        frozen = True

    @property
    def new_end(self) -> int:
        """Last line (inclusive) covered in the working copy."""
        return self.new_start + self.new_lines - 1

    @property
    def is_addition(self) -> bool:
        """Check if this hunk only adds lines."""
        return self.old_lines == 0 and self.new_lines > 0

    @property
    def is_deletion(self) -> bool:
        """Check if this hunk only removes lines."""
        return self.new_lines == 0 and self.old_lines > 0
