"""
Diff parser using the unidiff library.

This module wraps the unidiff library to turn the unified diff text that
git produces into Hunk models.
"""

from pathlib import Path

from unidiff import PatchSet, PatchedFile
from unidiff.errors import UnidiffParseError

from batview.models.changes import Hunk
from batview.models.diff import DiffFile


class DiffParserError(Exception):
    """Error during diff parsing."""
    pass


class DiffParser:
    """
    Parse unified diff text using the unidiff library.

    Zero-context diffs (``git diff -U0``) are supported; hunks then only
    describe the changed lines themselves.
    """

    @staticmethod
    def _parse_hunk(hunk: "unidiff.Hunk") -> Hunk:  # type: ignore[name-defined]
        """
        Parse a unidiff Hunk into our Hunk model.

        Args:
            hunk: A Hunk from unidiff.

        Returns:
            Hunk with the line ranges of both sides.
        """
        return Hunk(
            old_start=hunk.source_start,
            old_lines=hunk.source_length,
            new_start=hunk.target_start,
            new_lines=hunk.target_length,
        )

    @staticmethod
    def _parse_patched_file(patched_file: PatchedFile) -> DiffFile:
        """
        Parse a PatchedFile into our DiffFile model.

        Args:
            patched_file: A PatchedFile from unidiff.

        Returns:
            DiffFile with all hunk information.
        """
        return DiffFile(
            path=Path(patched_file.path),
            hunks=[DiffParser._parse_hunk(hunk) for hunk in patched_file],
            added_lines=patched_file.added,
            removed_lines=patched_file.removed,
        )

    @classmethod
    def parse_string(cls, diff_content: str) -> list[DiffFile]:
        """
        Parse diff content from a string.

        Args:
            diff_content: The diff content as a string.

        Returns:
            List of DiffFile objects, in diff order.

        Raises:
            DiffParserError: If parsing fails.
        """
        try:
            patch_set = PatchSet(diff_content)
        except UnidiffParseError as e:
            raise DiffParserError(f"Failed to parse diff content: {e}") from e
        return [cls._parse_patched_file(f) for f in patch_set]

    @classmethod
    def hunks_for(cls, diff_files: list[DiffFile]) -> list[Hunk]:
        """
        Flatten the hunks of several diff files, keeping diff order.

        Args:
            diff_files: List of DiffFile objects.

        Returns:
            All hunks in the order the diff lists them.
        """
        hunks: list[Hunk] = []
        for diff_file in diff_files:
            hunks.extend(diff_file.hunks)
        return hunks
