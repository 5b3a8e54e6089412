"""
Line change annotations from git.

Computes, for a single file, which lines of the working copy were added,
removed or modified relative to the index. Repository lookup failures are
not errors: the file is then simply shown without annotations.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from batview.models.changes import Hunk, LineChange, LineChanges
from batview.vcs.diff_parser import DiffParser, DiffParserError

if TYPE_CHECKING:
    from git import Repo

logger = logging.getLogger(__name__)


def _mark_section(
    line_changes: LineChanges,
    start: int,
    end: int,
    change: LineChange,
) -> None:
    for line in range(start, end + 1):
        line_changes[line] = change


def classify_hunks(hunks: Iterable[Hunk]) -> LineChanges:
    """
    Classify the lines of the working copy touched by a sequence of hunks.

    Hunks are applied in order, so if two hunks mark the same line the
    later one wins.

    Args:
        hunks: Zero-context hunks in the order the diff lists them.

    Returns:
        Mapping of 1-based line number to its change.
    """
    line_changes: LineChanges = {}

    for hunk in hunks:
        if hunk.is_addition:
            _mark_section(line_changes, hunk.new_start, hunk.new_end, LineChange.ADDED)
        elif hunk.is_deletion:
            if hunk.new_start <= 0:
                # Deleted before the first line; there is no line 0 to mark
                _mark_section(line_changes, 1, 1, LineChange.REMOVED_ABOVE)
            else:
                _mark_section(
                    line_changes, hunk.new_start, hunk.new_start, LineChange.REMOVED_BELOW
                )
        else:
            _mark_section(line_changes, hunk.new_start, hunk.new_end, LineChange.MODIFIED)

    return line_changes


def _open_repository() -> Optional["Repo"]:
    """Find the repository containing the working directory, honouring GIT_DIR."""
    # GitPython checks for the git executable on import
    try:
        from git import Repo
        from git.exc import InvalidGitRepositoryError, NoSuchPathError
    except ImportError as e:
        logger.debug("git is not available: %s", e)
        return None

    try:
        return Repo(search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        logger.debug("No git repository found: %s", e)
        return None


def _diff_hunks(repo: "Repo", path: Union[str, Path]) -> Optional[list[Hunk]]:
    """Run a zero-context index-to-worktree diff for one path."""
    from git.exc import GitCommandError, GitCommandNotFound

    if repo.working_tree_dir is None:
        logger.debug("Repository at %s is bare", repo.git_dir)
        return None

    root = Path(repo.working_tree_dir).resolve()
    try:
        relative = Path(path).resolve().relative_to(root)
    except ValueError:
        logger.debug("%s is outside of the working tree %s", path, root)
        return None

    try:
        diff_text = repo.git.diff(
            "--no-color",
            "--no-ext-diff",
            "--unified=0",
            "--",
            relative.as_posix(),
            strip_newline_in_stdout=False,
        )
        diff_files = DiffParser.parse_string(diff_text)
    except (GitCommandError, GitCommandNotFound, DiffParserError) as e:
        logger.debug("Could not compute diff for %s: %s", path, e)
        return None

    for diff_file in diff_files:
        logger.debug(
            "%s: %d hunks, +%d -%d",
            diff_file.path,
            len(diff_file.hunks),
            diff_file.added_lines,
            diff_file.removed_lines,
        )

    return DiffParser.hunks_for(diff_files)


def get_line_changes(
    path: Union[str, Path],
    repo: Optional["Repo"] = None,
) -> Optional[LineChanges]:
    """
    Get the line changes of a file relative to the git index.

    Args:
        path: File to annotate, as given by the user.
        repo: Repository to use. Discovered from the working directory if
            None, in which case it is closed again before returning.

    Returns:
        Mapping of line number to change, or None if git is unavailable,
        the file is not in a repository, or git reports no changes for it.
    """
    if repo is not None:
        hunks = _diff_hunks(repo, path)
    else:
        opened = _open_repository()
        if opened is None:
            return None
        with opened:
            hunks = _diff_hunks(opened, path)

    if not hunks:
        return None

    line_changes = classify_hunks(hunks)
    logger.debug("Line changes for %s: %s", path, line_changes)

    return line_changes
