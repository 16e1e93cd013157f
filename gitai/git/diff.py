"""Git diff utilities.

Contains:
- get_staged_diff: Collect the staged changes as a DiffSummary
- _should_exclude_file: Check if a file should be excluded based on patterns
- _parse_name_status / _parse_numstat: Parsers for NUL-separated git output
- _split_diff_by_file: Split a unified diff into per-file chunks
"""

import fnmatch
from pathlib import Path
from typing import Optional

from gitai.config import DEFAULT_EXCLUDE_FILES
from gitai.git.exceptions import NoStagedChangesError
from gitai.git.runner import _run_git_command
from gitai.models import DiffSummary, FileChange, FileStatus


_STATUS_CODES = {
    "A": FileStatus.ADDED,
    "M": FileStatus.MODIFIED,
    "D": FileStatus.DELETED,
    "R": FileStatus.RENAMED,
    "C": FileStatus.COPIED,
}


def _should_exclude_file(filename: str, patterns: list[str]) -> bool:
    """Check if a file should be excluded based on patterns.

    Supports glob patterns like *.lock, build/*, etc.

    Args:
        filename: The file path to check.
        patterns: List of patterns to match against.

    Returns:
        True if the file should be excluded.
    """
    for pattern in patterns:
        if filename == pattern:
            return True
        if fnmatch.fnmatch(filename, pattern):
            return True
        # Patterns without a directory also match the basename
        if fnmatch.fnmatch(Path(filename).name, pattern):
            return True
    return False


def _parse_name_status(output: str) -> list[tuple[FileStatus, str, Optional[str]]]:
    """Parse ``git diff --name-status -z`` output.

    Args:
        output: NUL-separated name-status output.

    Returns:
        List of (status, path, old_path) tuples in git's order.
    """
    tokens = output.split("\0")
    entries = []
    i = 0
    while i < len(tokens):
        code = tokens[i].strip()
        if not code:
            i += 1
            continue
        status = _STATUS_CODES.get(code[0], FileStatus.MODIFIED)
        if status in (FileStatus.RENAMED, FileStatus.COPIED):
            old_path, path = tokens[i + 1], tokens[i + 2]
            entries.append((status, path, old_path))
            i += 3
        else:
            entries.append((status, tokens[i + 1], None))
            i += 2
    return entries


def _parse_numstat(output: str) -> dict[str, tuple[int, int]]:
    """Parse ``git diff --numstat -z`` output.

    Binary files report "-" for both counts and are treated as zero.

    Args:
        output: NUL-separated numstat output.

    Returns:
        Mapping of (new) path to (insertions, deletions).
    """
    tokens = output.split("\0")
    stats = {}
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not token.strip():
            i += 1
            continue
        added, deleted, path = token.split("\t", 2)
        if path:
            i += 1
        else:
            # Renames and copies: "<ins>\t<del>\t\0<old>\0<new>\0"
            path = tokens[i + 2]
            i += 3
        stats[path] = (
            int(added) if added.isdigit() else 0,
            int(deleted) if deleted.isdigit() else 0,
        )
    return stats


def _split_diff_by_file(raw: str) -> list[str]:
    """Split a unified diff into per-file chunks, in the order git emits them.

    Headers are not parsed, since git quotes and escapes paths holding
    non-ASCII or special characters.
    """
    chunks = []
    lines = None
    for line in raw.split("\n"):
        if line.startswith("diff --git "):
            if lines is not None:
                chunks.append("\n".join(lines))
            lines = [line]
        elif lines is not None:
            lines.append(line)
    if lines is not None:
        chunks.append("\n".join(lines))
    return chunks


def get_staged_diff(
    max_chars: int = 50000,
    exclude_patterns: Optional[list[str]] = None,
) -> DiffSummary:
    """Collect the staged changes, excluding ignored files.

    Files matching ``exclude_patterns`` are left out of the summary and of
    the raw diff, because they are typically generated and only inflate the
    prompt.

    Args:
        max_chars: Maximum characters kept from the raw diff.
        exclude_patterns: Glob patterns of files to leave out. Defaults to
            DEFAULT_EXCLUDE_FILES from the config.

    Returns:
        The staged changes as a DiffSummary.

    Raises:
        NoStagedChangesError: If nothing (or only excluded files) is staged.
        RepositoryError: If a git command fails.
    """
    if exclude_patterns is None:
        exclude_patterns = DEFAULT_EXCLUDE_FILES

    entries = _parse_name_status(
        _run_git_command(["diff", "--staged", "-M", "--name-status", "-z"])
    )
    if not entries:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes with \"git add\" first."
        )

    entries = [e for e in entries if not _should_exclude_file(e[1], exclude_patterns)]
    if not entries:
        raise NoStagedChangesError(
            "Only excluded files are staged, there are no changes to describe. "
            "Adjust exclude_files in the gitai config to include them."
        )

    pathspec = []
    for _, path, old_path in entries:
        if old_path:
            pathspec.append(old_path)
        pathspec.append(path)

    stats = _parse_numstat(
        _run_git_command(["diff", "--staged", "-M", "--numstat", "-z", "--"] + pathspec)
    )
    raw = _run_git_command(["diff", "--staged", "-M", "--"] + pathspec)
    # Name-status and the patch list files in the same order for the same -M
    chunks = _split_diff_by_file(raw)

    files = []
    for index, (status, path, old_path) in enumerate(entries):
        insertions, deletions = stats.get(path, (0, 0))
        files.append(
            FileChange(
                path=path,
                status=status,
                insertions=insertions,
                deletions=deletions,
                diff=chunks[index] if index < len(chunks) else "",
                old_path=old_path,
            )
        )

    if len(raw) > max_chars:
        raw = raw[:max_chars] + "\n...[truncated]\n"

    return DiffSummary.from_files(files, raw)
