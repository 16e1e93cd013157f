"""Git status utilities.

Contains:
- has_staged_changes: Check whether anything is staged
- _get_staged_files_list: Get list of staged file paths
"""

from gitai.git.exceptions import RepositoryError
from gitai.git.runner import _run_git_command


def _get_staged_files_list() -> list[str]:
    """Get list of staged file paths.

    Returns:
        List of staged file paths.
    """
    output = _run_git_command(["diff", "--staged", "--name-only"])
    if not output:
        return []
    return output.split("\n")


def has_staged_changes() -> bool:
    """Check whether the index holds any staged changes.

    Returns:
        True if at least one file is staged. Git failures count as
        nothing staged.
    """
    try:
        return bool(_get_staged_files_list())
    except RepositoryError:
        return False
