"""Git branch, remote and commit history utilities.

Contains:
- get_current_branch: Get the current branch name
- get_repo_name: Derive the repository name from the origin remote
- get_recent_commits: Get the last n commit subjects
"""

import re
from typing import Optional

from gitai.git.exceptions import RepositoryError
from gitai.git.runner import _run_git_command

# Repository name at the end of a remote URL, e.g. ".../gitai.git"
_REPO_NAME_PATTERN = re.compile(r"/([^/]+)\.git$")


def get_current_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or 'HEAD (detached)' in detached state.

    Raises:
        RepositoryError: If git fails.
    """
    branch = _run_git_command(["branch", "--show-current"])
    if not branch:
        return "HEAD (detached)"
    return branch


def get_repo_name() -> Optional[str]:
    """Get the repository name from the origin fetch URL.

    Returns:
        The repository name, or None if there is no origin remote or its URL
        does not end in "<name>.git".
    """
    try:
        url = _run_git_command(["remote", "get-url", "origin"])
    except RepositoryError:
        return None

    match = _REPO_NAME_PATTERN.search(url)
    if match:
        return match.group(1)
    return None


def get_recent_commits(count: int = 5) -> list[str]:
    """Get the subjects of the most recent commits, newest first.

    Args:
        count: Number of commits to retrieve.

    Returns:
        List of commit subject lines.
    """
    try:
        output = _run_git_command(["log", f"-n{count}", "--pretty=%s"])
        if not output:
            return []
        return output.split("\n")
    except RepositoryError:
        # No commits yet in the repo
        return []
