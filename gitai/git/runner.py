"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- is_repository: Check whether the working directory is inside a git repo
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path
from typing import Optional

from gitai.git.exceptions import NotARepositoryError, RepositoryError


def _run_git_command(args: list[str], input_text: Optional[str] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        input_text: Optional text passed to git on stdin.

    Returns:
        The stdout of the git command.

    Raises:
        RepositoryError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            input=input_text,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise RepositoryError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise RepositoryError("Git is not installed or not in PATH.")


def is_repository() -> bool:
    """Check whether the current directory is inside a git working tree.

    Returns:
        True if inside a work tree, False otherwise.
    """
    try:
        return _run_git_command(["rev-parse", "--is-inside-work-tree"]) == "true"
    except RepositoryError:
        return False


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        NotARepositoryError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except RepositoryError:
        raise NotARepositoryError(
            "Not in a git repository. Initialize with \"git init\" first."
        )
