"""Commit creation.

Contains:
- commit: Commit the staged changes with a message
"""

from gitai.git.exceptions import CommitError, RepositoryError
from gitai.git.runner import _run_git_command


def commit(message: str) -> str:
    """Commit the staged changes with the given message.

    The message is passed on stdin so that multi-line messages and shell
    metacharacters need no escaping.

    Args:
        message: The full commit message.

    Returns:
        The output of git commit.

    Raises:
        CommitError: If the message is blank or git rejects the commit.
    """
    if not message.strip():
        raise CommitError("Refusing to commit with an empty message.")

    try:
        return _run_git_command(["commit", "-F", "-"], input_text=message)
    except RepositoryError as e:
        raise CommitError(f"Failed to commit: {e}") from e
