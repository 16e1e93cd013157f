"""Git-related exception classes.

Contains all exception classes for Git operations:
- RepositoryError: Base exception for git-related errors
- NotARepositoryError: Raised when not inside a git working tree
- NoStagedChangesError: Raised when there are no staged changes
- CommitError: Raised when git refuses to create the commit
"""


class RepositoryError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotARepositoryError(RepositoryError):
    """Raised when the current directory is not inside a git repository."""

    pass


class NoStagedChangesError(RepositoryError):
    """Raised when there are no staged changes."""

    pass


class CommitError(RepositoryError):
    """Raised when committing the staged changes fails."""

    pass
