"""Git backend for gitai.

This package provides the version-control operations the CLI needs:
- exceptions: RepositoryError, NotARepositoryError, NoStagedChangesError, CommitError
- runner: _run_git_command, is_repository, get_repo_root
- status: has_staged_changes, _get_staged_files_list
- diff: get_staged_diff, _should_exclude_file
- branch: get_current_branch, get_repo_name, get_recent_commits
- context: RepositoryContext, collect_repository_context
- commits: commit
"""

# Exceptions
from gitai.git.exceptions import (
    CommitError,
    NoStagedChangesError,
    NotARepositoryError,
    RepositoryError,
)

# Runner utilities
from gitai.git.runner import (
    _run_git_command,
    get_repo_root,
    is_repository,
)

# Status utilities
from gitai.git.status import (
    _get_staged_files_list,
    has_staged_changes,
)

# Diff utilities
from gitai.git.diff import (
    _should_exclude_file,
    get_staged_diff,
)

# Branch and history utilities
from gitai.git.branch import (
    get_current_branch,
    get_recent_commits,
    get_repo_name,
)

# Context collection
from gitai.git.context import (
    RepositoryContext,
    collect_repository_context,
)

# Commit
from gitai.git.commits import commit


__all__ = [
    # Exceptions
    "RepositoryError",
    "NotARepositoryError",
    "NoStagedChangesError",
    "CommitError",
    # Runner
    "_run_git_command",
    "is_repository",
    "get_repo_root",
    # Status
    "has_staged_changes",
    "_get_staged_files_list",
    # Diff
    "get_staged_diff",
    "_should_exclude_file",
    # Branch
    "get_current_branch",
    "get_repo_name",
    "get_recent_commits",
    # Context
    "RepositoryContext",
    "collect_repository_context",
    # Commit
    "commit",
]
