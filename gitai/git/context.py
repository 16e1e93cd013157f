"""Repository context collection.

Contains:
- RepositoryContext: Branch, repository name and recent commit subjects
- collect_repository_context: Fetch all three concurrently with safe defaults
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional

from gitai.git.branch import get_current_branch, get_recent_commits, get_repo_name

DEFAULT_BRANCH = "main"


@dataclass
class RepositoryContext:
    """Optional context included in the prompt."""

    branch: str = DEFAULT_BRANCH
    repo_name: Optional[str] = None
    recent_commits: list[str] = field(default_factory=list)


def _result_or_default(future, default):
    try:
        return future.result()
    except Exception:
        return default


def collect_repository_context(commit_count: int = 3) -> RepositoryContext:
    """Collect branch, repository name and recent commits.

    The three lookups run concurrently. A failing lookup falls back to its
    default instead of aborting the whole collection.

    Args:
        commit_count: Number of recent commit subjects to fetch.

    Returns:
        The collected RepositoryContext.
    """
    with ThreadPoolExecutor(max_workers=3) as executor:
        branch = executor.submit(get_current_branch)
        repo_name = executor.submit(get_repo_name)
        recent_commits = executor.submit(get_recent_commits, commit_count)

        return RepositoryContext(
            branch=_result_or_default(branch, DEFAULT_BRANCH),
            repo_name=_result_or_default(repo_name, None),
            recent_commits=_result_or_default(recent_commits, []),
        )
