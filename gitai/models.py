"""Data models for gitai.

Contains:
- FileStatus: Status of a staged file
- FileChange: One staged file with its line counts and diff text
- DiffSummary: All staged changes with aggregate counts and the raw diff
- PromptContext: Everything the prompt builder needs for one generation attempt
- CommitMessage: Pydantic model for a structured commit message
- GeneratedCommit: A CommitMessage plus its heuristic confidence score
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from gitai.styles import CommitStyle

# Default number of raw diff characters embedded in the prompt
DEFAULT_PROMPT_DIFF_CHARS = 3000


class FileStatus(Enum):
    """Status of a staged file."""

    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"


@dataclass(frozen=True)
class FileChange:
    """A single staged file.

    Attributes:
        path: Path of the file (the new path for renames and copies).
        status: How the file changed.
        insertions: Number of added lines (0 for binary files).
        deletions: Number of removed lines (0 for binary files).
        diff: The unified diff text for this file only.
        old_path: Original path for renamed or copied files.
    """

    path: str
    status: FileStatus = FileStatus.MODIFIED
    insertions: int = 0
    deletions: int = 0
    diff: str = ""
    old_path: Optional[str] = None

    def __post_init__(self):
        if self.insertions < 0 or self.deletions < 0:
            raise ValueError("insertions and deletions must be non-negative")


@dataclass(frozen=True)
class DiffSummary:
    """The staged changes of a repository.

    The aggregate counts always equal the sums over ``files``; build
    instances with ``from_files`` to keep that true.
    """

    files: tuple[FileChange, ...] = ()
    insertions: int = 0
    deletions: int = 0
    files_changed: int = 0
    raw: str = ""

    @classmethod
    def from_files(cls, files: list[FileChange], raw: str) -> "DiffSummary":
        """Build a DiffSummary, computing the aggregate counts from the files.

        Args:
            files: Staged files in display order.
            raw: The raw unified diff text.

        Returns:
            A DiffSummary whose totals match the files.
        """
        files = tuple(files)
        return cls(
            files=files,
            insertions=sum(f.insertions for f in files),
            deletions=sum(f.deletions for f in files),
            files_changed=len(files),
            raw=raw,
        )


@dataclass(frozen=True)
class PromptContext:
    """Input for a single commit message generation attempt."""

    diff: DiffSummary
    style: CommitStyle = CommitStyle.CONVENTIONAL
    repo_name: Optional[str] = None
    branch: Optional[str] = None
    previous_commits: tuple[str, ...] = field(default_factory=tuple)
    max_diff_chars: int = DEFAULT_PROMPT_DIFF_CHARS


class CommitMessage(BaseModel):
    """Pydantic model for a structured commit message.

    Attributes:
        title: The first line of the commit message.
        body: Optional body text following the title.
        type: Conventional commit type (feat, fix, ...), conventional style only.
        scope: Conventional commit scope, conventional style only.
        breaking: Whether the header carried a breaking-change marker (!).
        footer: Optional footer lines (BREAKING CHANGE: ..., Refs: ...).
    """

    model_config = {"frozen": True}

    title: str
    body: Optional[str] = None
    type: Optional[str] = None
    scope: Optional[str] = None
    breaking: bool = False
    footer: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Ensure title is not empty."""
        if not v or not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()

    @field_validator("body", "footer")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Normalize blank optional sections to None."""
        if v is None or not v.strip():
            return None
        return v.strip()


class GeneratedCommit(BaseModel):
    """A generated commit message with its confidence score."""

    model_config = {"frozen": True}

    message: CommitMessage
    confidence: float = Field(ge=0.0, le=1.0)
