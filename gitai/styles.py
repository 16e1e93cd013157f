"""Commit style profiles for gitai.

Contains:
- CommitStyle: Available commit message styles
- CONVENTIONAL_TYPES: The closed set of Conventional Commits type tags
- STYLE_DESCRIPTIONS: Descriptions for each style (for help/display)
- resolve_style: Map a user-supplied value to a CommitStyle
"""

from enum import Enum


class CommitStyle(Enum):
    """Available commit message styles."""

    CONVENTIONAL = "conventional"
    STANDARD = "standard"
    DETAILED = "detailed"


# Valid conventional commit types
CONVENTIONAL_TYPES = [
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "test",
    "chore",
    "perf",
    "ci",
    "build",
    "revert",
]


STYLE_DESCRIPTIONS = {
    CommitStyle.CONVENTIONAL: {
        "name": "conventional",
        "description": "Conventional Commits format (type(scope): description)",
        "example": "feat(auth): add OAuth2 login support",
    },
    CommitStyle.STANDARD: {
        "name": "standard",
        "description": "Single concise title in imperative mood",
        "example": "Add OAuth2 login support",
    },
    CommitStyle.DETAILED: {
        "name": "detailed",
        "description": "Title followed by an explanatory body with bullet points",
        "example": "Add OAuth2 login support\n\n- Add provider callback endpoint\n- Store refresh tokens",
    },
}


def resolve_style(style: "CommitStyle | str | None") -> CommitStyle:
    """Resolve a style value to a CommitStyle.

    Unknown or missing values fall back to the standard style.

    Args:
        style: A CommitStyle, its string value, or None.

    Returns:
        The matching CommitStyle.
    """
    if isinstance(style, CommitStyle):
        return style
    if not style:
        return CommitStyle.STANDARD
    try:
        return CommitStyle(style.strip().lower())
    except ValueError:
        return CommitStyle.STANDARD
