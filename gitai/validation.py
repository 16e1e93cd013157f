"""Commit message validation.

Contains:
- validate_conventional: Check Conventional Commits format
- validate_standard: Check title length and trailing punctuation
- validate_commit_message: Dispatch by style
"""

import re

from gitai.styles import CONVENTIONAL_TYPES, CommitStyle, resolve_style

MAX_TITLE_LENGTH = 50

_CONVENTIONAL_PATTERN = re.compile(
    rf"^({'|'.join(CONVENTIONAL_TYPES)})(\(.+\))?!?:\s.+"
)


def validate_conventional(message: str) -> bool:
    """Check that a message starts with a recognized conventional header."""
    return _CONVENTIONAL_PATTERN.match(message) is not None


def validate_standard(message: str) -> bool:
    """Check that the title is short and does not end with a period."""
    title = message.split("\n")[0]
    return len(title) <= MAX_TITLE_LENGTH and not title.endswith(".")


def validate_commit_message(message: str, style: CommitStyle | str) -> bool:
    """Validate a commit message against the rules of a style.

    Args:
        message: The full commit message text.
        style: The commit style.

    Returns:
        True if the message satisfies the style, False otherwise.
    """
    if not message.strip():
        return False

    if resolve_style(style) == CommitStyle.CONVENTIONAL:
        return validate_conventional(message)
    return validate_standard(message)
