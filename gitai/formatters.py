"""Commit message formatting and rendering."""

import re

from gitai.llm.parsing import parse_conventional_header
from gitai.models import CommitMessage
from gitai.styles import CommitStyle, resolve_style

# Matches an existing "type(scope)!: " header at the start of a title
_HEADER_PATTERN = re.compile(r"^\w+(?:\([^)]+\))?!?:\s*(.+)$")


def strip_type_prefix(title: str) -> str:
    """Strip a conventional commit header from a title if present.

    Handles formats like:
    - "feat: add feature" -> "add feature"
    - "feat(scope)!: add feature" -> "add feature"

    Args:
        title: The title that may start with a header.

    Returns:
        Title without the header, or the original title if there is none.
    """
    title = title.strip()
    match = _HEADER_PATTERN.match(title)
    if match:
        return match.group(1).strip()
    return title


def render_conventional(message: CommitMessage) -> str:
    """Render a commit message in Conventional Commits style.

    Format:
        <type>(<scope>)!: <title>

        <body>

        <footer>
    """
    title = message.title
    header = ""
    if message.type:
        header = message.type
        if message.scope:
            header += f"({message.scope})"
        if message.breaking:
            header += "!"
        header += ": "
        # Parsed titles still carry the same header; other prefixes are content
        if parse_conventional_header(title.strip()) == (message.type, message.scope, message.breaking):
            title = strip_type_prefix(title)

    parts = [header + title]
    if message.body:
        parts.append(message.body)
    if message.footer:
        parts.append(message.footer)
    return "\n\n".join(parts)


def render_detailed(message: CommitMessage) -> str:
    """Render a commit message as title plus body."""
    if message.body:
        return f"{message.title}\n\n{message.body}"
    return message.title


def render_standard(message: CommitMessage) -> str:
    """Render a commit message as its title alone."""
    return message.title


def format_commit_message(message: CommitMessage, style: CommitStyle | str) -> str:
    """Format a commit message according to the given style.

    Args:
        message: The structured commit message.
        style: The commit style. Unknown styles render as standard.

    Returns:
        The commit message text.
    """
    style = resolve_style(style)

    if style == CommitStyle.CONVENTIONAL:
        return render_conventional(message)
    elif style == CommitStyle.DETAILED:
        return render_detailed(message)
    else:  # STANDARD
        return render_standard(message)
