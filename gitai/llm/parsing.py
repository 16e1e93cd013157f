"""Parsing of raw LLM responses into commit messages.

Contains functions for interpreting free-form model output:
- clean_response: Strip markdown fences and stray backticks
- parse_conventional_header: Decompose "type(scope)!: description"
- calculate_confidence: Heuristic quality score for a title and body
- parse_response: Turn raw text into a GeneratedCommit
"""

import re
from typing import Optional

from gitai.llm.exceptions import EmptyResponseError
from gitai.models import CommitMessage, GeneratedCommit
from gitai.styles import CommitStyle, resolve_style

_CONVENTIONAL_HEADER = re.compile(r"^(\w+)(?:\(([^)]+)\))?(!)?:\s*(.+)$")

BASE_CONFIDENCE = 0.5


def clean_response(raw_response: str) -> str:
    """Remove markdown code fences and surrounding backticks.

    Args:
        raw_response: The raw text returned by the model.

    Returns:
        The cleaned text.
    """
    cleaned = raw_response.strip()

    # Remove a fenced block the model added despite instructions
    if cleaned.startswith("```"):
        newline = cleaned.find("\n")
        if newline != -1:
            # Drop the opening fence with its language tag (```diff, ```text)
            cleaned = cleaned[newline + 1:]
            if cleaned.endswith("\n```"):
                cleaned = cleaned[:-4]

    return cleaned.lstrip("`").rstrip("`")


def parse_conventional_header(title: str) -> tuple[Optional[str], Optional[str], bool]:
    """Extract type, scope and breaking flag from a conventional title.

    This is a best-effort parse: any leading word is accepted as the type.

    Args:
        title: The commit title.

    Returns:
        A (type, scope, breaking) tuple; (None, None, False) if the title does
        not look like a conventional header.
    """
    match = _CONVENTIONAL_HEADER.match(title)
    if not match:
        return None, None, False
    return match.group(1), match.group(2), match.group(3) is not None


def calculate_confidence(title: str, body: Optional[str] = None) -> float:
    """Score a commit message on simple stylistic signals.

    Args:
        title: The commit title.
        body: The optional commit body.

    Returns:
        A score between 0.5 and 1.0.
    """
    confidence = BASE_CONFIDENCE

    if 10 < len(title) <= 50:
        confidence += 0.2
    if re.match(r"^[a-z]", title):
        confidence += 0.1
    if not title.endswith("."):
        confidence += 0.1
    if ":" in title:
        confidence += 0.1

    if body and len(body) > 20:
        confidence += 0.1

    return min(confidence, 1.0)


def parse_response(raw_response: str, style: CommitStyle | str) -> GeneratedCommit:
    """Parse a raw model response into a structured commit message.

    Args:
        raw_response: The raw text returned by the model.
        style: The commit style the message was requested in.

    Returns:
        The parsed GeneratedCommit.

    Raises:
        EmptyResponseError: If no non-blank line remains after cleanup.
    """
    lines = [line for line in clean_response(raw_response).split("\n") if line.strip()]
    if not lines:
        raise EmptyResponseError("Empty response from AI")

    title = lines[0].strip()
    body = "\n".join(lines[1:]).strip() or None

    commit_type, scope, breaking = None, None, False
    if resolve_style(style) == CommitStyle.CONVENTIONAL:
        commit_type, scope, breaking = parse_conventional_header(title)

    message = CommitMessage(
        title=title,
        body=body,
        type=commit_type,
        scope=scope,
        breaking=breaking,
    )
    return GeneratedCommit(
        message=message,
        confidence=calculate_confidence(title, body),
    )
