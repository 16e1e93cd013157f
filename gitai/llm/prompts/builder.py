"""User prompt construction for commit message generation.

Contains:
- truncate_diff: Bound the raw diff at a line boundary
- build_user_prompt: Render a PromptContext as the user prompt
- build_prompt: Produce the (system prompt, user prompt) pair
"""

from gitai.llm.prompts.system import get_system_prompt
from gitai.models import DEFAULT_PROMPT_DIFF_CHARS, PromptContext
from gitai.styles import resolve_style

TRUNCATION_MARKER = "\n... (diff truncated)"

# Number of recent commit subjects shown to the model
MAX_PREVIOUS_COMMITS = 3


def truncate_diff(diff: str, max_length: int = DEFAULT_PROMPT_DIFF_CHARS) -> str:
    """Truncate a diff so it never ends with a partial line.

    Args:
        diff: The raw diff text.
        max_length: Maximum number of diff characters kept.

    Returns:
        The diff unchanged if it fits, otherwise the longest prefix of at
        most max_length characters ending at a line break, followed by
        TRUNCATION_MARKER.
    """
    if len(diff) <= max_length:
        return diff

    truncated = diff[:max_length]
    last_newline = truncated.rfind("\n")
    # No line break at all: keep nothing rather than a partial line
    kept = truncated[:last_newline] if last_newline != -1 else ""
    return kept + TRUNCATION_MARKER


def build_user_prompt(context: PromptContext) -> str:
    """Build the user prompt from a prompt context.

    Args:
        context: The diff, style and optional repository context.

    Returns:
        The formatted user prompt.
    """
    style = resolve_style(context.style).value
    diff = context.diff

    lines = [f"Analyze this git diff and generate a {style} commit message:", ""]

    if context.repo_name:
        lines.append(f"Repository: {context.repo_name}")
    if context.branch:
        lines.append(f"Branch: {context.branch}")

    lines.append("")
    lines.append(f"Files changed ({diff.files_changed}):")
    for file in diff.files:
        lines.append(
            f"- {file.status.value}: {file.path} (+{file.insertions}/-{file.deletions})"
        )

    previous_commits = list(context.previous_commits)[:MAX_PREVIOUS_COMMITS]
    if previous_commits:
        lines.append("")
        lines.append("Recent commits for context:")
        for subject in previous_commits:
            lines.append(f"- {subject}")

    lines.append("")
    lines.append("Git diff:")
    lines.append("```diff")
    lines.append(truncate_diff(diff.raw, context.max_diff_chars))
    lines.append("```")
    lines.append("")
    lines.append(
        f"Generate a {style} commit message. "
        "Respond with ONLY the commit message, no additional text."
    )

    return "\n".join(lines)


def build_prompt(context: PromptContext) -> tuple[str, str]:
    """Build the system and user prompts for a generation attempt.

    Args:
        context: The prompt context.

    Returns:
        A (system_prompt, user_prompt) tuple.
    """
    return get_system_prompt(context.style), build_user_prompt(context)
