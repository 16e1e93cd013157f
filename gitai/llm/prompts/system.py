"""System prompts for LLM commit message generation.

A shared base prompt identifies the task; each style appends its own rules.
"""

from gitai.styles import CommitStyle, resolve_style

BASE_SYSTEM_PROMPT = """You are an expert software developer who writes clear, descriptive commit messages.
Analyze the provided git diff and generate an appropriate commit message."""

CONVENTIONAL_RULES = """Follow the Conventional Commits specification:
- Format: <type>[optional scope]: <description>
- Types: feat, fix, docs, style, refactor, test, chore, perf, ci, build, revert
- Use lowercase for everything
- Add body and footer if breaking changes or additional context needed

Examples:
- feat(auth): add OAuth2 login support
- fix: resolve memory leak in data processing
- docs: update API documentation for v2.0"""

DETAILED_RULES = """Create detailed commit messages with:
- Detailed body explaining what changed and why
- Bullet points for multiple changes
- Technical details when relevant"""

STANDARD_RULES = """Create standard commit messages:
- Clear, concise title describing the change
- Present tense, imperative mood
- No period at the end"""


def get_system_prompt(style: CommitStyle | str) -> str:
    """Get the system prompt for a commit style.

    Args:
        style: The commit style. Unknown styles use the standard rules.

    Returns:
        The system prompt string.
    """
    style = resolve_style(style)

    if style == CommitStyle.CONVENTIONAL:
        rules = CONVENTIONAL_RULES
    elif style == CommitStyle.DETAILED:
        rules = DETAILED_RULES
    else:  # STANDARD
        rules = STANDARD_RULES

    return f"{BASE_SYSTEM_PROMPT}\n\n{rules}"
