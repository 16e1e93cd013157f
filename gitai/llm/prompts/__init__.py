"""LLM prompt construction for commit message generation.

This package contains:
- system: The shared base system prompt and the per-style rules
- builder: The user prompt (file summary, context, truncated diff)
"""

from gitai.llm.prompts.system import (
    BASE_SYSTEM_PROMPT,
    CONVENTIONAL_RULES,
    DETAILED_RULES,
    STANDARD_RULES,
    get_system_prompt,
)
from gitai.llm.prompts.builder import (
    MAX_PREVIOUS_COMMITS,
    TRUNCATION_MARKER,
    build_prompt,
    build_user_prompt,
    truncate_diff,
)


__all__ = [
    # System prompt
    "BASE_SYSTEM_PROMPT",
    "CONVENTIONAL_RULES",
    "DETAILED_RULES",
    "STANDARD_RULES",
    "get_system_prompt",
    # User prompt
    "MAX_PREVIOUS_COMMITS",
    "TRUNCATION_MARKER",
    "build_prompt",
    "build_user_prompt",
    "truncate_diff",
]
