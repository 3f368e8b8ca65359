"""Prompt assembly."""

from typing import Optional

from git_commit_ai.generator.prompts.commit import (
    COMMIT_PROMPT_TEMPLATE,
    CONTEXT_SECTION_TEMPLATE,
)


def build_context_section(user_context: Optional[str]) -> str:
    """Render the user context block, or an empty string when there is none."""
    if not user_context or not user_context.strip():
        return ""
    return CONTEXT_SECTION_TEMPLATE.format(user_context=user_context.strip())


def build_prompt(diff_text: str, user_context: Optional[str] = None) -> str:
    """Build the generator prompt.

    The diff is appended after the formatted template rather than passed
    through str.format, so braces or placeholders inside it stay literal.

    Args:
        diff_text: The staged diff (already size-limited by the caller).
        user_context: Optional free-form description from the user.

    Returns:
        The full prompt text.
    """
    header = COMMIT_PROMPT_TEMPLATE.format(context_section=build_context_section(user_context))
    return header + diff_text
