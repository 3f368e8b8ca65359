"""Prompt templates for commit message generation.

This package contains:
- commit: The fixed instruction template and the user context block
- builder: build_prompt, which splices context and diff into the template
"""

from git_commit_ai.generator.prompts.commit import (
    COMMIT_PROMPT_TEMPLATE,
    CONTEXT_SECTION_TEMPLATE,
)
from git_commit_ai.generator.prompts.builder import (
    build_context_section,
    build_prompt,
)


__all__ = [
    "COMMIT_PROMPT_TEMPLATE",
    "CONTEXT_SECTION_TEMPLATE",
    "build_context_section",
    "build_prompt",
]
