"""Text generator module for git-commit-ai.

This module provides a single entry point for turning a prompt into a
commit message through the configured external generator.
"""

from typing import Optional

from git_commit_ai import config
from git_commit_ai.generator.base import (
    BaseGenerator,
    GenerationResult,
    clean_generated_message,
)
from git_commit_ai.generator.exceptions import (
    EmptyGeneratedMessageError,
    GenerationFailedError,
    GeneratorError,
    GeneratorUnavailableError,
)
from git_commit_ai.generator.prompts import build_prompt


def get_generator(command: Optional[str] = None) -> BaseGenerator:
    """Get a generator instance.

    Args:
        command: Generator command line. Defaults to the active configuration.

    Returns:
        A generator wrapping the command.
    """
    from git_commit_ai.generator.claude_cli import ClaudeCLIGenerator

    return ClaudeCLIGenerator(command=command or config.ACTIVE_SETTINGS.generator)


# Export commonly used items
__all__ = [
    "BaseGenerator",
    "GenerationResult",
    "clean_generated_message",
    "GeneratorError",
    "GeneratorUnavailableError",
    "GenerationFailedError",
    "EmptyGeneratedMessageError",
    "build_prompt",
    "get_generator",
]
