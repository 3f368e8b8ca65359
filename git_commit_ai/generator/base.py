"""Base classes and shared utilities for text generators."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from git_commit_ai.generator.exceptions import EmptyGeneratedMessageError


_FENCE_RE = re.compile(r"^```.*$")


@dataclass
class GenerationResult:
    """Result from a generator call."""

    message: str
    raw_output: str
    command: str


def clean_generated_message(raw_output: str, comment_char: str = "#") -> str:
    """Turn raw generator output into a commit message.

    Markdown fence lines, blank lines and lines whose first non-space
    character is the comment marker are dropped, the same rule the review
    file is stripped with. Everything else is kept as-is.

    Args:
        raw_output: The generator's output.
        comment_char: Comment marker used by the review file.

    Returns:
        The cleaned message.

    Raises:
        EmptyGeneratedMessageError: If nothing is left.
    """
    lines = []
    for line in raw_output.splitlines():
        if _FENCE_RE.match(line):
            continue
        if not line.strip() or line.lstrip().startswith(comment_char):
            continue
        lines.append(line)

    if not lines:
        raise EmptyGeneratedMessageError("The generator returned no commit message.")
    return "\n".join(lines)


class BaseGenerator(ABC):
    """Abstract base class for commit message generators."""

    @abstractmethod
    def ensure_available(self) -> None:
        """Check that the generator can be invoked.

        Raises:
            GeneratorUnavailableError: If it cannot.
        """
        pass

    @abstractmethod
    def generate(self, prompt: str) -> GenerationResult:
        """Generate a commit message from a prompt.

        Args:
            prompt: The full prompt text.

        Returns:
            A GenerationResult with the cleaned message and raw output.

        Raises:
            GeneratorUnavailableError: If the generator is missing.
            GenerationFailedError: If the generator reports an error.
            EmptyGeneratedMessageError: If the output holds no message.
        """
        pass
