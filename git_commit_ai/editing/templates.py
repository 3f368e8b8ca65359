"""Scratch file templates for context capture and message review."""

from dataclasses import dataclass, field
from typing import Sequence


CONTEXT_INSTRUCTIONS = [
    "Enter your commit context below.",
    "Lines starting with '#' will be ignored.",
    "Save and exit to continue, or delete all content to cancel.",
]

REVIEW_INSTRUCTIONS = [
    "Please enter the commit message for your changes. Lines starting",
    "with '#' will be ignored, and an empty message aborts the commit.",
]


@dataclass(frozen=True)
class ScratchTemplate:
    """Initial content of a scratch file.

    Comment lines are stored without their marker; `render` adds it.
    """

    leading_comments: Sequence[str] = field(default_factory=tuple)
    body: str = ""
    trailing_comments: Sequence[str] = field(default_factory=tuple)

    def render(self, comment_char: str = "#") -> str:
        lines = [_comment(line, comment_char) for line in self.leading_comments]
        lines.extend(self.body.split("\n"))
        if self.trailing_comments:
            if self.body:
                lines.append("")
            lines.extend(_comment(line, comment_char) for line in self.trailing_comments)
        return "\n".join(lines) + "\n"


def _comment(line: str, comment_char: str) -> str:
    return f"{comment_char} {line}" if line else comment_char


def context_template() -> ScratchTemplate:
    """Template for free-form context capture: instructions then an empty line."""
    return ScratchTemplate(leading_comments=CONTEXT_INSTRUCTIONS)


def review_template(
    message: str,
    staged: Sequence[str],
    unstaged: Sequence[str] = (),
    untracked: Sequence[str] = (),
) -> ScratchTemplate:
    """Template for reviewing a generated message, git style.

    Args:
        message: The generated commit message.
        staged: `git diff --cached --name-status` lines.
        unstaged: `git diff --name-status` lines.
        untracked: Untracked file paths.
    """
    trailer = list(REVIEW_INSTRUCTIONS)
    trailer += ["", "Changes to be committed:"]
    trailer += list(staged)
    if unstaged:
        trailer += ["", "Changes not staged for commit:"]
        trailer += list(unstaged)
    if untracked:
        trailer += ["", "Untracked files:"]
        trailer += list(untracked)
    return ScratchTemplate(body=message, trailing_comments=trailer)
