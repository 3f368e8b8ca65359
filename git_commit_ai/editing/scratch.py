"""Scratch file protocol.

A scratch file mediates one round of human editing: it is populated from a
template, handed to an editor, read back once and deleted. Whether the user
actually accepted the text is decided from a fingerprint of the file taken
before and after the editor runs.
"""

import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from git_commit_ai.editing.editor import InteractiveEditor
from git_commit_ai.editing.exceptions import AbortReason, ScratchAbortedError
from git_commit_ai.editing.templates import ScratchTemplate


@dataclass(frozen=True)
class Fingerprint:
    """Content and modification time of a file at one point in time."""

    content: bytes
    mtime_ns: int

    @classmethod
    def of(cls, path: Path) -> "Fingerprint":
        return cls(
            content=path.read_bytes(),
            mtime_ns=path.stat().st_mtime_ns,
        )


@contextmanager
def scratch_file(initial_text: str = "", suffix: str = ".txt") -> Iterator[Path]:
    """Create an exclusively owned temporary file, removed on exit.

    Args:
        initial_text: Text written to the file before it is yielded.
        suffix: File name suffix (editors use it for syntax detection).

    Yields:
        Path to the temporary file.
    """
    fd, name = tempfile.mkstemp(prefix="git-commit-ai-", suffix=suffix)
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(initial_text)
        yield path
    finally:
        path.unlink(missing_ok=True)


def strip_comments(text: str, comment_char: str = "#") -> str:
    """Remove comment lines and blank lines.

    A comment line is one whose first non-space character is `comment_char`.
    Every other line is kept verbatim, so applying this twice is a no-op.

    Args:
        text: The raw file content.
        comment_char: The comment marker.

    Returns:
        The remaining lines joined with newlines.
    """
    kept = []
    for line in text.splitlines():
        stripped = line.lstrip()
        if not stripped or stripped.startswith(comment_char):
            continue
        kept.append(line)
    return "\n".join(kept)


def collapse_whitespace(text: str) -> str:
    """Join lines with single spaces and squeeze runs of whitespace."""
    return " ".join(text.split())


def run_editable_scratch(
    editor: InteractiveEditor,
    template: ScratchTemplate,
    comment_char: str = "#",
    join_lines: bool = False,
    suffix: str = ".txt",
) -> str:
    """Let the user edit a template and return the meaningful content.

    Args:
        editor: The editor the file is handed to.
        template: Initial file content.
        comment_char: Comment marker used for rendering and stripping.
        join_lines: Collapse the result to a single line (context capture).
        suffix: Scratch file name suffix.

    Returns:
        The content with comment and blank lines removed.

    Raises:
        ScratchAbortedError: UNMODIFIED if the file is untouched (same
            content and same mtime), EMPTY if nothing but comments remain
            or the editor removed the file.
    """
    with scratch_file(template.render(comment_char), suffix=suffix) as path:
        before = Fingerprint.of(path)
        editor.edit(path)
        try:
            after = Fingerprint.of(path)
        except FileNotFoundError:
            raise ScratchAbortedError(AbortReason.EMPTY, "the file was deleted")

    if before == after:
        raise ScratchAbortedError(AbortReason.UNMODIFIED, "no changes were made")

    text = after.content.decode("utf-8", errors="replace")
    content = strip_comments(text, comment_char)
    if join_lines:
        content = collapse_whitespace(content)
    if not content:
        raise ScratchAbortedError(AbortReason.EMPTY, "nothing but comments was left")
    return content
