"""Interactive editing for git-commit-ai.

This package provides:
- exceptions: EditorError, EditorUnavailableError, ScratchAbortedError, AbortReason
- editor: InteractiveEditor, TerminalEditor
- templates: ScratchTemplate, context_template, review_template
- scratch: run_editable_scratch, strip_comments, scratch_file, Fingerprint
"""

from git_commit_ai.editing.exceptions import (
    AbortReason,
    EditorError,
    EditorUnavailableError,
    ScratchAbortedError,
)
from git_commit_ai.editing.editor import InteractiveEditor, TerminalEditor
from git_commit_ai.editing.templates import (
    ScratchTemplate,
    context_template,
    review_template,
)
from git_commit_ai.editing.scratch import (
    Fingerprint,
    collapse_whitespace,
    run_editable_scratch,
    scratch_file,
    strip_comments,
)


__all__ = [
    "AbortReason",
    "EditorError",
    "EditorUnavailableError",
    "ScratchAbortedError",
    "InteractiveEditor",
    "TerminalEditor",
    "ScratchTemplate",
    "context_template",
    "review_template",
    "Fingerprint",
    "collapse_whitespace",
    "run_editable_scratch",
    "scratch_file",
    "strip_comments",
]
