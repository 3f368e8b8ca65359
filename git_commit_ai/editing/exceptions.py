"""Editor and scratch-file exception classes.

Contains:
- EditorError: Base exception for editor-related errors
- EditorUnavailableError: Raised when the resolved editor cannot be launched
- AbortReason: Why an editing round was abandoned
- ScratchAbortedError: Raised when the user did not produce usable content
"""

from enum import Enum


class EditorError(Exception):
    """Base exception for editor-related errors."""

    pass


class EditorUnavailableError(EditorError):
    """Raised when the editor binary cannot be found."""

    pass


class AbortReason(Enum):
    """Why a scratch file round produced no content."""

    UNMODIFIED = "unmodified"
    EMPTY = "empty"


class ScratchAbortedError(EditorError):
    """Raised when the user quit without saving or left only comments."""

    def __init__(self, reason: AbortReason, message: str | None = None):
        self.reason = reason
        super().__init__(message or f"aborted: {reason.value}")
