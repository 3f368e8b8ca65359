"""Interactive editor resolution and launching."""

import os
import shlex
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from git_commit_ai.config import DEFAULT_EDITOR
from git_commit_ai.editing.exceptions import EditorUnavailableError
from git_commit_ai.git.repository import VersionControl


FALLBACK_EDITOR = "vi"


def _split_command(command: str) -> list[str]:
    try:
        return shlex.split(command)
    except ValueError as e:
        raise EditorUnavailableError(f"Invalid editor command {command!r}: {e}")


class InteractiveEditor(ABC):
    """Abstract capability for letting the user edit a file."""

    @abstractmethod
    def edit(self, file_path: Path) -> None:
        """Open `file_path` and block until the user is done with it.

        Raises:
            EditorUnavailableError: If no editor can be launched.
        """
        pass


class TerminalEditor(InteractiveEditor):
    """Launches a terminal editor attached to the current TTY."""

    def __init__(self, vcs: Optional[VersionControl] = None, preferred: str = DEFAULT_EDITOR):
        """Initialize the editor.

        Args:
            vcs: Used to look up git's core.editor setting.
            preferred: Editor tried first when it is on PATH.
        """
        self.vcs = vcs
        self.preferred = preferred

    def resolve_command(self) -> list[str]:
        """Find the editor to use.

        Preference order:
        1. The preferred editor (vim unless configured otherwise), if on PATH
        2. git config core.editor
        3. $EDITOR environment variable
        4. vi as fallback

        Returns:
            List of command parts to run the editor.

        Raises:
            EditorUnavailableError: If a configured command cannot be parsed.
        """
        preferred = _split_command(self.preferred)
        # noinspection PyArgumentList
        if preferred and shutil.which(preferred[0]):
            return preferred

        if self.vcs is not None:
            configured = self.vcs.configured_editor()
            if configured:
                return _split_command(configured)

        editor = os.environ.get("EDITOR")
        if editor:
            return _split_command(editor)

        return [FALLBACK_EDITOR]

    def edit(self, file_path: Path) -> None:
        """Open the file in an editor and wait for it to close.

        The exit status is ignored: only the file content and timestamp
        tell whether the user accepted the text.

        Args:
            file_path: Path to the file to edit.
        """
        editor_cmd = self.resolve_command()

        try:
            subprocess.run(editor_cmd + [str(file_path)], check=False)
        except FileNotFoundError:
            raise EditorUnavailableError(f"Editor not found: {editor_cmd[0]}")
