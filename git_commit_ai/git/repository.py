"""Version-control collaborator used by the commit workflow.

The workflow only talks to a `VersionControl`; `GitRepository` is the real
implementation backed by the git CLI, and tests substitute a fake.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from git_commit_ai.git.commit import commit_from_file, stage_all
from git_commit_ai.git.diff import get_staged_diff
from git_commit_ai.git.runner import get_repo_root
from git_commit_ai.git.status import (
    get_configured_editor,
    get_staged_name_status,
    get_unstaged_name_status,
    has_staged_changes,
    has_unstaged_changes,
    list_untracked_files,
)


class VersionControl(ABC):
    """Abstract capability over the versioned workspace."""

    @abstractmethod
    def repo_root(self) -> Path:
        """Return the repository root.

        Raises:
            NotARepositoryError: If there is no repository.
        """
        pass

    @abstractmethod
    def has_staged_changes(self) -> bool:
        pass

    @abstractmethod
    def has_unstaged_changes(self) -> bool:
        pass

    @abstractmethod
    def list_untracked_files(self) -> list[str]:
        pass

    @abstractmethod
    def stage_all(self) -> None:
        pass

    @abstractmethod
    def staged_diff(self) -> str:
        pass

    @abstractmethod
    def staged_name_status(self) -> list[str]:
        pass

    @abstractmethod
    def unstaged_name_status(self) -> list[str]:
        pass

    @abstractmethod
    def configured_editor(self) -> Optional[str]:
        pass

    @abstractmethod
    def commit_from_file(self, message_file: Path) -> str:
        """Commit staged changes with the message stored in `message_file`.

        Raises:
            CommitFailedError: If the commit fails.
        """
        pass


class GitRepository(VersionControl):
    """`VersionControl` backed by the git command line in the current directory."""

    def repo_root(self) -> Path:
        return get_repo_root()

    def has_staged_changes(self) -> bool:
        return has_staged_changes()

    def has_unstaged_changes(self) -> bool:
        return has_unstaged_changes()

    def list_untracked_files(self) -> list[str]:
        return list_untracked_files()

    def stage_all(self) -> None:
        stage_all()

    def staged_diff(self) -> str:
        return get_staged_diff()

    def staged_name_status(self) -> list[str]:
        return get_staged_name_status()

    def unstaged_name_status(self) -> list[str]:
        return get_unstaged_name_status()

    def configured_editor(self) -> Optional[str]:
        return get_configured_editor()

    def commit_from_file(self, message_file: Path) -> str:
        return commit_from_file(message_file)
