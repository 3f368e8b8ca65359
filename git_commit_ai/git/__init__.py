"""Git collaborator module for git-commit-ai.

This package provides:
- exceptions: GitError, NotARepositoryError, NothingToCommitError, CommitFailedError
- runner: _run_git_command, _git_exit_code, get_repo_root
- status: staged/unstaged/untracked checks and name-status listings
- diff: get_staged_diff, truncate_diff
- commit: stage_all, commit_from_file
- repository: VersionControl, GitRepository
"""

# Exceptions
from git_commit_ai.git.exceptions import (
    CommitFailedError,
    GitError,
    NotARepositoryError,
    NothingToCommitError,
)

# Runner utilities
from git_commit_ai.git.runner import (
    _git_exit_code,
    _run_git_command,
    get_repo_root,
)

# Status utilities
from git_commit_ai.git.status import (
    get_configured_editor,
    get_staged_name_status,
    get_unstaged_name_status,
    has_staged_changes,
    has_unstaged_changes,
    list_untracked_files,
)

# Diff utilities
from git_commit_ai.git.diff import (
    TRUNCATION_MARKER,
    get_staged_diff,
    truncate_diff,
)

# Index and commit operations
from git_commit_ai.git.commit import (
    commit_from_file,
    stage_all,
)

# Collaborator interface
from git_commit_ai.git.repository import (
    GitRepository,
    VersionControl,
)


__all__ = [
    # Exceptions
    "GitError",
    "NotARepositoryError",
    "NothingToCommitError",
    "CommitFailedError",
    # Runner
    "_run_git_command",
    "_git_exit_code",
    "get_repo_root",
    # Status
    "has_staged_changes",
    "has_unstaged_changes",
    "list_untracked_files",
    "get_staged_name_status",
    "get_unstaged_name_status",
    "get_configured_editor",
    # Diff
    "TRUNCATION_MARKER",
    "get_staged_diff",
    "truncate_diff",
    # Commit
    "stage_all",
    "commit_from_file",
    # Repository
    "VersionControl",
    "GitRepository",
]
