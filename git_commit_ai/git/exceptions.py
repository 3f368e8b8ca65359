"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NotARepositoryError: Raised outside of a git working tree
- NothingToCommitError: Raised when there is nothing to stage or commit
- CommitFailedError: Raised when `git commit` itself fails
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotARepositoryError(GitError):
    """Raised when the current directory is not inside a git repository."""

    pass


class NothingToCommitError(GitError):
    """Raised when there are no staged, unstaged or untracked changes."""

    pass


class CommitFailedError(GitError):
    """Raised when the final commit operation fails."""

    pass
