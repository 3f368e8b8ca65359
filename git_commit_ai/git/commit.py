"""Git index and commit operations.

Contains:
- stage_all: Stage every change in the worktree (`git add -A`)
- commit_from_file: Create a commit whose message is read from a file
"""

import subprocess
from pathlib import Path

from git_commit_ai.git.exceptions import CommitFailedError
from git_commit_ai.git.runner import _run_git_command


def stage_all() -> None:
    """Stage all changes, including untracked and deleted files."""
    _run_git_command(["add", "-A"])


def commit_from_file(message_file: Path) -> str:
    """Commit the staged changes using `message_file` as the message.

    `--cleanup=whitespace` keeps lines starting with '#' in the message
    body; comments were already removed before the file was written.

    Args:
        message_file: Path to a file holding the final commit message.

    Returns:
        The stdout of `git commit`.

    Raises:
        CommitFailedError: If git rejects the commit.
    """
    try:
        result = subprocess.run(
            ["git", "commit", "--cleanup=whitespace", "-F", str(message_file)],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise CommitFailedError("Git is not installed or not in PATH.")

    if result.returncode != 0:
        details = (result.stderr or result.stdout).strip()
        raise CommitFailedError(f"git commit exited with code {result.returncode}\n{details}")
    return result.stdout
