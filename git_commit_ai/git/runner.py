"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- _git_exit_code: Run a git command and return only its exit status
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path

from git_commit_ai.git.exceptions import GitError, NotARepositoryError


def _run_git_command(args: list[str], strip: bool = True) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        strip: Strip surrounding whitespace from the output.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
        return result.stdout.strip() if strip else result.stdout
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def _git_exit_code(args: list[str]) -> int:
    """Run a git command and return its exit status.

    Used for the `--quiet` style checks where the exit code is the answer
    (0 = no differences, 1 = differences).

    Args:
        args: List of arguments to pass to git.

    Returns:
        The exit status, either 0 or 1.

    Raises:
        GitError: If git is missing or reports a real error (status > 1).
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    if result.returncode > 1:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{result.stderr.strip()}")
    return result.returncode


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        NotARepositoryError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except GitError:
        raise NotARepositoryError("Not a git repository. Please run this command from within a git repo.")
