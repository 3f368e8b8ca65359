"""Git status utilities.

Contains:
- has_staged_changes / has_unstaged_changes: exit-code based checks
- list_untracked_files: untracked paths honouring .gitignore
- get_staged_name_status / get_unstaged_name_status: name-status listings
- get_configured_editor: the `core.editor` setting, if any
"""

from typing import Optional

from git_commit_ai.git.runner import _git_exit_code, _run_git_command


def has_staged_changes() -> bool:
    """Check whether the index differs from HEAD."""
    return _git_exit_code(["diff", "--cached", "--quiet"]) == 1


def has_unstaged_changes() -> bool:
    """Check whether tracked files in the worktree differ from the index."""
    return _git_exit_code(["diff", "--quiet"]) == 1


def list_untracked_files() -> list[str]:
    """List untracked files, excluding ignored ones.

    Returns:
        List of untracked file paths relative to the repository root.
    """
    output = _run_git_command(["ls-files", "--others", "--exclude-standard"])
    if not output:
        return []
    return output.split("\n")


def get_staged_name_status() -> list[str]:
    """Get `git diff --cached --name-status` as a list of lines."""
    output = _run_git_command(["diff", "--cached", "--name-status"])
    if not output:
        return []
    return output.split("\n")


def get_unstaged_name_status() -> list[str]:
    """Get `git diff --name-status` as a list of lines."""
    output = _run_git_command(["diff", "--name-status"])
    if not output:
        return []
    return output.split("\n")


def get_configured_editor() -> Optional[str]:
    """Get the editor configured through `git config core.editor`.

    Returns:
        The configured editor command, or None when unset.
    """
    # git config exits 1 when the key is missing
    if _git_exit_code(["config", "core.editor"]) != 0:
        return None
    editor = _run_git_command(["config", "core.editor"])
    return editor or None
