"""Git diff utilities.

Contains:
- get_staged_diff: Get the full staged diff
- truncate_diff: Apply the diff size limit before prompting
- TRUNCATION_MARKER: Suffix appended to a truncated diff
"""

from git_commit_ai.git.runner import _run_git_command


TRUNCATION_MARKER = "\n...[truncated]\n"


def get_staged_diff() -> str:
    """Get the staged diff exactly as git prints it.

    Returns:
        The output of `git diff --cached`.
    """
    return _run_git_command(["diff", "--cached"], strip=False)


def truncate_diff(diff: str, max_chars: int) -> tuple[str, bool]:
    """Limit the diff forwarded to the generator.

    Args:
        diff: The staged diff.
        max_chars: Maximum number of characters to keep. 0 disables the limit.

    Returns:
        Tuple of (possibly truncated diff, whether truncation happened).
    """
    if max_chars <= 0 or len(diff) <= max_chars:
        return diff, False
    return diff[:max_chars] + TRUNCATION_MARKER, True
