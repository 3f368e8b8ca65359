"""Commit finalization: the last step, run exactly once per invocation."""

from git_commit_ai.config import COMMENT_CHAR
from git_commit_ai.editing.exceptions import AbortReason, ScratchAbortedError
from git_commit_ai.editing.scratch import scratch_file, strip_comments
from git_commit_ai.git.repository import VersionControl


def finalize_commit(vcs: VersionControl, reviewed_message: str, comment_char: str = COMMENT_CHAR) -> str:
    """Commit the staged changes with the reviewed message.

    Comments are stripped here and only here; the clean file is handed to
    git without further interpretation.

    Args:
        vcs: The version-control collaborator.
        reviewed_message: Content of the review file after editing.
        comment_char: The comment marker.

    Returns:
        The message that was committed.

    Raises:
        ScratchAbortedError: EMPTY if the message was edited down to nothing.
        CommitFailedError: If the commit itself fails.
    """
    message = strip_comments(reviewed_message, comment_char)
    if not message:
        raise ScratchAbortedError(AbortReason.EMPTY, "empty commit message")

    with scratch_file(message + "\n", suffix=".msg") as message_file:
        vcs.commit_from_file(message_file)
    return message
