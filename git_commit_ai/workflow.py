"""The commit workflow: staging decision, generation, review, commit.

All external programs are reached through injected collaborators, so the
workflow can be driven with fakes in tests.
"""

from typing import Callable, Optional

import typer

from git_commit_ai import console
from git_commit_ai.config import COMMENT_CHAR, DEFAULT_MAX_DIFF_CHARS
from git_commit_ai.editing.editor import InteractiveEditor
from git_commit_ai.editing.scratch import run_editable_scratch
from git_commit_ai.editing.templates import context_template, review_template
from git_commit_ai.finalize import finalize_commit
from git_commit_ai.generator.base import BaseGenerator
from git_commit_ai.generator.prompts import build_prompt
from git_commit_ai.git.diff import truncate_diff
from git_commit_ai.git.repository import VersionControl
from git_commit_ai.workspace import StagingOutcome, resolve_staging


def confirm_no_default(question: str) -> bool:
    """Ask a yes/no question on the terminal; anything but yes means no."""
    return typer.confirm(question, default=False)


class CommitWorkflow:
    """Drives one invocation from workspace inspection to commit."""

    def __init__(
        self,
        vcs: VersionControl,
        editor: InteractiveEditor,
        generator: BaseGenerator,
        confirm: Callable[[str], bool] = confirm_no_default,
        max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS,
        comment_char: str = COMMENT_CHAR,
    ):
        self.vcs = vcs
        self.editor = editor
        self.generator = generator
        self.confirm = confirm
        self.max_diff_chars = max_diff_chars
        self.comment_char = comment_char

    def capture_context(self) -> str:
        """Let the user write free-form context in the editor.

        Returns:
            The context collapsed to a single line.

        Raises:
            ScratchAbortedError: If the user left the file untouched or empty.
        """
        return run_editable_scratch(
            self.editor,
            context_template(),
            comment_char=self.comment_char,
            join_lines=True,
        )

    def prepare(self) -> StagingOutcome:
        """Check for a repository and settle what gets committed.

        Raises:
            NotARepositoryError: Outside of a repository.
            NothingToCommitError: If there is nothing to commit.
            StagingDeclinedError: If the user declines to stage anything.
        """
        self.vcs.repo_root()
        return resolve_staging(self.vcs, self.confirm)

    def generate(self, user_context: Optional[str] = None) -> str:
        """Build the prompt from the staged diff and run the generator.

        Raises:
            GeneratorUnavailableError: If the generator is missing.
            GenerationFailedError: If the generator fails.
            EmptyGeneratedMessageError: If it produced no message.
        """
        self.generator.ensure_available()

        console.info("Analyzing staged changes...")
        if user_context:
            console.info(f"Using provided context: {user_context}")

        diff, truncated = truncate_diff(self.vcs.staged_diff(), self.max_diff_chars)
        if truncated:
            console.warning(f"Staged diff truncated to {self.max_diff_chars} characters.")

        prompt = build_prompt(diff, user_context)

        console.info("Generating commit message...")
        result = self.generator.generate(prompt)

        console.success("Generated commit message:")
        console.show_message(result.message)
        return result.message

    def review(self, message: str) -> str:
        """Open the generated message for review, git style.

        The status block is read after staging so it reflects what will be
        committed.

        Raises:
            ScratchAbortedError: If the user did not save or emptied the message.
        """
        template = review_template(
            message,
            staged=self.vcs.staged_name_status(),
            unstaged=self.vcs.unstaged_name_status(),
            untracked=self.vcs.list_untracked_files(),
        )
        return run_editable_scratch(self.editor, template, comment_char=self.comment_char)

    def run(self, user_context: Optional[str] = None) -> str:
        """Run the whole workflow.

        Args:
            user_context: Optional context for the prompt.

        Returns:
            The committed message.
        """
        outcome = self.prepare()
        message = self.generate(user_context)
        reviewed = self.review(message)
        committed = finalize_commit(self.vcs, reviewed, self.comment_char)
        if outcome.partial:
            console.success("✓ Committed successfully (unstaged and untracked changes were left out)")
        else:
            console.success("✓ Committed successfully")
        return committed
