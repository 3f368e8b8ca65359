"""Workspace change-state detection and the staging decision.

The workspace is classified from three independent checks (staged changes,
unstaged changes, untracked files) into one of five actions. The state is
always read fresh from the repository and read again after staging.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from git_commit_ai import console
from git_commit_ai.git.exceptions import NothingToCommitError
from git_commit_ai.git.repository import VersionControl


class StagingDeclinedError(Exception):
    """Raised when the user declines to stage and nothing is staged."""

    pass


class StagingAction(Enum):
    """What to do for a given workspace state."""

    PROCEED = "proceed"
    PROMPT_STAGE_UNTRACKED = "prompt_stage_untracked"
    PROMPT_STAGE_UNSTAGED = "prompt_stage_unstaged"
    PROMPT_STAGE_REMAINING = "prompt_stage_remaining"
    NOTHING_TO_COMMIT = "nothing_to_commit"


@dataclass(frozen=True)
class WorkspaceState:
    """Snapshot of the three change dimensions."""

    has_staged: bool
    has_unstaged: bool
    has_untracked: bool


@dataclass(frozen=True)
class StagingOutcome:
    """Result of the staging decision.

    Attributes:
        action: The action the initial state called for.
        partial: Whether the commit proceeds with only part of the changes.
    """

    action: StagingAction
    partial: bool = False


# Prompt lines keyed by action: (situation, question)
_PROMPTS = {
    StagingAction.PROMPT_STAGE_UNTRACKED: (
        "Found untracked files.",
        "Would you like to stage all files?",
    ),
    StagingAction.PROMPT_STAGE_UNSTAGED: (
        "Found unstaged changes.",
        "Would you like to stage all files?",
    ),
    StagingAction.PROMPT_STAGE_REMAINING: (
        "Some changes are staged, but there are also unstaged/untracked changes.",
        "Would you like to stage all remaining changes?",
    ),
}


def read_workspace_state(vcs: VersionControl) -> WorkspaceState:
    """Query the repository for its current change state."""
    return WorkspaceState(
        has_staged=vcs.has_staged_changes(),
        has_unstaged=vcs.has_unstaged_changes(),
        has_untracked=bool(vcs.list_untracked_files()),
    )


def classify_workspace(state: WorkspaceState) -> StagingAction:
    """Map a workspace state to an action.

    Checked in priority order:
    1. nothing staged, only untracked files  -> ask to stage all
    2. nothing staged, unstaged changes      -> ask to stage all
    3. nothing staged, nothing else          -> nothing to commit
    4. staged plus unstaged or untracked     -> ask to stage the rest
    5. staged only                           -> proceed
    """
    if not state.has_staged:
        if state.has_untracked and not state.has_unstaged:
            return StagingAction.PROMPT_STAGE_UNTRACKED
        if state.has_unstaged:
            return StagingAction.PROMPT_STAGE_UNSTAGED
        return StagingAction.NOTHING_TO_COMMIT

    if state.has_unstaged or state.has_untracked:
        return StagingAction.PROMPT_STAGE_REMAINING
    return StagingAction.PROCEED


def resolve_staging(vcs: VersionControl, confirm: Callable[[str], bool]) -> StagingOutcome:
    """Run the staging decision procedure.

    Args:
        vcs: The version-control collaborator.
        confirm: Asks a yes/no question, returns True for yes.

    Returns:
        The outcome of the decision.

    Raises:
        NothingToCommitError: If there is nothing to commit.
        StagingDeclinedError: If the user declines and nothing is staged.
    """
    action = classify_workspace(read_workspace_state(vcs))

    if action is StagingAction.PROCEED:
        return StagingOutcome(action=action)

    if action is StagingAction.NOTHING_TO_COMMIT:
        raise NothingToCommitError("No changes to commit")

    situation, question = _PROMPTS[action]
    if action is not StagingAction.PROMPT_STAGE_REMAINING:
        console.warning("No staged changes found.")
    console.warning(situation)

    if confirm(question):
        vcs.stage_all()
        console.success("✓ All files staged")
        if not read_workspace_state(vcs).has_staged:
            raise NothingToCommitError("No changes to commit")
        return StagingOutcome(action=action)

    if action is StagingAction.PROMPT_STAGE_REMAINING:
        console.info("Proceeding with currently staged changes only")
        return StagingOutcome(action=action, partial=True)

    raise StagingDeclinedError("No changes staged")
