"""Main CLI command for generating and committing a message."""

from typing import Optional

import typer

from git_commit_ai import __version__, console
from git_commit_ai.config import load_config
from git_commit_ai.editing import (
    AbortReason,
    EditorUnavailableError,
    ScratchAbortedError,
    TerminalEditor,
)
from git_commit_ai.generator import (
    EmptyGeneratedMessageError,
    GenerationFailedError,
    GeneratorUnavailableError,
    get_generator,
)
from git_commit_ai.git import (
    CommitFailedError,
    GitError,
    GitRepository,
    NotARepositoryError,
    NothingToCommitError,
)
from git_commit_ai.global_config import GlobalConfigError
from git_commit_ai.workflow import CommitWorkflow
from git_commit_ai.workspace import StagingDeclinedError


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-commit-ai {__version__}")
        raise typer.Exit()


def main_command(
    user_context: Optional[str] = typer.Argument(
        None,
        help="Describe what you worked on; it is passed to the generator as context",
        show_default=False,
    ),
    edit_context: bool = typer.Option(
        False,
        "--context",
        "-c",
        help="Open an editor to write the context before generating",
    ),
    max_diff_chars: Optional[int] = typer.Option(
        None,
        "--max-diff-chars",
        min=0,
        help="Maximum characters of the staged diff sent to the generator (0 = no limit)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a commit message for the staged changes with an AI CLI, review it, and commit."""
    if edit_context and user_context is not None:
        raise typer.BadParameter("Pass either a context message or --context, not both.")

    try:
        settings = load_config()
    except GlobalConfigError as e:
        console.error(f"Config error: {e}")
        raise typer.Exit(1)

    vcs = GitRepository()

    try:
        workflow = CommitWorkflow(
            vcs=vcs,
            editor=TerminalEditor(vcs, preferred=settings.editor),
            generator=get_generator(settings.generator),
            max_diff_chars=settings.max_diff_chars if max_diff_chars is None else max_diff_chars,
        )

        if edit_context:
            console.info("Opening editor for context input...")
            console.warning("Enter your context message and save. Leave empty to cancel.")
            try:
                user_context = workflow.capture_context()
            except ScratchAbortedError:
                console.warning("No context provided. Exiting.")
                raise typer.Exit(0)
            console.success(f"Context captured: {user_context}")
            typer.echo("", err=True)

        workflow.run(user_context)

    except NotARepositoryError:
        console.error("Error: Not a git repository")
        raise typer.Exit(1)
    except NothingToCommitError:
        console.error("No changes to commit")
        raise typer.Exit(1)
    except StagingDeclinedError:
        console.error("Aborted: No changes staged")
        raise typer.Exit(1)
    except GeneratorUnavailableError as e:
        console.error(f"Error: {e}")
        console.warning("Please install Claude Code first, or set another generator with git-commit-ai-config")
        raise typer.Exit(1)
    except GenerationFailedError as e:
        console.error("Error: Failed to generate commit message")
        console.warning("Generator output:")
        typer.echo(e.output, err=True)
        raise typer.Exit(1)
    except EmptyGeneratedMessageError:
        console.error("Error: Failed to generate commit message")
        raise typer.Exit(1)
    except ScratchAbortedError as e:
        if e.reason is AbortReason.UNMODIFIED:
            console.warning("Commit aborted: no changes made to commit message")
        else:
            console.warning("Commit aborted: empty commit message")
        raise typer.Exit(1)
    except EditorUnavailableError as e:
        console.error(f"Error: {e}")
        raise typer.Exit(1)
    except CommitFailedError as e:
        console.error("Commit failed!")
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except GitError as e:
        console.error(f"Git error: {e}")
        raise typer.Exit(1)
