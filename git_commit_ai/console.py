"""Coloured status output for git-commit-ai.

All status messages go to stderr so that stdout stays clean for the
generated message preview.
"""

import typer


def info(message: str) -> None:
    typer.secho(message, fg=typer.colors.BLUE, err=True)


def success(message: str) -> None:
    typer.secho(message, fg=typer.colors.GREEN, err=True)


def warning(message: str) -> None:
    typer.secho(message, fg=typer.colors.YELLOW, bold=True, err=True)


def error(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)


def show_message(message: str) -> None:
    """Print a commit message between rulers."""
    typer.echo("---")
    typer.echo(message)
    typer.echo("---")
    typer.echo("")
