"""CLI commands for global configuration management."""

import typer

from git_commit_ai import config, global_config

# Application for configuration management
config_app = typer.Typer(
    name="git-commit-ai-config",
    help="Manage global git-commit-ai configuration in ~/.git-commit-ai/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        settings = config.load_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if global_config.is_configured():
        typer.echo(f"Configuration file: {global_config.get_config_file_path()}")
    else:
        typer.echo("No configuration file found, using defaults.")
    typer.echo()
    typer.echo(f"  Generator: {settings.generator}")
    typer.echo(f"  Editor: {settings.editor}")
    limit = settings.max_diff_chars
    typer.echo(f"  Max Diff Chars: {limit if limit else 'unlimited'}")


def _save(key: str, value) -> None:
    try:
        # Validate before writing so a bad value never reaches the file
        config.build_settings({**global_config.load_global_config(), key: value})
        global_config.set_config_value(key, value)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set-generator")
def config_set_generator(
    command: str = typer.Argument(..., help="Generator command line, e.g. 'claude'"),
) -> None:
    """Set the command that turns the prompt into a commit message."""
    _save("generator", command)
    typer.echo(f"Generator set to: {command}")


@config_app.command("set-editor")
def config_set_editor(
    command: str = typer.Argument(..., help="Editor command, e.g. 'vim' or 'code --wait'"),
) -> None:
    """Set the preferred editor (used when it is on PATH)."""
    _save("editor", command)
    typer.echo(f"Editor set to: {command}")


@config_app.command("set-max-diff-chars")
def config_set_max_diff_chars(
    limit: int = typer.Argument(..., min=0, help="Character limit, 0 for no limit"),
) -> None:
    """Set the maximum diff size sent to the generator."""
    _save("max_diff_chars", limit)
    typer.echo(f"Max diff chars set to: {limit if limit else 'unlimited'}")


@config_app.command("reset")
def config_reset() -> None:
    """Delete the configuration file and go back to defaults."""
    if global_config.delete_global_config():
        typer.echo("Configuration reset to defaults.")
    else:
        typer.echo("No configuration file to reset.")
