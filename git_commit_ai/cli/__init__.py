"""CLI entry points for git-commit-ai.

- app: the `git-commit-ai` command (a single command, so the optional
  positional context argument never collides with a subcommand name)
- config_app: the `git-commit-ai-config` command group
"""

import typer

from git_commit_ai.cli.config import config_app
from git_commit_ai.cli.main import main_command

# Main application
app = typer.Typer(
    name="git-commit-ai",
    help="git-commit-ai: AI-generated commit messages, reviewed in your editor",
    add_completion=False,
)

app.command()(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
