"""AI-assisted git commit message CLI tool."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("git-commit-ai")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
