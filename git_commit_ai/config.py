"""Runtime configuration for git-commit-ai.

Settings come from, in increasing priority:
1. The defaults below
2. ~/.git-commit-ai/config.yaml (see global_config)
3. Environment variables (a .env file in the working directory is loaded first)
4. Command-line flags, applied by the CLI on top of ACTIVE_SETTINGS
"""

import os
import shlex
from typing import Any, Dict

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ValidationError, field_validator


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_GENERATOR = "claude"
DEFAULT_EDITOR = "vim"
DEFAULT_MAX_DIFF_CHARS = 100_000
COMMENT_CHAR = "#"

# Environment variable overrides
ENV_GENERATOR = "GIT_COMMIT_AI_GENERATOR"
ENV_EDITOR = "GIT_COMMIT_AI_EDITOR"
ENV_MAX_DIFF_CHARS = "GIT_COMMIT_AI_MAX_DIFF_CHARS"


class Settings(BaseModel):
    """Validated configuration values."""

    generator: str = DEFAULT_GENERATOR
    editor: str = DEFAULT_EDITOR
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS

    @field_validator("generator", "editor")
    @classmethod
    def valid_command(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        try:
            shlex.split(v)
        except ValueError as e:
            raise ValueError(f"invalid command line {v!r}: {e}")
        return v.strip()

    @field_validator("max_diff_chars")
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must be >= 0 (0 disables the limit)")
        return v


# ============================================================
# ACTIVE CONFIGURATION (loaded from global config)
# ============================================================

# Initially set to defaults - will be overridden by load_config()
ACTIVE_SETTINGS = Settings()


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if os.getenv(ENV_GENERATOR):
        overrides["generator"] = os.environ[ENV_GENERATOR]
    if os.getenv(ENV_EDITOR):
        overrides["editor"] = os.environ[ENV_EDITOR]
    if os.getenv(ENV_MAX_DIFF_CHARS):
        overrides["max_diff_chars"] = os.environ[ENV_MAX_DIFF_CHARS]
    return overrides


def build_settings(file_config: Dict[str, Any]) -> Settings:
    """Merge file values and environment overrides into a Settings object.

    Unknown keys in the file are ignored.

    Raises:
        GlobalConfigError: If a value fails validation.
    """
    from git_commit_ai.global_config import GlobalConfigError

    merged = {k: v for k, v in file_config.items() if k in Settings.model_fields}
    merged.update(_env_overrides())
    try:
        return Settings(**merged)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid configuration: {e}")


def load_config() -> Settings:
    """Load configuration from .env, the global config file and the environment.

    This should be called by the CLI before running the workflow.

    Raises:
        GlobalConfigError: If the config file is unreadable or invalid.
    """
    global ACTIVE_SETTINGS

    # Import here to avoid circular dependency
    from git_commit_ai import global_config

    load_dotenv(find_dotenv(usecwd=True))
    ACTIVE_SETTINGS = build_settings(global_config.load_global_config())
    return ACTIVE_SETTINGS
