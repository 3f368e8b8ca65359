"""Global configuration management for git-commit-ai.

Handles user-level configuration stored in ~/.git-commit-ai/config.yaml:
- generator: command line of the AI text generator (reads the prompt on stdin)
- editor: preferred visual editor, tried before git's core.editor and $EDITOR
- max_diff_chars: diff size limit forwarded to the generator (0 = unlimited)
"""

from pathlib import Path
from typing import Any, Dict

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".git-commit-ai"


def get_global_config_dir() -> Path:
    """Get the global configuration directory.

    Returns:
        Path to ~/.git-commit-ai/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.git-commit-ai/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.git-commit-ai/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def is_configured() -> bool:
    """Check whether a global config file exists."""
    return get_config_file_path().exists()


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.git-commit-ai/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.git-commit-ai/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def set_config_value(key: str, value: Any) -> None:
    """Update a single key in the global config file."""
    config = load_global_config()
    config[key] = value
    save_global_config(config)


def delete_global_config() -> bool:
    """Remove the global config file.

    Returns:
        True if a file was removed, False if none existed.
    """
    config_file = get_config_file_path()
    if not config_file.exists():
        return False
    config_file.unlink()
    return True
