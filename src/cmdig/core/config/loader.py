"""
Configuration loading with layered merging.

Implements the configuration precedence chain:
    defaults < user config < env vars

No result is cached at module level: the CLI loads the config once per
invocation and passes it down explicitly.
"""

import json
import os
from pathlib import Path
from typing import Any

from rich.console import Console

from .models import DigConfig

console = Console(stderr=True)

# Env var -> DigConfig field
ENV_OVERRIDES = {
    "CMDIG_BASE_DIR": "base_dir",
    "CMDIG_CONSOLE_URL": "console_url",
    "CMDIG_GCLOUD": "gcloud_command",
    "CMDIG_OPENER": "opener_command",
}


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/cmdig/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "cmdig" / "config.json"


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON object file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open() as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
            console.print(f"[yellow]Warning:[/yellow] Config at {path} is not a JSON object, ignoring")
            return None
    except (json.JSONDecodeError, OSError) as e:
        # A broken user config should not block opening a dashboard
        console.print(f"[yellow]Warning:[/yellow] Failed to parse config at {path}: {e}")
        return None


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Supported env vars:
        CMDIG_BASE_DIR - overrides base_dir
        CMDIG_CONSOLE_URL - overrides console_url
        CMDIG_GCLOUD - overrides gcloud_command
        CMDIG_OPENER - overrides opener_command

    Empty values are ignored.

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()

    for env_name, field_name in ENV_OVERRIDES.items():
        if value := os.environ.get(env_name):
            result[field_name] = value

    return result


def load_config(config_path: Path | None = None) -> DigConfig:
    """
    Load configuration with layered merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (CMDIG_*)
        2. User config (~/.config/cmdig/config.json)
        3. Model defaults

    Args:
        config_path: Explicit config file (defaults to the user config path)

    Returns:
        Validated DigConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation

    Example:
        >>> config = load_config()
        >>> config.gcloud_command
        'gcloud'
    """
    merged: dict[str, Any] = {}

    if config_path is None:
        config_path = get_user_config_path()
    if user_config := load_json_file(config_path):
        merged.update(user_config)

    merged = apply_env_overrides(merged)

    return DigConfig(**merged)
