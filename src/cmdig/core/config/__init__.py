"""
Configuration models and loading.

This module provides the Pydantic DigConfig model with layered
merging: defaults < user config < env vars.
"""

from .env import load_layered_env
from .loader import (
    apply_env_overrides,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import DigConfig

__all__ = [
    "DigConfig",
    "apply_env_overrides",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    "load_layered_env",
]
