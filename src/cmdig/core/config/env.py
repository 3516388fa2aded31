"""Layered .env loading.

CMDIG_* settings can live in dotenv files as well as the shell:

    ~/.config/cmdig/.env   (user defaults)
    ./.env                 (per-directory overrides)

Variables already exported in the shell always win; a project file may
replace a value that only came from the user file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values


def user_env_path() -> Path:
    """Default user-level dotenv file."""
    xdg_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(xdg_home) / "cmdig" / ".env"


def _read_env(path: Path) -> dict[str, str]:
    if not path.is_file():
        return {}
    return {str(k): str(v) for k, v in dotenv_values(path).items() if k and v is not None}


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> None:
    """Populate os.environ from user and project dotenv files.

    Args:
        project_dir: directory searched for ``.env`` (defaults to cwd)
        user_env_paths: explicit user env files
        project_env_paths: explicit project env files
    """
    if user_env_paths is None:
        user_env_paths = [user_env_path()]
    if project_env_paths is None:
        project_env_paths = [(project_dir or Path.cwd()) / ".env"]

    from_user: set[str] = set()
    for path in user_env_paths:
        for key, value in _read_env(Path(path)).items():
            if key not in os.environ:
                os.environ[key] = value
                from_user.add(key)

    for path in project_env_paths:
        for key, value in _read_env(Path(path)).items():
            if key in from_user or key not in os.environ:
                os.environ[key] = value
