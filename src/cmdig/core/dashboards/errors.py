"""Exceptions raised while preparing, loading or opening dashboards."""

from __future__ import annotations

from pathlib import Path

from cmdig.core.process import ExitStatus


class DigError(Exception):
    """Base exception for cmdig errors."""


class CacheError(DigError):
    """The cache directory or file could not be created, written or read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class RefreshError(DigError):
    """The dashboard listing command failed or could not be started."""

    def __init__(self, command: str, status: ExitStatus) -> None:
        self.command = command
        self.status = status
        if status.started:
            message = f"'{command}' exited with status {status.returncode}"
        else:
            message = f"'{command}' could not be started: {status.error or 'not found'}"
        super().__init__(message)


class CatalogError(DigError):
    """The dashboard cache is missing or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid dashboard cache {path}: {reason}")


__all__ = [
    "CacheError",
    "CatalogError",
    "DigError",
    "RefreshError",
]
