"""
On-disk dashboard cache.

Each project gets its own cache file:

    <base_dir>/<project_id>/cache.json

The file holds the raw JSON array printed by the listing command.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from cmdig.core.dashboards.errors import CacheError

logger = logging.getLogger(__name__)

CACHE_FILENAME = "cache.json"


class CacheStore:
    """
    Path derivation and raw I/O for per-project cache files.

    Every failure surfaces as CacheError; nothing here exits the process.

    Example:
        >>> store = CacheStore(Path("/tmp/dig"))
        >>> store.cache_path("demo")
        PosixPath('/tmp/dig/demo/cache.json')
    """

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = Path(base_dir)

    def cache_dir(self, project_id: str) -> Path:
        """
        Directory holding the cache for a project.

        Raises:
            CacheError: If the project id would resolve outside base_dir
        """
        if (
            not project_id
            or project_id in (".", "..")
            or any(sep in project_id for sep in ("/", "\\"))
        ):
            raise CacheError(self.base_dir, f"invalid project id {project_id!r}")
        return self.base_dir / project_id

    def cache_path(self, project_id: str) -> Path:
        """Cache file for a project."""
        return self.cache_dir(project_id) / CACHE_FILENAME

    def exists(self, path: Path) -> bool:
        return path.exists()

    def ensure_dir(self, path: Path) -> None:
        """
        Create the parent directories of ``path``.

        Raises:
            CacheError: If a directory cannot be created
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheError(path.parent, e.strerror or str(e)) from e

    def open_for_write(self, path: Path) -> IO[bytes]:
        """
        Create or truncate the cache file for streaming writes.

        Raises:
            CacheError: If the file cannot be created
        """
        try:
            return path.open("wb")
        except OSError as e:
            raise CacheError(path, e.strerror or str(e)) from e

    def write(self, path: Path, data: bytes) -> None:
        """
        Create or truncate the cache file and write raw bytes.

        Raises:
            CacheError: If the file cannot be written
        """
        with self.open_for_write(path) as f:
            try:
                f.write(data)
            except OSError as e:
                raise CacheError(path, e.strerror or str(e)) from e
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def read(self, path: Path) -> bytes:
        """
        Read the raw cache file.

        Raises:
            CacheError: If the file does not exist or cannot be read
        """
        try:
            return path.read_bytes()
        except OSError as e:
            raise CacheError(path, e.strerror or str(e)) from e

    def remove(self, path: Path) -> None:
        """Delete a cache file if present."""
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise CacheError(path, e.strerror or str(e)) from e
