"""
Cache regeneration from the gcloud CLI.

The listing command's stdout is streamed straight into the cache file;
stdin and stderr stay attached to the terminal so gcloud can prompt for
re-authentication.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cmdig.core.dashboards.cache import CacheStore
from cmdig.core.dashboards.errors import RefreshError
from cmdig.core.process import run_command

logger = logging.getLogger(__name__)


def should_refresh(force: bool, cache_path: Path) -> bool:
    """
    Decide whether the cache must be regenerated.

    Returns True when forced or when the cache file does not exist. Any
    other stat failure (e.g. permission denied) is not treated as a reason
    to refresh; the subsequent read reports it instead.
    """
    if force:
        logger.debug("Refresh forced for %s", cache_path)
        return True
    try:
        cache_path.stat()
    except FileNotFoundError:
        logger.debug("No cache at %s", cache_path)
        return True
    except OSError as e:
        logger.debug("Could not stat %s (%s), keeping cache", cache_path, e)
        return False
    return False


def build_list_command(gcloud: str, project_id: str) -> list[str]:
    """Arguments for listing a project's dashboards as JSON."""
    return [
        gcloud,
        "monitoring",
        "dashboards",
        "list",
        "--project",
        project_id,
        "--format",
        "json",
    ]


class Refresher:
    """Regenerates per-project caches by running the listing command."""

    def __init__(self, store: CacheStore, gcloud_command: str = "gcloud") -> None:
        self.store = store
        self.gcloud_command = gcloud_command

    def refresh(self, project_id: str) -> Path:
        """
        Rebuild the cache file for ``project_id``.

        A failed run leaves no cache file behind, so the next invocation
        refreshes again instead of loading partial output.

        Returns:
            Path of the written cache file

        Raises:
            CacheError: If the cache directory or file cannot be created
            RefreshError: If the listing command fails or cannot start
        """
        path = self.store.cache_path(project_id)
        self.store.ensure_dir(path)

        args = build_list_command(self.gcloud_command, project_id)
        f = self.store.open_for_write(path)
        try:
            with f:
                status = run_command(args, stdout=f)
        except BaseException:
            # Interrupted mid-write; drop the partial file and re-raise.
            self.store.remove(path)
            raise

        if not status.ok:
            self.store.remove(path)
            raise RefreshError(self.gcloud_command, status)

        logger.debug("Refreshed dashboard cache %s", path)
        return path
