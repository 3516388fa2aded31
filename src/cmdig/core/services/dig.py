"""
Dig service: one-stop API for the pick-a-dashboard flow.

Wires the cache, refresher, catalog, URL resolver and launcher together
around a single DigConfig.

Usage:
    >>> from cmdig.core.services.dig import DigService
    >>> service = DigService.from_config("my-project")
    >>> service.prepare_cache(force=False)
    >>> entries = service.dashboards()
    >>> service.open(entries[0])
"""

from __future__ import annotations

import logging
from pathlib import Path

from cmdig.core.config.loader import load_config
from cmdig.core.config.models import DigConfig
from cmdig.core.dashboards import (
    CacheStore,
    DashboardCatalog,
    DashboardEntry,
    Refresher,
    open_url,
    resolve,
    should_refresh,
)
from cmdig.core.process import ExitStatus

logger = logging.getLogger(__name__)


class DigService:
    """
    Service for refreshing, listing and opening a project's dashboards.

    Example:
        >>> service = DigService(DigConfig(), "demo")
        >>> if service.prepare_cache(force=False):
        ...     print("cache rebuilt")
    """

    def __init__(self, config: DigConfig, project_id: str) -> None:
        """
        Initialize service with dependencies.

        Args:
            config: cmdig configuration
            project_id: Google Cloud project id
        """
        self._config = config
        self._project_id = project_id
        self._store = CacheStore(config.base_dir)
        self._refresher = Refresher(self._store, config.gcloud_command)
        self._catalog = DashboardCatalog(self._store)

    @classmethod
    def from_config(cls, project_id: str, config: DigConfig | None = None) -> DigService:
        """Create service, loading configuration when not supplied."""
        if config is None:
            config = load_config()
        return cls(config, project_id)

    @property
    def config(self) -> DigConfig:
        """The resolved configuration."""
        return self._config

    @property
    def project_id(self) -> str:
        return self._project_id

    @property
    def cache_path(self) -> Path:
        """Cache file for this project."""
        return self._store.cache_path(self._project_id)

    def needs_refresh(self, force: bool = False) -> bool:
        return should_refresh(force, self.cache_path)

    def prepare_cache(self, force: bool = False) -> bool:
        """
        Regenerate the cache when missing or forced.

        Returns:
            True if the listing command was run

        Raises:
            CacheError: If the cache cannot be written
            RefreshError: If the listing command fails
        """
        if not self.needs_refresh(force):
            return False
        self._refresher.refresh(self._project_id)
        return True

    def dashboards(self) -> list[DashboardEntry]:
        """
        Merged dashboard list: cached project dashboards, then built-ins.

        Raises:
            CatalogError: If the cache is missing or malformed
        """
        return self._catalog.load(self._project_id)

    def find(self, display_name: str) -> list[DashboardEntry]:
        """Entries whose display name matches, ignoring case."""
        wanted = display_name.casefold()
        return [e for e in self.dashboards() if e.display_name.casefold() == wanted]

    def url_for(self, entry: DashboardEntry) -> str:
        return resolve(entry, self._project_id, self._config.console_url)

    def open(self, entry: DashboardEntry) -> ExitStatus:
        """Open an entry's URL with the configured opener."""
        url = self.url_for(entry)
        logger.debug("Opening %s for %r", url, entry.display_name)
        return open_url(url, self._config.opener_command)
