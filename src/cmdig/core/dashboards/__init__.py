"""
Dashboard discovery, caching and URL resolution.

Modules:
    cache: Per-project cache file paths and raw I/O
    refresher: Cache staleness check and regeneration via gcloud
    catalog: Cached + built-in dashboard list
    urls: Console URL construction
    launcher: Opening URLs with the external opener
    selector: Interactive questionary prompt
    models: DashboardEntry
    errors: Exception hierarchy

Example Usage:
    >>> from cmdig.core.dashboards import CacheStore, DashboardCatalog, resolve
    >>> store = CacheStore(base_dir)
    >>> entries = DashboardCatalog(store).load("my-project")
    >>> resolve(entries[0], "my-project")
"""

from cmdig.core.dashboards.cache import CacheStore
from cmdig.core.dashboards.catalog import BUILTIN_DASHBOARDS, DashboardCatalog, parse_entries
from cmdig.core.dashboards.errors import CacheError, CatalogError, DigError, RefreshError
from cmdig.core.dashboards.launcher import open_url
from cmdig.core.dashboards.models import DashboardEntry
from cmdig.core.dashboards.refresher import Refresher, build_list_command, should_refresh
from cmdig.core.dashboards.urls import DEFAULT_CONSOLE_URL, dashboard_id_segment, resolve

__all__ = [
    # Models
    "DashboardEntry",
    # Cache
    "CacheStore",
    # Refresh
    "Refresher",
    "build_list_command",
    "should_refresh",
    # Catalog
    "BUILTIN_DASHBOARDS",
    "DashboardCatalog",
    "parse_entries",
    # URLs
    "DEFAULT_CONSOLE_URL",
    "dashboard_id_segment",
    "resolve",
    # Launch
    "open_url",
    # Errors
    "CacheError",
    "CatalogError",
    "DigError",
    "RefreshError",
]
