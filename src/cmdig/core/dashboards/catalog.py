"""
Dashboard catalog: cached project dashboards plus built-in resource lists.

Discovered dashboards come first, in cache-file order, followed by the
built-in resource-list dashboards in declaration order. Entries sharing a
display name are kept as separate choices.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from cmdig.core.dashboards.cache import CacheStore
from cmdig.core.dashboards.errors import CacheError, CatalogError
from cmdig.core.dashboards.models import DashboardEntry

logger = logging.getLogger(__name__)


def _builtin(display_name: str, resource_type: str) -> DashboardEntry:
    return DashboardEntry(display_name=display_name, identifier=resource_type, is_builtin=True)


BUILTIN_DASHBOARDS: tuple[DashboardEntry, ...] = (
    _builtin("App Engine", "gae_application"),
    _builtin("BigQuery", "bigquery_dataset"),
    _builtin("Cloud Spanner", "spanner_instance"),
    _builtin("Cloud SQL", "cloudsql_database"),
    _builtin("Cloud Storage", "gcs_bucket"),
    _builtin("Dataflow", "dataflow_job"),
    _builtin("Disks", "gce_disk"),
    _builtin("External HTTP(S) Load Balancers", "l7_lb_rule"),
    _builtin("Firewalls", "compute_firewall"),
    _builtin("GKE", "kubernetes"),
    _builtin("Google Cloud Load Balancers", "loadbalancing"),
    _builtin("Infrastructure Summary", "infrastructure"),
    _builtin("Network Security Policies", "network_security_policy"),
    _builtin("Pub/Sub", "pubsub_topic"),
    _builtin("VM Instances", "gce_instance"),
)


def parse_entries(raw: bytes, path: Path) -> list[DashboardEntry]:
    """
    Parse the raw cache file into discovered entries.

    Args:
        raw: Cache file contents
        path: Cache file path (for error messages)

    Returns:
        Discovered entries in file order, all with is_builtin=False

    Raises:
        CatalogError: If the data is not a JSON array of dashboard records
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogError(path, f"not valid JSON ({e})") from e

    if not isinstance(data, list):
        raise CatalogError(path, f"expected a JSON array, got {type(data).__name__}")

    entries: list[DashboardEntry] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise CatalogError(path, f"entry {index} is not an object")
        try:
            entry = DashboardEntry.model_validate({**record, "is_builtin": False})
        except ValidationError as e:
            raise CatalogError(path, f"entry {index}: {e.errors()[0]['msg']}") from e
        entries.append(entry)
    return entries


class DashboardCatalog:
    """Loads the merged dashboard list for a project."""

    def __init__(self, store: CacheStore) -> None:
        self.store = store

    def load(self, project_id: str) -> list[DashboardEntry]:
        """
        Load cached dashboards for a project and append the built-ins.

        Raises:
            CatalogError: If the cache is missing, unreadable or malformed
        """
        path = self.store.cache_path(project_id)
        try:
            raw = self.store.read(path)
        except CacheError as e:
            raise CatalogError(path, e.reason) from e

        discovered = parse_entries(raw, path)
        logger.debug("Loaded %d dashboards from %s", len(discovered), path)
        return [*discovered, *BUILTIN_DASHBOARDS]
