"""
Console URL construction.

Patterns:
    built-in:   <console>/dashboards/resourceList/<resource_type>?project=<project>
    discovered: <console>/dashboards/builder/<dashboard_id>?project=<project>
"""

from __future__ import annotations

import re

from cmdig.core.dashboards.models import DashboardEntry

DEFAULT_CONSOLE_URL = "https://console.cloud.google.com/monitoring"

# dashboard id from projects/<number>/dashboards/<id>
_DASHBOARD_ID_RE = re.compile(r"/[a-zA-Z\d\-]+$")


def dashboard_id_segment(identifier: str) -> str:
    """
    Return the trailing ``/<id>`` of a dashboard resource path.

    An identifier without such a segment (e.g. ending in "/") yields "",
    which produces a builder URL without an id.
    """
    match = _DASHBOARD_ID_RE.search(identifier)
    return match.group(0) if match else ""


def resolve(entry: DashboardEntry, project_id: str, console_url: str = DEFAULT_CONSOLE_URL) -> str:
    """
    Build the console URL for a dashboard entry.

    Example:
        >>> entry = DashboardEntry(display_name="VM Instances", identifier="gce_instance",
        ...                        is_builtin=True)
        >>> resolve(entry, "demo")
        'https://console.cloud.google.com/monitoring/dashboards/resourceList/gce_instance?project=demo'
    """
    if entry.is_builtin:
        return f"{console_url}/dashboards/resourceList/{entry.identifier}?project={project_id}"
    segment = dashboard_id_segment(entry.identifier)
    return f"{console_url}/dashboards/builder{segment}?project={project_id}"
