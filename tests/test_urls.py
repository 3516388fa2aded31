"""Tests for dashboard URL resolution."""

import pytest

from cmdig.core.dashboards.catalog import BUILTIN_DASHBOARDS
from cmdig.core.dashboards.models import DashboardEntry
from cmdig.core.dashboards.urls import DEFAULT_CONSOLE_URL, dashboard_id_segment, resolve

BASE = "https://console.cloud.google.com/monitoring"


def discovered(identifier: str) -> DashboardEntry:
    return DashboardEntry(display_name="Custom", identifier=identifier)


class TestDashboardIdSegment:
    """Tests for the trailing id extraction."""

    @pytest.mark.parametrize(
        "identifier, expected",
        [
            ("projects/123/dashboards/abc-456", "/abc-456"),
            ("projects/123/dashboards/ABC123", "/ABC123"),
            ("projects/123/dashboards/", ""),
            ("no-slash-at-all", ""),
            ("projects/123/dashboards/abc_456", ""),
        ],
    )
    def test_extracts_trailing_segment(self, identifier: str, expected: str) -> None:
        assert dashboard_id_segment(identifier) == expected


class TestResolve:
    """Tests for resolve."""

    def test_default_console_url(self) -> None:
        assert DEFAULT_CONSOLE_URL == BASE

    def test_builtin(self) -> None:
        entry = DashboardEntry(display_name="VM Instances", identifier="gce_instance", is_builtin=True)
        assert resolve(entry, "demo") == f"{BASE}/dashboards/resourceList/gce_instance?project=demo"

    def test_discovered(self) -> None:
        assert (
            resolve(discovered("projects/123/dashboards/abc-456"), "demo")
            == f"{BASE}/dashboards/builder/abc-456?project=demo"
        )

    def test_discovered_without_id_omits_segment(self) -> None:
        assert (
            resolve(discovered("projects/123/dashboards/"), "demo")
            == f"{BASE}/dashboards/builder?project=demo"
        )

    def test_custom_console_url(self) -> None:
        url = resolve(discovered("projects/1/dashboards/x"), "p", "https://example.test/monitoring")
        assert url == "https://example.test/monitoring/dashboards/builder/x?project=p"

    def test_every_builtin_uses_resource_list(self) -> None:
        for entry in BUILTIN_DASHBOARDS:
            assert resolve(entry, "demo") == (
                f"{BASE}/dashboards/resourceList/{entry.identifier}?project=demo"
            )
