"""Tests for the DashboardEntry model."""

import pytest
from pydantic import ValidationError

from cmdig.core.dashboards.models import DashboardEntry


class TestDashboardEntry:
    """Validation and serialization of dashboard entries."""

    def test_parses_gcloud_record(self) -> None:
        entry = DashboardEntry.model_validate(
            {
                "displayName": "Frontend",
                "name": "projects/1/dashboards/abc",
                "etag": "ignored",
            }
        )
        assert entry.display_name == "Frontend"
        assert entry.identifier == "projects/1/dashboards/abc"
        assert entry.is_builtin is False

    def test_accepts_field_names(self) -> None:
        entry = DashboardEntry(display_name="GKE", identifier="kubernetes", is_builtin=True)
        assert entry.is_builtin
        assert entry.kind == "built-in"

    def test_empty_display_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DashboardEntry.model_validate({"displayName": "", "name": "projects/1/dashboards/a"})

    def test_missing_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DashboardEntry.model_validate({"displayName": "Orphan"})

    def test_entries_are_immutable(self) -> None:
        entry = DashboardEntry(display_name="A", identifier="projects/1/dashboards/a")
        with pytest.raises(ValidationError):
            entry.display_name = "B"  # type: ignore[misc]

    def test_dump_uses_cache_keys_without_builtin_flag(self) -> None:
        entry = DashboardEntry(display_name="A", identifier="projects/1/dashboards/a")
        assert entry.model_dump(by_alias=True) == {
            "displayName": "A",
            "name": "projects/1/dashboards/a",
        }

    def test_str_is_display_name(self) -> None:
        entry = DashboardEntry(display_name="Batch", identifier="projects/1/dashboards/b")
        assert str(entry) == "Batch"
        assert entry.kind == "custom"
