"""
Pytest configuration and shared fixtures.

Provides an isolated config home, a temporary cache base directory,
sample gcloud dashboard records, and helpers for writing cache files.
"""

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from cmdig.core.config.models import DigConfig
from cmdig.core.dashboards.cache import CacheStore

# ==============================================================================
# Environment Isolation
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config and CMDIG_* variables."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in ("CMDIG_BASE_DIR", "CMDIG_CONSOLE_URL", "CMDIG_GCLOUD", "CMDIG_OPENER"):
        # setenv first so teardown also removes values set by .env loading
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def base_dir(tmp_path) -> Path:
    """Cache base directory (stands in for ~/.cloudmonitoring_dig)."""
    return tmp_path / "dig"


@pytest.fixture
def config(base_dir) -> DigConfig:
    return DigConfig(base_dir=base_dir)


@pytest.fixture
def store(base_dir) -> CacheStore:
    return CacheStore(base_dir)


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Dashboard records as printed by `gcloud monitoring dashboards list --format json`."""
    return [
        {
            "displayName": "Frontend Latency",
            "etag": "0f1e2d3c",
            "gridLayout": {"widgets": []},
            "name": "projects/123456789/dashboards/abc-456",
        },
        {
            "displayName": "Batch Jobs",
            "etag": "9a8b7c6d",
            "mosaicLayout": {"columns": 12},
            "name": "projects/123456789/dashboards/f00dcafe",
        },
    ]


@pytest.fixture
def write_cache(store) -> Callable[..., Path]:
    """Write a cache file for a project; returns its path."""

    def _write(project_id: str, records: Any) -> Path:
        path = store.cache_path(project_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(records, (bytes, str)):
            data = records.encode() if isinstance(records, str) else records
        else:
            data = json.dumps(records).encode()
        path.write_bytes(data)
        return path

    return _write
