"""Tests for CacheStore path derivation and raw I/O."""

import os
import sys
from pathlib import Path

import pytest

from cmdig.core.dashboards.cache import CacheStore
from cmdig.core.dashboards.errors import CacheError


class TestCachePath:
    """Tests for cache path derivation."""

    def test_path_is_namespaced_by_project(self, store: CacheStore, base_dir: Path) -> None:
        assert store.cache_path("demo") == base_dir / "demo" / "cache.json"

    def test_path_is_deterministic(self, store: CacheStore) -> None:
        assert store.cache_path("demo") == store.cache_path("demo")
        assert store.cache_path("demo") != store.cache_path("other")

    def test_cache_dir(self, store: CacheStore, base_dir: Path) -> None:
        assert store.cache_dir("demo") == base_dir / "demo"

    def test_legacy_domain_scoped_id(self, store: CacheStore, base_dir: Path) -> None:
        path = store.cache_path("example.com:legacy-project")
        assert base_dir in path.parents

    @pytest.mark.parametrize(
        "project_id", ["", ".", "..", "../escape", "nested/project", "a\\b", "/abs/dir"]
    )
    def test_rejects_ids_that_leave_base_dir(self, store: CacheStore, project_id: str) -> None:
        with pytest.raises(CacheError) as exc_info:
            store.cache_path(project_id)
        assert "invalid project id" in str(exc_info.value)

    def test_absolute_id_does_not_escape(self, tmp_path: Path) -> None:
        store = CacheStore(tmp_path / "base")
        with pytest.raises(CacheError):
            store.cache_path(str(tmp_path / "elsewhere"))
        assert not (tmp_path / "elsewhere").exists()


class TestCacheIO:
    """Tests for reading and writing cache files."""

    def test_exists(self, store: CacheStore) -> None:
        path = store.cache_path("demo")
        assert not store.exists(path)
        store.ensure_dir(path)
        store.write(path, b"[]")
        assert store.exists(path)

    def test_ensure_dir_creates_parents(self, store: CacheStore) -> None:
        path = store.cache_path("nested-project")
        store.ensure_dir(path)
        assert path.parent.is_dir()

    def test_ensure_dir_tolerates_existing(self, store: CacheStore) -> None:
        path = store.cache_path("demo")
        store.ensure_dir(path)
        store.ensure_dir(path)
        assert path.parent.is_dir()

    def test_ensure_dir_fails_when_parent_is_a_file(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = CacheStore(blocker)
        with pytest.raises(CacheError):
            store.ensure_dir(store.cache_path("demo"))

    def test_write_truncates(self, store: CacheStore) -> None:
        path = store.cache_path("demo")
        store.ensure_dir(path)
        store.write(path, b'[{"displayName": "long", "name": "x"}]')
        store.write(path, b"[]")
        assert store.read(path) == b"[]"

    def test_write_without_directory_fails(self, store: CacheStore) -> None:
        with pytest.raises(CacheError) as exc_info:
            store.write(store.cache_path("missing"), b"[]")
        assert exc_info.value.path == store.cache_path("missing")

    def test_read_missing_file_fails(self, store: CacheStore) -> None:
        with pytest.raises(CacheError):
            store.read(store.cache_path("never-written"))

    def test_read_returns_raw_bytes(self, store: CacheStore) -> None:
        path = store.cache_path("demo")
        store.ensure_dir(path)
        store.write(path, b"\x5b\x5d")
        assert store.read(path) == b"[]"

    @pytest.mark.skipif(
        sys.platform == "win32" or os.geteuid() == 0, reason="requires POSIX permissions"
    )
    def test_read_unreadable_file_fails(self, store: CacheStore) -> None:
        path = store.cache_path("locked")
        store.ensure_dir(path)
        store.write(path, b"[]")
        path.chmod(0)
        try:
            with pytest.raises(CacheError):
                store.read(path)
        finally:
            path.chmod(0o644)

    def test_remove(self, store: CacheStore) -> None:
        path = store.cache_path("demo")
        store.ensure_dir(path)
        store.write(path, b"[]")
        store.remove(path)
        assert not path.exists()
        store.remove(path)
