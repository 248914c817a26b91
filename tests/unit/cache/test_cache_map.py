# tests/unit/cache/test_cache_map.py — v1
"""Tests for cache/cache_map.py — persistent identifier index."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

from basset.cache.cache_map import CacheMap
from basset.storage.local_disk import LocalDisk

CDN = "https://cdn.example.com/lib.js"
CDN_URL = "/storage/basset/cdn.example.com/lib.js"


def _map(disk, cache_disk, root, enabled=True) -> CacheMap:
    return CacheMap(
        disk=disk, cache_map_disk=cache_disk, base_path="basset/",
        cache_path="basset", enabled=enabled, root=str(root),
    )


class TestLoad:
    def test_absent_file_is_empty(self, cache_map):
        assert cache_map.entries() == {}
        assert cache_map.dirty is False

    def test_loads_existing_file(self, disk, cache_disk, repo_root):
        file = cache_disk.root / "basset.basset"
        file.parent.mkdir(parents=True)
        file.write_text(json.dumps({"vendor/a.js": "/vendor/a.js"}))
        cm = _map(disk, cache_disk, repo_root)
        assert cm.get("vendor/a.js") == "/storage/basset/vendor/a.js"

    def test_corrupt_file_is_ignored(self, disk, cache_disk, repo_root):
        file = cache_disk.root / "basset.basset"
        file.parent.mkdir(parents=True)
        file.write_text("{not json")
        assert _map(disk, cache_disk, repo_root).entries() == {}

    def test_non_object_file_is_ignored(self, disk, cache_disk, repo_root):
        file = cache_disk.root / "basset.basset"
        file.parent.mkdir(parents=True)
        file.write_text("[1, 2]")
        assert _map(disk, cache_disk, repo_root).entries() == {}

    def test_non_string_values_are_presence_only(self, disk, cache_disk, repo_root):
        file = cache_disk.root / "basset.basset"
        file.parent.mkdir(parents=True)
        file.write_text(json.dumps({"vendor/a.js": None, "vendor/b.js": True}))
        cm = _map(disk, cache_disk, repo_root)
        assert cm.entries() == {"vendor/a.js": "", "vendor/b.js": ""}
        assert cm.get("vendor/a.js") is None
        assert cm.has("vendor/a.js")
        assert cm.has("vendor/b.js")


class TestAddGet:
    def test_add_url_stores_relative_value(self, cache_map):
        cache_map.add(CDN, CDN_URL)
        assert cache_map.entries() == {CDN: "/cdn.example.com/lib.js"}
        assert cache_map.dirty is True

    def test_get_rebuilds_public_url(self, cache_map):
        cache_map.add(CDN, CDN_URL)
        assert cache_map.get(CDN) == CDN_URL

    def test_get_missing(self, cache_map):
        assert cache_map.get("https://cdn.example.com/other.js") is None

    def test_local_identifier_strips_root(self, cache_map, repo_root):
        cache_map.add(f"{repo_root}/vendor/lib.js", "/storage/basset/vendor/lib.js")
        assert cache_map.entries() == {"vendor/lib.js": "/vendor/lib.js"}
        assert cache_map.get(f"{repo_root}/vendor/lib.js") == "/storage/basset/vendor/lib.js"

    def test_value_without_disk_prefix_gets_leading_slash(self, cache_map):
        cache_map.add("k.js", "somewhere/k.js")
        assert cache_map.entries()["k.js"] == "/somewhere/k.js"

    def test_presence_only(self, cache_map):
        cache_map.add("https://cdn.example.com/pkg.zip")
        assert cache_map.entries() == {"https://cdn.example.com/pkg.zip": ""}
        assert cache_map.get("https://cdn.example.com/pkg.zip") is None
        assert cache_map.has("https://cdn.example.com/pkg.zip") is True

    def test_has_missing(self, cache_map):
        assert cache_map.has(CDN) is False


class TestSave:
    def test_save_without_changes_writes_nothing(self, cache_map, cache_disk):
        cache_map.save()
        assert not (cache_disk.root / "basset.basset").exists()

    def test_save_sorted_and_unescaped(self, cache_map, cache_disk):
        cache_map.add("https://b.example.com/b.js", "/storage/basset/b.example.com/b.js")
        cache_map.add("https://a.example.com/a.js", "/storage/basset/a.example.com/a.js")
        cache_map.save()

        text = (cache_disk.root / "basset.basset").read_text()
        assert list(json.loads(text)) == [
            "https://a.example.com/a.js", "https://b.example.com/b.js",
        ]
        assert "\\/" not in text
        assert "\n    " in text
        assert cache_map.dirty is False

    def test_round_trip(self, cache_map, disk, cache_disk, repo_root):
        cache_map.add(CDN, CDN_URL)
        cache_map.add("https://cdn.example.com/pkg.zip")
        cache_map.save()

        reloaded = _map(disk, cache_disk, repo_root)
        assert reloaded.entries() == cache_map.entries()
        assert reloaded.get(CDN) == CDN_URL

    def test_portable_across_roots(self, disk, cache_disk, tmp_path):
        first = _map(disk, cache_disk, tmp_path / "checkout-a")
        first.add(f"{tmp_path}/checkout-a/vendor/x.css", "/storage/basset/vendor/x.css")
        first.save()

        second = _map(disk, cache_disk, tmp_path / "checkout-b")
        assert second.get(f"{tmp_path}/checkout-b/vendor/x.css") == "/storage/basset/vendor/x.css"


class TestDisabled:
    def test_no_io_at_all(self):
        disk = MagicMock()
        cache_disk = MagicMock()
        cm = CacheMap(disk, cache_disk, "basset/", "basset", enabled=False)

        cm.add(CDN, CDN_URL)
        cm.add("archive.zip")
        assert cm.get(CDN) is None
        assert cm.has("archive.zip") is False
        cm.save()

        cache_disk.path.assert_not_called()
        disk.url.assert_not_called()
        assert cm.entries() == {}
        assert cm.file is None

    def test_existing_file_not_read(self, disk, cache_disk, repo_root):
        file = cache_disk.root / "basset.basset"
        file.parent.mkdir(parents=True)
        file.write_text(json.dumps({CDN: "/cdn.example.com/lib.js"}))
        cm = _map(disk, cache_disk, repo_root, enabled=False)
        assert cm.get(CDN) is None
        assert cm.enabled is False


class TestCustomDisk:
    def test_absolute_disk_url(self, tmp_path, cache_disk):
        disk = LocalDisk(tmp_path / "public", url="https://static.example.com/")
        cm = _map(disk, cache_disk, tmp_path)
        cm.add(CDN, "https://static.example.com/basset/cdn.example.com/lib.js")
        assert cm.entries()[CDN] == "/cdn.example.com/lib.js"
        assert cm.get(CDN) == "https://static.example.com/basset/cdn.example.com/lib.js"
