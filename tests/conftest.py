# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides temp disks, a cache map, an HTTP fetcher on httpx.MockTransport and
a fully wired manager. No network access: every request hits the mock routes.
"""

from __future__ import annotations

import io
import tarfile
import zipfile
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from basset.archive.unarchiver import Unarchiver
from basset.cache.cache_map import CacheMap
from basset.engine.manager import BassetManager
from basset.engine.sources import AssetSource
from basset.fetch.http_fetcher import HttpFetcher
from basset.storage.local_disk import LocalDisk


# === FIXTURES: Filesystem ===


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Repository root local assets live under."""
    root = tmp_path / "app"
    root.mkdir()
    return root


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Directory the unarchiver creates temporary files in."""
    tmp = tmp_path / "tmp"
    tmp.mkdir()
    return tmp


@pytest.fixture
def disk(tmp_path: Path) -> LocalDisk:
    """Public asset disk served from /storage."""
    return LocalDisk(tmp_path / "public", url="/storage")


@pytest.fixture
def cache_disk(tmp_path: Path) -> LocalDisk:
    """Disk holding the cache map file."""
    return LocalDisk(tmp_path / "cache")


@pytest.fixture
def cache_map(disk: LocalDisk, cache_disk: LocalDisk, repo_root: Path) -> CacheMap:
    return CacheMap(
        disk=disk,
        cache_map_disk=cache_disk,
        base_path="basset/",
        cache_path="basset",
        enabled=True,
        root=str(repo_root),
    )


# === FIXTURES: HTTP ===


@pytest.fixture
def http_routes() -> dict[str, object]:
    """URL -> bytes body (200), int status, or exception to raise."""
    return {}


@pytest.fixture
def http_calls() -> list[str]:
    """Every URL requested through the mock transport, in order."""
    return []


@pytest.fixture
def fetcher(http_routes: dict[str, object], http_calls: list[str]):
    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        http_calls.append(url)
        route = http_routes.get(url, 404)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, int):
            return httpx.Response(route, request=request)
        return httpx.Response(200, content=route, request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    yield HttpFetcher(client=client)
    client.close()


# === FIXTURES: Engine ===


@pytest.fixture
def source(fetcher: HttpFetcher, temp_dir: Path) -> AssetSource:
    return AssetSource(fetcher=fetcher, unarchiver=Unarchiver(temp_dir=temp_dir))


@pytest.fixture
def manager(
    disk: LocalDisk, cache_map: CacheMap, source: AssetSource, repo_root: Path
) -> BassetManager:
    return BassetManager(
        disk=disk,
        cache_map=cache_map,
        source=source,
        base_path="basset",
        cachebusting="",
        root=str(repo_root),
    )


# === FIXTURES: Archives ===


def _zip_bytes(files: dict[str, bytes]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()


def _tar_gz_bytes(files: dict[str, bytes]) -> bytes:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for name, content in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(content)
            archive.addfile(info, io.BytesIO(content))
    return buffer.getvalue()


@pytest.fixture
def zip_bytes() -> Callable[[dict[str, bytes]], bytes]:
    """Build an in-memory zip archive from {name: content}."""
    return _zip_bytes


@pytest.fixture
def tar_gz_bytes() -> Callable[[dict[str, bytes]], bytes]:
    """Build an in-memory .tar.gz archive from {name: content}."""
    return _tar_gz_bytes


@pytest.fixture
def sample_archive_files() -> dict[str, bytes]:
    return {
        "css/theme.css": b"body { color: red; }",
        "js/app.js": b"console.log('app');",
        "fonts/icons.woff2": b"\x00\x01woff",
    }
