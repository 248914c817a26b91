# tests/unit/storage/test_filesystem.py — v1
"""Tests for storage/filesystem.py."""

from __future__ import annotations

import pytest

from basset.core.errors import FetchError, StorageWriteError
from basset.storage.filesystem import LocalFilesystem


@pytest.fixture
def fs() -> LocalFilesystem:
    return LocalFilesystem()


class TestLocalFilesystem:
    def test_write_and_read(self, fs, tmp_path):
        target = tmp_path / "a" / "b.bin"
        fs.write(target, b"\x00\x01")
        assert fs.read(target) == b"\x00\x01"
        assert fs.is_file(target)
        assert fs.is_dir(tmp_path / "a")

    def test_write_failure_raises(self, fs, tmp_path):
        (tmp_path / "blocker").write_text("a file, not a directory")
        with pytest.raises(StorageWriteError, match="Cannot write"):
            fs.write(tmp_path / "blocker" / "x.bin", b"x")

    def test_read_missing_raises(self, fs, tmp_path):
        with pytest.raises(FetchError, match="Cannot read"):
            fs.read(tmp_path / "missing.js")

    def test_delete_file(self, fs, tmp_path):
        target = tmp_path / "x.txt"
        target.write_text("x")
        fs.delete(target)
        assert not target.exists()

    def test_delete_directory(self, fs, tmp_path):
        (tmp_path / "d" / "e").mkdir(parents=True)
        (tmp_path / "d" / "e" / "f.txt").write_text("f")
        fs.delete(tmp_path / "d")
        assert not (tmp_path / "d").exists()

    def test_delete_missing_is_ignored(self, fs, tmp_path):
        fs.delete(tmp_path / "nothing")

    def test_all_files(self, fs, tmp_path):
        (tmp_path / "src" / "js").mkdir(parents=True)
        (tmp_path / "src" / "js" / "b.js").write_text("b")
        (tmp_path / "src" / "a.css").write_text("a")
        assert fs.all_files(tmp_path / "src") == ["a.css", "js/b.js"]

    def test_all_files_missing_dir(self, fs, tmp_path):
        assert fs.all_files(tmp_path / "nope") == []
