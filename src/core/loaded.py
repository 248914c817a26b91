# src/core/loaded.py — v1
"""Per-run memory of resolved paths already processed."""

from __future__ import annotations


class LoadedSet:
    """Insertion-ordered set of resolved paths. Entries are never removed."""

    def __init__(self) -> None:
        self._loaded: list[str] = []

    def mark_as_loaded(self, path: str) -> None:
        if not self.is_loaded(path):
            self._loaded.append(path)

    def is_loaded(self, path: str) -> bool:
        return path in self._loaded

    def loaded(self) -> list[str]:
        """All tracked paths in insertion order."""
        return list(self._loaded)

    def __contains__(self, path: object) -> bool:
        return path in self._loaded

    def __len__(self) -> int:
        return len(self._loaded)
