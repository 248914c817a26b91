# src/core/models.py — v1
"""Shared domain models used across modules.

No module redefines these types; everything imports them from core.models.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class StatusOutcome(str, Enum):
    """Terminal state of one internalization call.

    Closed set: consumers (CLI exit codes, facade, tests) switch over all four.
    """

    LOADED = "loaded"
    IN_CACHE = "in_cache"
    INTERNALIZED = "internalized"
    INVALID = "invalid"


class AssetKind(str, Enum):
    """Operation selector supplied by the caller."""

    FILE = "file"
    BLOCK = "block"
    ARCHIVE = "archive"
    DIRECTORY = "directory"


class AssetResult(BaseModel):
    """Outcome of one engine operation, with whatever it emitted."""

    kind: AssetKind
    identifier: str
    path: str
    status: StatusOutcome
    output: str = ""
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        """True unless the asset could not be internalized."""
        return self.status is not StatusOutcome.INVALID


class TimingRecord(BaseModel):
    """One measured engine operation."""

    status: StatusOutcome
    elapsed_ms: float
