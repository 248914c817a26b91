# src/logging/context.py — v1
"""Contextual logging support: attach the asset being processed to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set per engine operation, read by both formatters.
_asset: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "asset", default=None
)
_kind: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "kind", default=None
)
_command: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "command", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    asset: str | None = None
    kind: str | None = None
    command: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        asset=_asset.get(),
        kind=_kind.get(),
        command=_command.get(),
    )


def set_asset_context(asset: str, kind: str) -> None:
    """Set asset-level context (called at the start of each engine operation)."""
    _asset.set(asset)
    _kind.set(kind)


def set_command_context(command: str) -> None:
    """Set CLI command context."""
    _command.set(command)


def clear_asset_context() -> None:
    """Reset asset-level context only."""
    _asset.set(None)
    _kind.set(None)


def clear_context() -> None:
    """Reset all context variables."""
    _asset.set(None)
    _kind.set(None)
    _command.set(None)
