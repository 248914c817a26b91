# src/logging/logger.py — v1
"""JSON and text formatters for the basset logger tree.

Both formatters read the asset context from basset.logging.context, so a
message logged anywhere inside an engine operation carries the asset it
concerns without the caller passing it along.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from basset.logging.context import LogContext, get_context

# Third-party loggers that are chatty at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "botocore", "boto3", "urllib3")


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JsonFormatter(logging.Formatter):
    """One JSON object per line; asset context nested under "context"."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": _timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = get_context().as_dict()
        if context:
            entry["context"] = context
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Console format: time, level, logger, then <command> [kind] (asset)."""

    @staticmethod
    def _tags(ctx: LogContext) -> list[str]:
        tags = []
        if ctx.command:
            tags.append(f"<{ctx.command}>")
        if ctx.kind:
            tags.append(f"[{ctx.kind}]")
        if ctx.asset:
            tags.append(f"({ctx.asset})")
        return tags

    def format(self, record: logging.LogRecord) -> str:
        head = [
            _timestamp(record).strftime("%Y-%m-%d %H:%M:%S"),
            f"[{record.levelname:8s}]",
            record.name,
        ]
        line = " ".join(head + self._tags(get_context()) + [f"- {record.getMessage()}"])
        if record.exc_info and record.exc_info[1] is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: str | None = None,
    rotation: str = "10MB",
    retention: int = 5,
) -> logging.Logger:
    """Attach handlers to the "basset" logger and return it.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Level name; unknown names fall back to INFO.
        log_format: "json" or "text".
        log_file: Optional rotating log file, written next to stderr output.
        rotation: Size limit per file, e.g. "10MB".
        retention: Rotated files kept.
    """
    formatter: logging.Formatter = JsonFormatter() if log_format == "json" else TextFormatter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        from basset.logging.handlers import create_rotating_handler

        handlers.append(
            create_rotating_handler(log_file, rotation=rotation, retention=retention)
        )

    root = logging.getLogger("basset")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return root
