# src/core/paths.py — v1
"""Asset identifier -> storage-relative path sanitization.

Pure string transforms, no I/O. Every identifier (absolute local path, CDN URL,
inline-block key) maps to a path under the configured base path that is safe
for both a URL and a filesystem.
"""

from __future__ import annotations

import re

# Characters never allowed in a resolved path.
UNSAFE_CHARACTERS = "<>:\"|?\0*`;'+"

_PROTOCOL_MARKERS = ("https://", "http://", "://")
_UNSAFE_CLASS = "[" + re.escape(UNSAFE_CHARACTERS) + "]"


def _blacklist_pattern(root: str) -> re.Pattern[str]:
    alternatives = [re.escape(marker) for marker in _PROTOCOL_MARKERS]
    if root:
        alternatives.insert(0, re.escape(root))
    alternatives.append(_UNSAFE_CLASS)
    return re.compile("|".join(alternatives))


def normalize_base_path(base_path: str) -> str:
    """Return base path with backslashes normalized and exactly one trailing '/'."""
    return base_path.replace("\\", "/").rstrip("/") + "/"


def sanitize(identifier: str, root: str = "") -> str:
    """Strip the repository root, protocol markers and unsafe characters.

    One left-to-right regex pass; the remainder is split on separators and
    empty, '.' and '..' segments are dropped.
    """
    cleaned = _blacklist_pattern(root).sub("", identifier)
    segments = cleaned.replace("\\", "/").split("/")
    return "/".join(s for s in segments if s not in ("", ".", ".."))


def resolve_path(identifier: str, base_path: str, root: str = "") -> str:
    """Map an asset identifier to its storage-relative path.

    >>> resolve_path("https://cdn.example.com/lib.js", "basset")
    'basset/cdn.example.com/lib.js'
    """
    return normalize_base_path(base_path) + sanitize(identifier, root)


def cache_busting_suffix(token: str | None) -> str:
    """Query-string suffix appended to every emitted URL ('' when unset)."""
    if not token:
        return ""
    return token if token.startswith("?") else f"?{token}"


def strip_root(identifier: str, root: str) -> str:
    """Text after the first occurrence of root (identifier unchanged if absent)."""
    if root and root in identifier:
        return identifier.split(root, 1)[1]
    return identifier


def is_remote(identifier: str) -> bool:
    """True for http(s) and protocol-relative references."""
    return identifier.startswith(("http", "://", "//"))


def is_local_absolute(identifier: str, root: str) -> bool:
    """True when the identifier is an absolute path inside the repository.

    The root must match whole path segments: "/srv/app2/x.js" is not inside "/srv/app".
    """
    if not root or identifier.startswith("//"):
        return False
    return identifier.startswith(root.rstrip("/") + "/")


def to_fetch_url(identifier: str) -> str:
    """Give protocol-relative references an explicit https scheme."""
    if identifier.startswith("://"):
        return f"https{identifier}"
    if identifier.startswith("//"):
        return f"https:{identifier}"
    return identifier
