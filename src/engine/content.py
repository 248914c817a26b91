# src/engine/content.py — v1
"""Content post-processing applied before an asset is written to storage."""

from __future__ import annotations

import re

_SOURCE_MAP = b"sourceMappingURL="

# Opening or closing <script>/<style> tag, with any leading whitespace.
_WRAPPING_TAG = re.compile(r"^\s*</?(script|style).*?/?\s*?>", re.MULTILINE | re.DOTALL)
_LEADING_BLANK_LINES = re.compile(r"^(?:[\t ]*(?:\r?\n|\r))+")
_LEADING_WHITESPACE = re.compile(r"^\s*")


def strip_source_maps(content: bytes) -> bytes:
    """Drop sourceMappingURL directives; the maps are not internalized alongside."""
    return content.replace(_SOURCE_MAP, b"")


def clean_block(code: str) -> str:
    """Normalize an inline code block.

    Removes wrapping <script>/<style> tags and leading blank lines, then strips
    the first line's indentation from every line that starts with it.

    >>> clean_block("<script>\\n    a();\\n    b();\\n</script>")
    'a();\\nb();\\n'
    """
    code = _WRAPPING_TAG.sub("", code)
    code = _LEADING_BLANK_LINES.sub("", code)

    indent = _LEADING_WHITESPACE.match(code).group(0)
    if not indent:
        return code
    return re.sub("^" + re.escape(indent), "", code, flags=re.MULTILINE)
