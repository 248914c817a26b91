# src/output/renderers.py — v1
"""Inclusion markup for internalized assets.

Pure formatting: a resolved URL plus an attribute mapping becomes a <link> or
<script> tag with the cache-busting suffix appended.
"""

from __future__ import annotations

import html
from collections.abc import Mapping
from urllib.parse import urlsplit

Attributes = Mapping[str, str | bool | None]


def render_attributes(attributes: Attributes | None) -> str:
    """Serialize attributes; True or empty values render a bare name."""
    if not attributes:
        return ""
    parts = []
    for key, value in attributes.items():
        if value is True or not value:
            parts.append(f" {key}")
        else:
            parts.append(f' {key}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


def render_css(url: str, attributes: Attributes | None = None, suffix: str = "") -> str:
    return (
        f'<link href="{url}{suffix}"{render_attributes(attributes)}'
        ' rel="stylesheet" type="text/css" />\n'
    )


def render_js(url: str, attributes: Attributes | None = None, suffix: str = "") -> str:
    return f'<script src="{url}{suffix}"{render_attributes(attributes)}></script>\n'


def render_file(path: str, attributes: Attributes | None = None, suffix: str = "") -> str:
    """Pick the renderer from the path extension; other extensions render nothing."""
    name = urlsplit(path).path if "://" in path else path.split("?", 1)[0]
    if name.endswith(".js"):
        return render_js(path, attributes, suffix)
    if name.endswith(".css"):
        return render_css(path, attributes, suffix)
    return ""
