# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""HTML output for assembled tags and JSON-LD payloads.

Attribute values are HTML-escaped; JSON-LD escapes ``<`` so the payload
cannot close its own <script> element.
"""

from __future__ import annotations

import html as _html
import json
from collections.abc import Iterable

from pagekit.metatags.models import MetaTag, SeoParams

_KEY_ATTRIBUTES = ("name", "property", "http-equiv")


def _escape_attr(value: str) -> str:
    return _html.escape(value, quote=True)


def render_meta_tag(tag: MetaTag) -> str | None:
    """One tag as HTML, or None for records with nothing to render."""
    if "charset" in tag:
        return f'<meta charset="{_escape_attr(tag["charset"])}">'
    if "title" in tag:
        return f"<title>{_html.escape(tag['title'], quote=False)}</title>"
    for attr in _KEY_ATTRIBUTES:
        key = tag.get(attr)
        if key:
            content = _escape_attr(tag.get("content", ""))
            return f'<meta {attr}="{_escape_attr(key)}" content="{content}">'
    return None


def render_meta_tags(tags: Iterable[MetaTag]) -> str:
    """Newline-joined HTML for a seo() result; the empty name placeholder is dropped."""
    rendered = (render_meta_tag(tag) for tag in tags)
    return "\n".join(line for line in rendered if line)


def json_ld_script(params: SeoParams) -> str | None:
    """``<script type="application/ld+json">`` for ``params.json_ld``, or None."""
    if not params.json_ld:
        return None
    body = json.dumps(params.json_ld, ensure_ascii=False, separators=(",", ":"), default=str)
    body = body.replace("<", "\\u003c")
    return f'<script type="application/ld+json">{body}</script>'
