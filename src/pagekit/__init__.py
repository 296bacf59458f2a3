# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""pagekit: small, stateless helpers for web pages.

- byte sizes: to_bytes("2.5mb") / from_bytes(1536) -> "1.50 KB"
- SEO meta tags: seo({"title": ...}) with site-wide defaults via configure_seo()
- text: compact_text(), get_initial_letter(); dates: to_iso()
- durations: format_time() / parse_time(); titles: make_title(); pick()
"""

from __future__ import annotations

from pagekit.byte_size import ByteUnit, create_byte_converter, from_bytes, to_bytes
from pagekit.dates import to_iso
from pagekit.durations import format_time, parse_time
from pagekit.errors import PageKitError
from pagekit.metatags import (
    SeoConfig,
    SeoContext,
    SeoImage,
    SeoParams,
    configure_seo,
    create_article_seo,
    create_page_seo,
    create_profile_seo,
    get_seo_config,
    merge_seo_params,
    render_meta_tags,
    reset_seo_config,
    seo,
)
from pagekit.picking import pick
from pagekit.text import compact_text, get_initial_letter
from pagekit.titles import CustomTemplate, LiteralTemplate, make_title

__version__ = "0.1.0"

__all__ = [
    "ByteUnit",
    "CustomTemplate",
    "LiteralTemplate",
    "PageKitError",
    "SeoConfig",
    "SeoContext",
    "SeoImage",
    "SeoParams",
    "compact_text",
    "configure_seo",
    "create_article_seo",
    "create_byte_converter",
    "create_page_seo",
    "create_profile_seo",
    "format_time",
    "from_bytes",
    "get_initial_letter",
    "get_seo_config",
    "make_title",
    "merge_seo_params",
    "parse_time",
    "pick",
    "render_meta_tags",
    "reset_seo_config",
    "seo",
    "to_bytes",
    "to_iso",
]
