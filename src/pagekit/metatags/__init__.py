# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""SEO meta-tag generation.

Usage:
    from pagekit.metatags import configure_seo, seo

    configure_seo(site_name="Acme", site_url="https://acme.test")
    tags = seo({"title": "About", "description": "Who we are", "canonical": "/about"})
"""

from __future__ import annotations

from pagekit.metatags.assembler import assemble, resolve_url
from pagekit.metatags.builders import create_article_seo, create_page_seo, create_profile_seo, merge_seo_params
from pagekit.metatags.context import (
    SeoContext,
    configure_seo,
    default_context,
    get_seo_config,
    reset_seo_config,
    seo,
)
from pagekit.metatags.models import MetaTag, SeoConfig, SeoImage, SeoParams, TwitterParams, Verification
from pagekit.metatags.render import json_ld_script, render_meta_tags

__all__ = [
    "MetaTag",
    "SeoConfig",
    "SeoContext",
    "SeoImage",
    "SeoParams",
    "TwitterParams",
    "Verification",
    "assemble",
    "configure_seo",
    "create_article_seo",
    "create_page_seo",
    "create_profile_seo",
    "default_context",
    "get_seo_config",
    "json_ld_script",
    "merge_seo_params",
    "render_meta_tags",
    "reset_seo_config",
    "resolve_url",
    "seo",
]
