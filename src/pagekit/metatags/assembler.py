# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""SEO meta-tag assembly: SeoParams + SeoConfig -> ordered list of MetaTag.

Emission order (fixed, so output is reproducible):
charset, "name" placeholder, viewport, title, basic name tags, canonical,
verification, Open Graph, og:image blocks, article:*, twitter:*.

Precedence everywhere is page params > site config > built-in default.
A tag whose content is missing or blank after ``str().strip()`` is skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pagekit.dates import to_iso
from pagekit.metatags.models import DateInput, MetaTag, SeoConfig, SeoImage, SeoParams
from pagekit.text import compact_text
from pagekit.titles import make_title

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"
DEFAULT_DESCRIPTION_MAX_LENGTH = 160
DEFAULT_OG_TYPE = "website"


class _TagList:
    """Ordered MetaTag accumulator."""

    __slots__ = ("tags",)

    def __init__(self) -> None:
        self.tags: list[MetaTag] = []

    def add(self, tag: MetaTag) -> None:
        self.tags.append(tag)

    def add_if_value(self, key_type: str, key_name: str, content: object) -> None:
        if content is None:
            return
        text = str(content)
        if text.strip():
            self.tags.append({key_type: key_name, "content": text})


# --- Helpers ---


def resolve_url(path: str, site_url: str | None) -> str:
    """Make ``path`` absolute against ``site_url`` with exactly one joining slash.

    Values that already start with "http" pass through; without a site URL
    the path is returned as-is.
    """
    if path.startswith("http") or not site_url:
        return path
    joiner = "" if path.startswith("/") else "/"
    return f"{site_url.removesuffix('/')}{joiner}{path}"


def resolve_robots(params: SeoParams) -> str:
    """Explicit ``robots`` wins, otherwise "<index|noindex>,<follow|nofollow>" from the flags."""
    if params.robots:
        return params.robots
    index = "noindex" if params.noindex else "index"
    follow = "nofollow" if params.nofollow else "follow"
    return f"{index},{follow}"


def collect_images(params: SeoParams, config: SeoConfig) -> list[SeoImage]:
    """Page images first, then the configured default; first URL wins."""
    candidates = [SeoImage.from_value(image) for image in params.images or []]
    if config.default_image:
        candidates.append(SeoImage.from_value(config.default_image))

    seen: set[str] = set()
    images: list[SeoImage] = []
    for image in candidates:
        if image.url in seen:
            continue
        seen.add(image.url)
        images.append(image)
    return images


def viewport_content(viewport: str | Mapping[str, object]) -> str:
    if isinstance(viewport, str):
        return viewport
    return ", ".join(f"{key}={value}" for key, value in viewport.items() if value is not None)


def _normalize_date(value: DateInput | None, field: str) -> str | None:
    iso = to_iso(value)
    if value and iso is None:
        logger.debug("Dropping unparseable %s: %r", field, value)
    return iso


# --- Assembly ---


def assemble(params: SeoParams, config: SeoConfig) -> list[MetaTag]:
    """Build the ordered meta tag list for one page."""
    site_name = params.site_name or config.site_name
    locale = params.locale or config.locale or DEFAULT_LOCALE
    site_url = params.site_url or config.site_url
    max_length = params.description_max_length
    if max_length is None:
        max_length = config.description_max_length
    if max_length is None:
        max_length = DEFAULT_DESCRIPTION_MAX_LENGTH

    template = params.title_template if params.title_template is not None else config.title_template
    title = make_title(params.title, site_name, template=template, disable_suffix=params.disable_title_suffix)
    description = compact_text(params.description, max_length=max_length)
    keywords = ", ".join(params.keywords) if isinstance(params.keywords, list) else params.keywords
    robots = resolve_robots(params)

    images = collect_images(params, config)
    primary_image = images[0] if images else None
    og_type = params.type or DEFAULT_OG_TYPE
    twitter = params.twitter
    twitter_card = (twitter.card if twitter else None) or ("summary_large_image" if primary_image else "summary")

    published_time = _normalize_date(params.published_time, "published_time")
    modified_time = _normalize_date(params.modified_time, "modified_time")

    twitter_site = (twitter.site if twitter else None) or config.twitter_site
    twitter_creator = (twitter.creator if twitter else None) or config.twitter_creator

    out = _TagList()

    # Character set & viewport
    if params.charset:
        out.add({"charset": params.charset})

    out.add({"name": ""})

    if params.viewport:
        out.add_if_value("name", "viewport", viewport_content(params.viewport))

    # Basic tags
    out.add({"title": title})
    out.add_if_value("name", "description", description)
    out.add_if_value("name", "keywords", keywords)
    out.add_if_value("name", "robots", robots)
    out.add_if_value("name", "author", params.author)
    out.add_if_value("name", "theme-color", params.theme_color or config.theme_color)

    if params.canonical:
        out.add_if_value("name", "canonical", resolve_url(params.canonical, site_url))

    # Verification: a page-level object replaces the site-level one wholesale
    verification = params.verification if params.verification is not None else config.verification
    if verification is not None:
        out.add_if_value("name", "google-site-verification", verification.google)
        out.add_if_value("name", "yandex-verification", verification.yandex)
        out.add_if_value("name", "msvalidate.01", verification.bing)

    # Open Graph
    out.add_if_value("property", "og:type", og_type)
    out.add_if_value("property", "og:title", title)
    out.add_if_value("property", "og:description", description)
    out.add_if_value("property", "og:site_name", site_name)
    out.add_if_value("property", "og:locale", locale)

    if params.canonical and site_url:
        out.add_if_value("property", "og:url", resolve_url(params.canonical, site_url))

    for image in images:
        out.add_if_value("property", "og:image", image.url)
        out.add_if_value("property", "og:image:secure_url", image.secure_url)
        out.add_if_value("property", "og:image:alt", image.alt)
        out.add_if_value("property", "og:image:type", image.type)
        out.add_if_value("property", "og:image:width", image.width)
        out.add_if_value("property", "og:image:height", image.height)

    if og_type == "article":
        out.add_if_value("property", "article:published_time", published_time)
        out.add_if_value("property", "article:modified_time", modified_time)
        out.add_if_value("property", "article:author", params.author)
        out.add_if_value("property", "article:section", params.section)
        for tag in params.tags or []:
            out.add_if_value("property", "article:tag", tag)

    # Twitter card
    out.add_if_value("name", "twitter:card", twitter_card)
    out.add_if_value("name", "twitter:title", title)
    out.add_if_value("name", "twitter:description", description)
    out.add_if_value("name", "twitter:site", twitter_site)
    out.add_if_value("name", "twitter:creator", twitter_creator)

    if primary_image is not None:
        out.add_if_value("name", "twitter:image", primary_image.url)
        out.add_if_value("name", "twitter:image:alt", primary_image.alt)

    return out.tags
