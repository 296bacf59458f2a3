# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Convenience builders over seo(): page, article, profile, and param merging."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pagekit.metatags.context import SeoContext, seo
from pagekit.metatags.models import DateInput, MetaTag, SeoImage, SeoParams

# List-valued fields that merge_seo_params() concatenates instead of replacing
_CONCAT_FIELDS = ("images", "tags")


def create_page_seo(
    title: str,
    description: str | None = None,
    *,
    context: SeoContext | None = None,
    **overrides: Any,
) -> list[MetaTag]:
    """Basic page: title + description, anything else via keyword overrides."""
    return seo({"title": title, "description": description, **overrides}, context=context)


def create_article_seo(
    title: str,
    published_time: DateInput,
    *,
    description: str | None = None,
    author: str | None = None,
    modified_time: DateInput | None = None,
    image: SeoImage | str | None = None,
    tags: list[str] | None = None,
    section: str | None = None,
    canonical: str | None = None,
    context: SeoContext | None = None,
) -> list[MetaTag]:
    """Blog post / article: og:type=article, single image wrapped into a list."""
    params = SeoParams(
        title=title,
        description=description,
        author=author,
        published_time=published_time,
        modified_time=modified_time,
        tags=tags,
        section=section,
        canonical=canonical,
        type="article",
        images=[image] if image else None,
    )
    return seo(params, context=context)


def create_profile_seo(
    title: str,
    *,
    description: str | None = None,
    username: str | None = None,
    image: SeoImage | str | None = None,
    canonical: str | None = None,
    context: SeoContext | None = None,
) -> list[MetaTag]:
    """Profile page: og:type=profile, summary card, ``username`` as twitter:creator."""
    params = SeoParams(
        title=title,
        description=description,
        canonical=canonical,
        type="profile",
        images=[image] if image else None,
        twitter={"card": "summary", "creator": username},
    )
    return seo(params, context=context)


def _provided_fields(part: SeoParams | Mapping[str, Any]) -> dict[str, Any]:
    """Validated values for the keys ``part`` actually sets (title may be absent)."""
    if isinstance(part, SeoParams):
        model, has_title = part, True
    else:
        has_title = "title" in part
        model = SeoParams.model_validate(part if has_title else {"title": "", **part})
    return {
        name: getattr(model, name)
        for name in model.model_fields_set
        if name != "title" or has_title
    }


def merge_seo_params(*params: SeoParams | Mapping[str, Any]) -> SeoParams:
    """Left-to-right shallow merge, e.g. layout defaults + page specifics.

    ``images`` and ``tags`` concatenate. List-valued ``keywords`` append to
    the keywords so far (a string so far becomes its first item); a string
    ``keywords`` replaces them. Everything else is last-one-wins.
    """
    merged: dict[str, Any] = {"title": ""}

    for part in params:
        for name, value in _provided_fields(part).items():
            if name in _CONCAT_FIELDS and value is not None:
                merged[name] = [*(merged.get(name) or []), *value]
            elif name == "keywords" and isinstance(value, list):
                existing = merged.get("keywords")
                if isinstance(existing, str):
                    existing = [existing] if existing else []
                merged["keywords"] = [*(existing or []), *value]
            else:
                merged[name] = value

    return SeoParams.model_validate(merged)
