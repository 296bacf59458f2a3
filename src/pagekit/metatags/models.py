# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Pydantic models for SEO input (params, config) and output (meta tags).

Field names are snake_case; camelCase aliases (``secureUrl``,
``disableTitleSuffix``, ...) are accepted on input so that configuration
shared with JavaScript front ends validates unchanged.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pagekit.titles import as_title_template

# One metadata record: {"name"|"property"|"http-equiv": key, "content": value},
# or a raw {"charset": ...} / {"title": ...} record.
MetaTag = dict[str, str]

OgType = Literal[
    "website",
    "article",
    "book",
    "profile",
    "music.song",
    "music.album",
    "video.movie",
    "video.episode",
]

TwitterCard = Literal["summary", "summary_large_image", "app", "player"]

DateInput = datetime | date | str

_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class SeoImage(BaseModel):
    """An Open Graph image. Bare URL strings are normalized via ``from_value``."""

    model_config = _MODEL_CONFIG

    url: str
    alt: str | None = None
    width: int | None = None
    height: int | None = None
    type: str | None = Field(None, description="MIME type, e.g. image/png")
    secure_url: str | None = None

    @classmethod
    def from_value(cls, value: SeoImage | str | dict) -> SeoImage:
        if isinstance(value, SeoImage):
            return value
        if isinstance(value, str):
            return cls(url=value)
        return cls.model_validate(value)


class Verification(BaseModel):
    """Search-engine ownership tokens."""

    model_config = _MODEL_CONFIG

    google: str | None = None
    yandex: str | None = None
    bing: str | None = None


class TwitterParams(BaseModel):
    model_config = _MODEL_CONFIG

    site: str | None = None
    creator: str | None = None
    card: TwitterCard | None = None


class SeoConfig(BaseModel):
    """Site-wide defaults read by every ``seo()`` call."""

    model_config = _MODEL_CONFIG

    site_name: str = "My Site"
    site_url: str | None = None
    locale: str | None = "en_US"
    twitter_site: str | None = None
    twitter_creator: str | None = None
    title_template: Any = None
    default_robots: str | None = "index,follow"  # informational: seo() always builds robots from the page flags
    default_image: SeoImage | str | None = None
    description_max_length: int | None = 160
    theme_color: str | None = None
    verification: Verification | None = None

    @field_validator("title_template", mode="before")
    @classmethod
    def _coerce_title_template(cls, value: Any) -> Any:
        return as_title_template(value)


class SeoParams(BaseModel):
    """Per-page input to ``seo()``. Only ``title`` is required."""

    model_config = _MODEL_CONFIG

    # Core metadata
    title: str
    description: str | None = None
    keywords: str | list[str] | None = None
    canonical: str | None = None

    # Site overrides
    site_name: str | None = None
    site_url: str | None = None
    locale: str | None = None
    type: str | None = None  # an OgType value

    # Indexing
    robots: str | None = None
    noindex: bool = False
    nofollow: bool = False

    images: list[SeoImage | str] | None = None

    # Article
    published_time: DateInput | None = None
    modified_time: DateInput | None = None
    author: str | None = None
    section: str | None = None
    tags: list[str] | None = None

    twitter: TwitterParams | None = None

    # Advanced
    viewport: str | dict[str, str | int | float | None] | None = None
    charset: str | None = Field(None, alias="charSet")
    theme_color: str | None = None
    description_max_length: int | None = None
    disable_title_suffix: bool = False
    title_template: Any = None

    verification: Verification | None = None

    json_ld: dict[str, Any] | list[dict[str, Any]] | None = None

    @field_validator("title_template", mode="before")
    @classmethod
    def _coerce_title_template(cls, value: Any) -> Any:
        return as_title_template(value)
