# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Title templates.

A template is either a LiteralTemplate ("%s - Acme", first ``%s`` replaced
by the title) or a CustomTemplate wrapping ``render(title, site) -> str``.
Plain strings and callables are coerced with ``as_title_template()``.

Without a usable template the site name is appended as ``"title | site"``
unless the title already mentions it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

PLACEHOLDER = "%s"


@dataclass(frozen=True)
class LiteralTemplate:
    pattern: str

    def apply(self, title: str, site: str) -> str:
        if PLACEHOLDER in self.pattern:
            return self.pattern.replace(PLACEHOLDER, title, 1)
        return append_site(title, site)


@dataclass(frozen=True)
class CustomTemplate:
    render: Callable[[str, str], str]

    def apply(self, title: str, site: str) -> str:
        return self.render(title, site)


TitleTemplate = LiteralTemplate | CustomTemplate


def as_title_template(value: object) -> TitleTemplate | None:
    """Coerce a str / callable / template (or None) into a TitleTemplate."""
    if value is None or isinstance(value, LiteralTemplate | CustomTemplate):
        return value
    if isinstance(value, str):
        return LiteralTemplate(value)
    if callable(value):
        return CustomTemplate(value)
    raise TypeError(f"title template must be a string or a callable, got {type(value).__name__}")


def append_site(title: str, site: str) -> str:
    if site.lower() in title.lower():
        return title
    return f"{title} | {site}"


def make_title(
    base: str,
    site: str,
    *,
    template: TitleTemplate | str | Callable[[str, str], str] | None = None,
    disable_suffix: bool = False,
) -> str:
    """Apply ``template`` to ``base``.

    >>> make_title("Careers", "Linkiri")
    'Careers | Linkiri'
    >>> make_title("Jobs in Tech", "Linkiri", template="%s - Powered by Linkiri")
    'Jobs in Tech - Powered by Linkiri'
    >>> make_title("Linkiri OG Preview", "Linkiri", disable_suffix=True)
    'Linkiri OG Preview'
    """
    if disable_suffix:
        return base
    resolved = as_title_template(template)
    if resolved is None:
        return append_site(base, site)
    return resolved.apply(base, site)
