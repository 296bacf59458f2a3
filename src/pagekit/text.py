# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Short-text helpers: whitespace compaction with ellipsis, name initials."""

from __future__ import annotations

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")

# Combining diacritical marks left over after NFD decomposition
_COMBINING_MARKS_RE = re.compile(r"[\u0300-\u036f]")

DEFAULT_ELLIPSIS = "…"


def compact_text(
    text: str | None,
    *,
    max_length: int | None = None,
    ellipsis: str = DEFAULT_ELLIPSIS,
) -> str | None:
    """Collapse whitespace and hard-truncate to ``max_length`` characters.

    - ``None`` / ``""`` -> ``None``
    - whitespace runs become a single space, ends are trimmed
    - no limit, a non-positive limit, or text that fits -> cleaned text
    - otherwise the text is cut so that text + ellipsis fits in ``max_length``,
      with trailing whitespace removed before the ellipsis
    """
    if not text:
        return None

    clean = _WHITESPACE_RE.sub(" ", text).strip()

    if not max_length or max_length <= 0 or len(clean) <= max_length:
        return clean

    return clean[: max(max_length - len(ellipsis), 0)].rstrip() + ellipsis


def get_initial_letter(full_name: str | None, fallback: str = "?") -> str:
    """Uppercase initials of the first two name parts, diacritics stripped.

    "John Doe" -> "JD", " Beyoncé  Knowles-Carter" -> "BK", "Cher" -> "C",
    blank or None -> ``fallback``.
    """
    cleaned = (full_name or "").strip()
    if not cleaned:
        return fallback

    initials = []
    for part in cleaned.split()[:2]:
        letter = unicodedata.normalize("NFD", part[0])
        initials.append(_COMBINING_MARKS_RE.sub("", letter).upper())
    return "".join(initials)
