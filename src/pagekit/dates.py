# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Date normalization to a canonical UTC timestamp string."""

from __future__ import annotations

from datetime import UTC, date, datetime, time


def _parse(value: str) -> datetime | None:
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def to_iso(value: datetime | date | str | None) -> str | None:
    """Return ``value`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` (UTC), or None.

    Accepts datetimes, dates (midnight) and ISO-8601 strings. Naive values
    are taken as UTC. Empty or unparseable input yields None, never an error.
    """
    if not value:
        return None

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time.min)
    elif isinstance(value, str):
        moment = _parse(value)
        if moment is None:
            return None
    else:
        return None

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    try:
        moment = moment.astimezone(UTC)
    except (OverflowError, ValueError):
        # offset pushes the instant outside datetime.min..datetime.max
        return None
    return moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
