# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""pick(): copy selected keys out of a mapping, optionally curried."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, overload

_MISSING: Any = object()


@overload
def pick(names: Iterable[str], obj: Mapping[str, Any]) -> dict[str, Any]: ...


@overload
def pick(names: Iterable[str]) -> Callable[[Mapping[str, Any]], dict[str, Any]]: ...


def pick(names, obj=_MISSING):
    """Return a new dict with only the ``names`` present in ``obj``.

    Missing keys are skipped. Called with ``names`` alone, returns a picker
    function for later use:

    >>> pick(["a", "c"], {"a": 1, "b": 2, "c": 3})
    {'a': 1, 'c': 3}
    >>> pick_ac = pick(["a", "c"])
    >>> pick_ac({"a": 1, "d": 4})
    {'a': 1}
    """
    names = tuple(names)
    if obj is _MISSING:
        return lambda target: pick(names, target)
    return {name: obj[name] for name in names if name in obj}
