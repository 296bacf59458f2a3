# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Human-readable byte sizes: "2.5kb" -> 2560 and back.

to_bytes() validates in a fixed order (base, format, suffix guard, number,
sign, unit) so that callers always see the most specific error first.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import StrEnum
from typing import Literal

from pagekit.errors import (
    InvalidBaseError,
    InvalidFormatError,
    InvalidNumberError,
    NegativeBytesError,
    NegativeValueError,
    UnsupportedUnitError,
)

logger = logging.getLogger(__name__)

ByteBase = Literal[1000, 1024]

MAX_SAFE_INTEGER = 2**53 - 1

# [sign] digits [.digits] [exponent] | nan | infinity, then an alphabetic unit.
# Matched against the lowercased, stripped input.
BYTE_RE = re.compile(
    r"([+-]?(?:[0-9]*\.?[0-9]+(?:e[+-]?[0-9]+)?|nan|infinity(?:-\w+)?))\s*([a-z]*)",
    re.IGNORECASE,
)

_COMPOUND_UNIT_RE = re.compile(r"(?:kb|mb|gb|tb|pb)")
_LEADING_DIGITS_RE = re.compile(r"\d{2,}")


class ByteUnit(StrEnum):
    """Unit tokens accepted by to_bytes(), in rank order."""

    B = "b"
    K = "k"
    KB = "kb"
    M = "m"
    MB = "mb"
    G = "g"
    GB = "gb"
    T = "t"
    TB = "tb"
    P = "p"
    PB = "pb"

    @property
    def rank(self) -> int:
        """Power of the base this unit stands for (0 for bytes, 5 for petabytes)."""
        return _UNIT_RANKS[self[0]]

    def multiplier(self, base: ByteBase) -> int:
        return base**self.rank


_UNIT_RANKS = {"b": 0, "k": 1, "m": 2, "g": 3, "t": 4, "p": 5}

SHORT_LABELS = ("B", "KB", "MB", "GB", "TB", "PB")
LONG_LABELS = ("bytes", "KB", "MB", "GB", "TB", "PB")


def _check_base(base: object) -> None:
    if base not in (1000, 1024):
        raise InvalidBaseError(base)


def _reject_suspicious_suffix(number: str, unit: str, raw: object) -> None:
    """Reject "12xyz"-style input the permissive BYTE_RE lets through.

    Only multi-digit numbers with a unit longer than two letters are checked,
    so "1xyz" still reaches the unsupported-unit error.
    """
    if not _LEADING_DIGITS_RE.match(number) or len(unit) <= 2:
        return
    if unit == "byte" or _COMPOUND_UNIT_RE.fullmatch(unit):
        return
    raise InvalidFormatError(raw)


def _parse_magnitude(token: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise InvalidNumberError(token) from None
    if not math.isfinite(value):
        raise InvalidNumberError(token)
    return value


def to_bytes(value: str | int | float, *, base: ByteBase = 1024, round: bool = True) -> int | float:
    """Convert a byte-size string or number to a byte count.

    Args:
        value: e.g. ``"2.5kb"``, ``"33 MB"``, ``"1e3"``, ``1024``.
        base: 1024 (binary, default) or 1000 (decimal).
        round: Round half away from zero and return ``int`` (default). When
            False the exact float product is returned.

    Raises:
        InvalidBaseError, InvalidFormatError, InvalidNumberError,
        NegativeValueError, UnsupportedUnitError.

    >>> to_bytes("1kb")
    1024
    >>> to_bytes("1mb", base=1000)
    1000000
    """
    _check_base(base)

    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidNumberError(value)

    text = str(value).strip().lower()
    match = BYTE_RE.fullmatch(text)
    if match is None:
        raise InvalidFormatError(value)

    number, unit = match.group(1), match.group(2)
    _reject_suspicious_suffix(number, unit, value)

    magnitude = _parse_magnitude(number)
    if magnitude < 0:
        raise NegativeValueError(magnitude)

    if unit:
        try:
            multiplier = ByteUnit(unit).multiplier(base)
        except ValueError:
            raise UnsupportedUnitError(unit, [u.value for u in ByteUnit]) from None
    else:
        multiplier = 1

    result = magnitude * multiplier
    if not math.isfinite(result):
        raise InvalidNumberError(number)
    if not round:
        return result

    if result > MAX_SAFE_INTEGER:
        logger.warning("Result %s may exceed safe integer range", result)
    return _round_half_up(result)


def _round_half_up(value: float) -> int:
    # value - floor(value) is exact for finite floats; value + 0.5 is not
    floor = math.floor(value)
    return floor + (value - floor >= 0.5)


def _to_fixed(value: float, precision: int) -> str:
    """Fixed-point formatting, half-up on the exact binary value."""
    quantum = Decimal(1).scaleb(-precision)
    context = Context(prec=400 + precision)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=context))


def from_bytes(
    value: int | float,
    *,
    base: ByteBase = 1024,
    precision: int = 2,
    long_form: bool = False,
) -> str:
    """Format a byte count for humans, e.g. ``1536 -> "1.50 KB"``.

    ``long_form`` only changes the byte-level label ("bytes" instead of "B").
    Values past the petabyte range stay in PB.
    """
    _check_base(base)
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    labels = LONG_LABELS if long_form else SHORT_LABELS

    if value == 0:
        return f"0 {labels[0]}"
    if value < 0:
        raise NegativeBytesError()
    if not math.isfinite(value):
        raise InvalidNumberError(value)

    index = 0
    while index < len(labels) - 1 and value >= base ** (index + 1):
        index += 1

    return f"{_to_fixed(value / base**index, precision)} {labels[index]}"


def create_byte_converter(**defaults) -> Callable[..., int | float]:
    """Return ``to_bytes`` with preset options; per-call keyword options win.

    >>> decimal = create_byte_converter(base=1000)
    >>> decimal("1kb"), decimal("1kb", base=1024)
    (1000, 1024)
    """

    def convert(value: str | int | float, **overrides) -> int | float:
        return to_bytes(value, **{**defaults, **overrides})

    return convert
