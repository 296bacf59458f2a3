# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""pagekit exception hierarchy.

All pagekit-specific errors inherit from PageKitError, allowing callers
to catch the base class for any pagekit failure or specific subclasses
for targeted handling.
"""

from __future__ import annotations


class PageKitError(Exception):
    """Base exception for all pagekit errors."""


class ByteSizeError(PageKitError):
    """Byte-size parsing or formatting failure."""


class InvalidBaseError(ByteSizeError):
    """Conversion base is neither 1000 nor 1024."""

    def __init__(self, base: object) -> None:
        super().__init__(f'Invalid base: "{base}". Must be 1000 or 1024')
        self.base = base


class InvalidFormatError(ByteSizeError):
    """Input does not look like a byte-size string."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f'Invalid format: "{value}". Expected format like "2.5kb", "33mb", "2.4gb", or a number'
        )
        self.value = value


class InvalidNumberError(ByteSizeError):
    """Numeric part is NaN or infinite."""

    def __init__(self, token: object) -> None:
        super().__init__(f'Invalid number: "{token}"')
        self.token = token


class NegativeValueError(ByteSizeError):
    """Byte-size magnitude is negative."""

    def __init__(self, magnitude: float) -> None:
        super().__init__(f'Negative values not supported: "{magnitude}"')
        self.magnitude = magnitude


class UnsupportedUnitError(ByteSizeError):
    """Unit token is not one of the known byte units."""

    def __init__(self, unit: str, supported: list[str]) -> None:
        super().__init__(f'Unsupported unit: "{unit}". Supported units: {", ".join(supported)}')
        self.unit = unit
        self.supported = supported


class NegativeBytesError(ByteSizeError):
    """from_bytes() received a negative byte count."""

    def __init__(self) -> None:
        super().__init__("Negative bytes not supported")


class InvalidDurationError(PageKitError):
    """Duration formatting or parsing failure."""


class ConfigError(PageKitError):
    """Site configuration file could not be loaded."""

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path
