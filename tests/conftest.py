# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Shared test configuration and fixtures."""

try:
    import pagekit  # noqa: F401
except ImportError:
    raise ImportError("pagekit is not installed. Run: pip install -e '.[dev]'") from None

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_seo_state():
    """Reset the process-wide SEO configuration before and after each test."""
    from pagekit.metatags import reset_seo_config

    reset_seo_config()
    yield
    reset_seo_config()


@pytest.fixture
def restore_logging():
    """Undo root-logger and structlog changes made by configure()."""
    import structlog

    root = logging.getLogger()
    old_handlers = root.handlers[:]
    old_level = root.level
    yield
    root.handlers = old_handlers
    root.setLevel(old_level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
