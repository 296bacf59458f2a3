# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Log routing for pagekit applications and the ``pagekit`` CLI.

Library modules never configure logging; they log through
``logging.getLogger(__name__)`` (byte-size overflow warnings, dropped SEO
dates, loaded site configs). An application calls ``configure()`` once, after
which those stdlib records and any structlog loggers share one renderer.

Leaf module — no pagekit imports.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

# -v count -> root level; anything past the last entry stays at DEBUG
_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

# Applied to structlog events and (as foreign_pre_chain) to stdlib records
_PRE_CHAIN: list = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def level_for_verbosity(verbose: int) -> int:
    """Map a repeated ``-v`` count to a level: 0 WARNING, 1 INFO, 2+ DEBUG."""
    return _VERBOSITY_LEVELS[min(max(verbose, 0), len(_VERBOSITY_LEVELS) - 1)]


def _level_number(level: str | int) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.INFO


def _formatter(json_output: bool) -> logging.Formatter:
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=_PRE_CHAIN,
    )


def configure(
    *,
    json_output: bool = False,
    level: str | int = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Install a single root handler rendering through structlog.

    Args:
        json_output: JSON lines for log shippers; otherwise plain console lines.
        level: Level name or number for the root logger. Unknown names mean INFO.
        stream: Where to write. Defaults to the ``sys.stderr`` current at call
            time, so stdout stays clean for command output.

    Repeated calls replace the handler rather than adding another.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(_formatter(json_output))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_level_number(level))


def bind_command(command: str, **fields: object) -> None:
    """Tag every following log line with the running CLI command.

    Replaces any previously bound context.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=command, **fields)
