# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Load site-wide SEO defaults from a YAML file.

Example ``site.yaml``::

    site_name: Acme
    site_url: https://acme.test
    titleTemplate: "%s - Acme"      # camelCase keys are accepted too
    default_image:
      url: https://acme.test/og.png
      width: 1200
      height: 630
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from pagekit.errors import ConfigError
from pagekit.metatags.models import SeoConfig

logger = logging.getLogger(__name__)


def load_seo_config(path: str | Path) -> SeoConfig:
    """Read ``path`` and validate it into a SeoConfig.

    An empty file yields the built-in defaults.

    Raises:
        ConfigError: missing file, invalid YAML, non-mapping document,
            or values that fail validation.
    """
    config_path = Path(path)
    try:
        with open(config_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}", path=str(config_path)) from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}", path=str(config_path)) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Config root must be a mapping, got {type(raw).__name__}: {config_path}",
            path=str(config_path),
        )

    try:
        config = SeoConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid SEO config in {config_path}: {e}", path=str(config_path)) from e

    logger.debug("Loaded SEO config from %s (%d keys)", config_path, len(raw))
    return config
