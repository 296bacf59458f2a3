# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""SeoContext — explicit owner of one SeoConfig.

Applications that need isolated settings (multi-site hosts, tests) create
their own SeoContext and pass it around. The module-level default context
backs ``configure_seo()`` / ``get_seo_config()`` / ``seo()`` for the common
"configure once at startup" case.

Configuration is not thread-safe: configure before serving concurrent reads.
Reads always return a deep copy, so callers cannot mutate shared state.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pagekit.metatags.assembler import assemble
from pagekit.metatags.models import MetaTag, SeoConfig, SeoParams

ParamsInput = SeoParams | Mapping[str, Any]


def _config_updates(partial: SeoConfig | Mapping[str, Any] | None, fields: dict[str, Any]) -> dict[str, Any]:
    """Validate a partial config and return only the keys the caller provided."""
    if isinstance(partial, SeoConfig):
        partial = {name: getattr(partial, name) for name in partial.model_fields_set}
    provided = SeoConfig.model_validate({**(partial or {}), **fields})
    return {name: getattr(provided, name) for name in provided.model_fields_set}


def coerce_params(params: ParamsInput) -> SeoParams:
    if isinstance(params, SeoParams):
        return params
    return SeoParams.model_validate(params)


class SeoContext:
    """Holds site-wide SEO defaults and assembles tags against them."""

    __slots__ = ("_config",)

    def __init__(self, config: SeoConfig | Mapping[str, Any] | None = None, **fields: Any) -> None:
        self._config = SeoConfig()
        if config is not None or fields:
            self.configure(config, **fields)

    def configure(self, partial: SeoConfig | Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        """Shallow-merge ``partial`` (and keyword fields) over the current config.

        Only provided keys are overwritten; nested records such as
        ``verification`` are replaced, not merged.
        """
        updates = _config_updates(partial, fields)
        self._config = self._config.model_copy(update=updates)

    @property
    def config(self) -> SeoConfig:
        """Defensive copy of the current configuration."""
        return self._config.model_copy(deep=True)

    def reset(self) -> None:
        """Restore built-in defaults. Never called implicitly."""
        self._config = SeoConfig()

    def seo(self, params: ParamsInput) -> list[MetaTag]:
        return assemble(coerce_params(params), self._config)


_default_context = SeoContext()


def default_context() -> SeoContext:
    return _default_context


def configure_seo(partial: SeoConfig | Mapping[str, Any] | None = None, /, **fields: Any) -> None:
    """Configure the process-wide default context, e.g. once at app startup:

        configure_seo(site_name="Acme", site_url="https://acme.test", title_template="%s - Acme")
    """
    _default_context.configure(partial, **fields)


def get_seo_config() -> SeoConfig:
    return _default_context.config


def reset_seo_config() -> None:
    _default_context.reset()


def seo(params: ParamsInput, *, context: SeoContext | None = None) -> list[MetaTag]:
    """Generate the ordered meta tag list for one page.

    Uses ``context`` when given, otherwise the default context.
    """
    return (context if context is not None else _default_context).seo(params)
