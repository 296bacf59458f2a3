# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for pagekit.site_config.load_seo_config."""

from __future__ import annotations

import pytest

from pagekit.errors import ConfigError, PageKitError
from pagekit.metatags import SeoContext, SeoImage, configure_seo, get_seo_config, seo
from pagekit.site_config import load_seo_config
from pagekit.titles import LiteralTemplate


@pytest.fixture
def write_config(tmp_path):
    def _write(text: str):
        path = tmp_path / "site.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


class TestLoadSeoConfig:
    def test_full_file(self, write_config):
        path = write_config(
            """
site_name: Acme
siteUrl: https://acme.test
titleTemplate: "%s - Acme"
twitter_site: "@acme"
default_image:
  url: https://acme.test/og.png
  width: 1200
  height: 630
verification:
  google: g-token
"""
        )
        config = load_seo_config(path)
        assert config.site_name == "Acme"
        assert config.site_url == "https://acme.test"
        assert config.title_template == LiteralTemplate("%s - Acme")
        assert config.twitter_site == "@acme"
        assert config.default_image == SeoImage(url="https://acme.test/og.png", width=1200, height=630)
        assert config.verification.google == "g-token"
        assert config.locale == "en_US"

    def test_accepts_str_path(self, write_config):
        assert load_seo_config(str(write_config("site_name: Acme\n"))).site_name == "Acme"

    def test_empty_file_gives_defaults(self, write_config):
        config = load_seo_config(write_config(""))
        assert config.site_name == "My Site"
        assert config.default_robots == "index,follow"

    def test_loaded_config_drives_context(self, write_config):
        config = load_seo_config(write_config("site_name: Acme\n"))
        assert {"title": "Home | Acme"} in SeoContext(config).seo({"title": "Home"})

    def test_configure_default_context(self, write_config):
        configure_seo(load_seo_config(write_config("locale: fr_FR\n")))
        assert get_seo_config().locale == "fr_FR"
        assert get_seo_config().site_name == "My Site"
        assert {"property": "og:locale", "content": "fr_FR"} in seo({"title": "T"})


class TestLoadSeoConfigErrors:
    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.yaml"
        with pytest.raises(ConfigError, match="not found") as exc_info:
            load_seo_config(path)
        assert exc_info.value.path == str(path)

    def test_invalid_yaml(self, write_config):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_seo_config(write_config("site_name: [unclosed\n"))

    def test_non_mapping_root(self, write_config):
        with pytest.raises(ConfigError, match="mapping"):
            load_seo_config(write_config("- a\n- b\n"))

    def test_validation_failure(self, write_config):
        with pytest.raises(ConfigError, match="Invalid SEO config"):
            load_seo_config(write_config("description_max_length: lots\n"))

    def test_is_pagekit_error(self, tmp_path):
        with pytest.raises(PageKitError):
            load_seo_config(tmp_path / "missing.yaml")
