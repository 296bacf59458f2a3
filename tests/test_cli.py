# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for the pagekit CLI: subcommand output and top-level error handling."""

from __future__ import annotations

import json
import logging

import pytest

from pagekit.cli import _tag_rows, build_parser, main


@pytest.fixture(autouse=True)
def _clean_logging(restore_logging):
    """main() configures the root logger."""
    yield


def _run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr()


def _fail(capsys, *argv) -> tuple[int, str]:
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))
    return exc_info.value.code, capsys.readouterr().err


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_base_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["bytes", "1kb", "--base", "1001"])

    def test_seo_title_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["seo"])

    @pytest.mark.parametrize(
        "flags,level",
        [(["-v"], logging.INFO), (["-vv"], logging.DEBUG), (["-v", "-v", "-v"], logging.DEBUG)],
    )
    def test_verbosity_count(self, capsys, flags, level):
        _run(capsys, *flags, "bytes", "1kb")
        assert logging.getLogger().level == level

    def test_log_lines_carry_command(self, capsys):
        captured = _run(capsys, "--json-logs", "-vv", "seo", "--title", "X", "--format", "json")
        records = [json.loads(line) for line in captured.err.splitlines() if line.strip()]
        assembled = [r for r in records if r["logger"] == "pagekit.cli"]
        assert assembled
        assert all(r["command"] == "seo" for r in assembled)
        assert json.loads(captured.out)[0] == {"name": ""}

    def test_quiet_by_default(self, capsys):
        _run(capsys, "bytes", "1kb")
        assert logging.getLogger().level == logging.WARNING


class TestBytesCommand:
    def test_parse(self, capsys):
        assert _run(capsys, "bytes", "2.5kb").out == "2560\n"

    def test_decimal_base(self, capsys):
        assert _run(capsys, "bytes", "1kb", "--base", "1000").out == "1000\n"

    def test_invalid_unit(self, capsys):
        code, err = _fail(capsys, "bytes", "5xb")
        assert code == 1
        assert err.startswith('Error: Unsupported unit: "xb"')

    def test_invalid_format(self, capsys):
        code, err = _fail(capsys, "bytes", "abc")
        assert code == 1
        assert "Invalid format" in err


class TestSizeCommand:
    def test_format(self, capsys):
        assert _run(capsys, "size", "1536").out == "1.50 KB\n"

    def test_options(self, capsys):
        assert _run(capsys, "size", "1000", "--base", "1000", "--precision", "0").out == "1 KB\n"
        assert _run(capsys, "size", "512", "--long-form").out == "512.00 bytes\n"

    def test_not_a_number(self, capsys):
        code, err = _fail(capsys, "size", "lots")
        assert code == 1
        assert 'Not a number: "lots"' in err

    def test_negative(self, capsys):
        code, err = _fail(capsys, "size", "-5")
        assert code == 1
        assert "Negative bytes not supported" in err


class TestDurationCommand:
    def test_format_seconds(self, capsys):
        assert _run(capsys, "duration", "65").out == "01:05\n"

    def test_format_long(self, capsys):
        assert _run(capsys, "duration", "3661", "--format", "long").out == "1 hour 1 minute 1 second\n"

    def test_parse_clock(self, capsys):
        assert _run(capsys, "duration", "1:01:05").out == "3665\n"

    def test_invalid_clock(self, capsys):
        code, err = _fail(capsys, "duration", "a:b")
        assert code == 1
        assert err.startswith("Error:")


class TestSeoCommand:
    def test_json_output(self, capsys):
        tags = json.loads(_run(capsys, "seo", "--title", "Careers", "--format", "json").out)
        assert {"name": ""} in tags
        assert {"title": "Careers | My Site"} in tags
        assert {"name": "robots", "content": "index,follow"} in tags

    def test_flags(self, capsys):
        out = _run(
            capsys,
            "seo",
            "--title",
            "Post",
            "--type",
            "article",
            "--tag",
            "a",
            "--tag",
            "b",
            "--image",
            "https://a.test/1.png",
            "--noindex",
            "--no-suffix",
            "--format",
            "json",
        ).out
        tags = json.loads(out)
        assert {"title": "Post"} in tags
        assert {"name": "robots", "content": "noindex,follow"} in tags
        assert [t["content"] for t in tags if t.get("property") == "article:tag"] == ["a", "b"]
        assert {"name": "twitter:card", "content": "summary_large_image"} in tags

    def test_html_output(self, capsys):
        out = _run(
            capsys,
            "seo",
            "--title",
            "About",
            "--canonical",
            "/about",
            "--site-url",
            "https://acme.test",
            "--site-name",
            "Acme",
            "--format",
            "html",
        ).out
        assert "<title>About | Acme</title>" in out
        assert '<meta property="og:url" content="https://acme.test/about">' in out

    def test_table_output(self, capsys):
        out = _run(capsys, "seo", "--title", "Careers").out
        lines = out.splitlines()
        assert lines[0].split() == ["attr", "key", "content"]
        assert any(line.split()[:1] == ["title"] and "Careers | My Site" in line for line in lines)

    def test_config_file(self, capsys, tmp_path):
        config = tmp_path / "site.yaml"
        config.write_text('site_name: Acme\ntitleTemplate: "%s - Acme"\nlocale: de_DE\n', encoding="utf-8")
        tags = json.loads(_run(capsys, "seo", "--title", "Jobs", "--config", str(config), "--format", "json").out)
        assert {"title": "Jobs - Acme"} in tags
        assert {"property": "og:locale", "content": "de_DE"} in tags

    def test_site_name_flag_beats_config(self, capsys, tmp_path):
        config = tmp_path / "site.yaml"
        config.write_text("site_name: Acme\n", encoding="utf-8")
        out = _run(capsys, "seo", "--title", "Jobs", "--config", str(config), "--site-name", "Beta", "--format", "json")
        assert {"title": "Jobs | Beta"} in json.loads(out.out)

    def test_missing_config(self, capsys, tmp_path):
        code, err = _fail(capsys, "seo", "--title", "X", "--config", str(tmp_path / "nope.yaml"))
        assert code == 1
        assert "Config file not found" in err

    def test_default_context_untouched(self, capsys):
        from pagekit.metatags import get_seo_config

        _run(capsys, "seo", "--title", "X", "--site-name", "Other")
        assert get_seo_config().site_name == "My Site"


class TestTagRows:
    def test_rows(self):
        rows = _tag_rows(
            [
                {"charset": "utf-8"},
                {"name": ""},
                {"title": "T"},
                {"property": "og:type", "content": "website"},
            ]
        )
        assert rows == [("charset", "", "utf-8"), ("title", "", "T"), ("property", "og:type", "website")]
