# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""pagekit CLI: bytes, size, duration, seo commands.

Usage:
    pagekit bytes VALUE [--base {1000,1024}] [--no-round]
    pagekit size BYTES [--base {1000,1024}] [--precision N] [--long-form]
    pagekit duration VALUE [--format {digital,long,short,compact}]
    pagekit seo --title TITLE [--description D] [--canonical PATH] [--image URL ...]
                [--config site.yaml] [--format {table,json,html}]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from pagekit.errors import PageKitError

logger = logging.getLogger(__name__)


def _number(text: str) -> int | float:
    value = float(text)
    return int(value) if value.is_integer() else value


def cmd_bytes(args: argparse.Namespace) -> None:
    """Parse a human-readable size into a byte count."""
    from .byte_size import to_bytes

    print(to_bytes(args.value, base=args.base, round=not args.no_round))


def cmd_size(args: argparse.Namespace) -> None:
    """Format a byte count for humans."""
    from .byte_size import from_bytes

    try:
        value = _number(args.value)
    except ValueError:
        raise PageKitError(f'Not a number: "{args.value}"') from None
    print(from_bytes(value, base=args.base, precision=args.precision, long_form=args.long_form))


def cmd_duration(args: argparse.Namespace) -> None:
    """Format seconds, or parse "H:MM:SS" back to seconds."""
    from .durations import format_time, parse_time

    if ":" in args.value:
        print(parse_time(args.value))
        return
    try:
        seconds = _number(args.value)
    except ValueError:
        raise PageKitError(f'Not a number: "{args.value}"') from None
    print(format_time(seconds, format=args.format))


def _tag_rows(tags: list[dict[str, str]]) -> list[tuple[str, str, str]]:
    rows = []
    for tag in tags:
        if "charset" in tag:
            rows.append(("charset", "", tag["charset"]))
        elif "title" in tag:
            rows.append(("title", "", tag["title"]))
        else:
            attr = next((k for k in tag if k != "content"), "")
            if tag.get(attr):
                rows.append((attr, tag[attr], tag.get("content", "")))
    return rows


def cmd_seo(args: argparse.Namespace) -> None:
    """Print the meta tags for one page."""
    from tabulate import tabulate

    from .metatags import SeoContext, json_ld_script, render_meta_tags
    from .metatags.context import coerce_params
    from .site_config import load_seo_config

    context = SeoContext(load_seo_config(args.config)) if args.config else SeoContext()
    overrides = {"site_name": args.site_name, "site_url": args.site_url}
    overrides = {k: v for k, v in overrides.items() if v}
    if overrides:
        context.configure(overrides)

    raw = {
        "title": args.title,
        "description": args.description,
        "keywords": args.keywords,
        "canonical": args.canonical,
        "type": args.type,
        "author": args.author,
        "images": args.image or None,
        "tags": args.tag or None,
        "published_time": args.published_time,
        "noindex": args.noindex,
        "nofollow": args.nofollow,
        "disable_title_suffix": args.no_suffix,
    }
    params = coerce_params({k: v for k, v in raw.items() if v is not None})
    tags = context.seo(params)
    logger.debug("Assembled %d tags for %r", len(tags), args.title)

    if args.format == "json":
        print(json.dumps(tags, indent=2, ensure_ascii=False))
    elif args.format == "html":
        print(render_meta_tags(tags))
        script = json_ld_script(params)
        if script:
            print(script)
    else:
        print(tabulate(_tag_rows(tags), headers=["attr", "key", "content"], tablefmt="simple"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pagekit", description="Byte sizes, durations and SEO meta tags")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-v info, -vv debug)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_bytes = subparsers.add_parser("bytes", help="Parse a size like 2.5mb into bytes")
    p_bytes.add_argument("value", help='e.g. "2.5mb", "1e3", "1024"')
    p_bytes.add_argument("--base", type=int, choices=[1000, 1024], default=1024)
    p_bytes.add_argument("--no-round", action="store_true", help="Print the exact (float) product")
    p_bytes.set_defaults(func=cmd_bytes)

    p_size = subparsers.add_parser("size", help="Format a byte count, e.g. 1536 -> 1.50 KB")
    p_size.add_argument("value", help="Byte count")
    p_size.add_argument("--base", type=int, choices=[1000, 1024], default=1024)
    p_size.add_argument("--precision", type=int, default=2)
    p_size.add_argument("--long-form", action="store_true", help='Use "bytes" instead of "B"')
    p_size.set_defaults(func=cmd_size)

    p_duration = subparsers.add_parser("duration", help="Format seconds or parse H:MM:SS")
    p_duration.add_argument("value", help='Seconds (e.g. 3665) or a time string (e.g. "1:01:05")')
    p_duration.add_argument(
        "--format", choices=["digital", "long", "short", "compact"], default="digital", help="Output style"
    )
    p_duration.set_defaults(func=cmd_duration)

    p_seo = subparsers.add_parser("seo", help="Generate SEO meta tags for a page")
    p_seo.add_argument("--title", required=True)
    p_seo.add_argument("--description")
    p_seo.add_argument("--keywords", help="Comma-separated keywords (passed through verbatim)")
    p_seo.add_argument("--canonical", help="Canonical path or absolute URL")
    p_seo.add_argument("--type", help="Open Graph type (website, article, profile, ...)")
    p_seo.add_argument("--author")
    p_seo.add_argument("--image", action="append", help="Image URL (repeatable)")
    p_seo.add_argument("--tag", action="append", help="Article tag (repeatable)")
    p_seo.add_argument("--published-time", help="ISO-8601 publication date")
    p_seo.add_argument("--noindex", action="store_true")
    p_seo.add_argument("--nofollow", action="store_true")
    p_seo.add_argument("--no-suffix", action="store_true", help="Do not append the site name to the title")
    p_seo.add_argument("--config", help="YAML file with site-wide SEO defaults")
    p_seo.add_argument("--site-name")
    p_seo.add_argument("--site-url")
    p_seo.add_argument("--format", choices=["table", "json", "html"], default="table")
    p_seo.set_defaults(func=cmd_seo)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    from .logging_config import bind_command, configure, level_for_verbosity

    configure(json_output=args.json_logs, level=level_for_verbosity(args.verbose))
    bind_command(args.command)

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)
    except (PageKitError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
