#!/usr/bin/env python3
"""Convert HTML to Markdown from the command line.

Usage:
    html2md page.html
    cat page.html | html2md
    html2md --tag sup=inline --tag figure=block page.html
    html2md --plugin ./admonition.py page.html
    html2md --config ./settings.toml page.html
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, ConverterConfig, load_config, tag_resolver_for
from .convert import html_to_markdown
from .errors import ConversionError
from .plugins import load_plugin_from_script


def parse_tag_option(value: str) -> tuple[str, str]:
    """Split a ``NAME=KIND`` option value."""
    name, sep, kind = value.partition("=")
    if not sep or not name or not kind:
        raise argparse.ArgumentTypeError(f"expected NAME=KIND, got {value!r}")
    return name.lower(), kind


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2md",
        description="html2md: Convert HTML to Markdown",
    )
    parser.add_argument(
        "files", nargs="*", type=Path, help="HTML files to convert (default: stdin)",
    )
    parser.add_argument(
        "--tag", action="append", dest="tags", type=parse_tag_option, metavar="NAME=KIND",
        help="Register an extra tag as inline, block or self-closing (repeatable)",
    )
    parser.add_argument(
        "--plugin", action="append", dest="plugins", metavar="SCRIPT",
        help="Path to a plugin script (can be specified multiple times)",
    )
    parser.add_argument(
        "--config", type=Path, metavar="PATH",
        help=f"Config file (default: ./{CONFIG_FILENAME})",
    )
    parser.add_argument(
        "--no-config", action="store_true",
        help=f"Disable loading {CONFIG_FILENAME}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ConverterConfig() if args.no_config else load_config(args.config)
    try:
        for name, kind in args.tags or []:
            tag_resolver_for(name, kind)
            config.tags[name] = kind
        for script in args.plugins or []:
            config.plugins.append(load_plugin_from_script(script))
    except (FileNotFoundError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser, renderer = config.build()

    sources: list[str] = []
    if args.files:
        for path in args.files:
            if not path.exists():
                print(f"Error: file not found: {path}", file=sys.stderr)
                return 1
            sources.append(path.read_text(encoding="utf-8"))
    else:
        sources.append(sys.stdin.read())

    outputs: list[str] = []
    for i, html in enumerate(sources):
        try:
            outputs.append(html_to_markdown(html, parser=parser, renderer=renderer))
        except ConversionError as e:
            name = args.files[i] if args.files else "<stdin>"
            print(f"Error: {name}: {e}", file=sys.stderr)
            return 1

    print("\n\n".join(outputs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
