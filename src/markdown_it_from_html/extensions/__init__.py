"""Default render rule extensions."""

from __future__ import annotations

from . import blockquote, core, heading, lists, table

DEFAULT_EXTENSIONS = (blockquote, core, lists, table, heading)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "blockquote",
    "core",
    "heading",
    "lists",
    "table",
]
