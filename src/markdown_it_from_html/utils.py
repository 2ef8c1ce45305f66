"""Helpers for working with rendered line arrays."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_INDENT = "    "


def flatten(children: Iterable[list[str]]) -> list[str]:
    """Treat every line of the rendered children as a line of the parent."""
    return [line for child in children for line in child]


def inline(children: Iterable[list[str]]) -> str:
    """Join every line of the rendered children into one string."""
    return "".join(flatten(children))


def indent(
    lines: Iterable[str],
    prefix: str | None = None,
    add_space: bool = False,
    skip_empty: bool = False,
) -> list[str]:
    """Indent or prefix each line.

    Lines containing newlines are split first. With ``add_space`` a space
    goes between ``prefix`` and non-empty lines; empty lines get the bare
    prefix.
    """
    split = [part for line in lines for part in line.split("\n")]
    if skip_empty:
        split = [line for line in split if line]
    prefix = DEFAULT_INDENT if prefix is None else prefix
    space = " " if add_space else ""
    return [f"{prefix}{space}{line}" if line else prefix for line in split]
