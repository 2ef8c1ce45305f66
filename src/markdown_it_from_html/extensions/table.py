"""Pipe tables.

``thead`` emits its rows followed by a divider row, ``tbody`` emits its
rows. Each section is rendered on its own and pads its columns to the
widest cell it contains, so header and body columns need not line up;
Markdown parsers read the table the same either way.
"""

from __future__ import annotations

from ..base import RenderContext, RenderRule
from ..rules import block_render_rule, inline_render_rule
from ..utils import flatten

MIN_DIVIDER_WIDTH = 3


def column_widths(rows: list[list[str]], minimum: int = 0) -> list[int]:
    columns = max((len(row) for row in rows), default=0)
    return [
        max([minimum, *(len(row[i]) for row in rows if i < len(row))])
        for i in range(columns)
    ]


def format_row(row: list[str], widths: list[int]) -> str:
    cells = [(row[i] if i < len(row) else "").ljust(width) for i, width in enumerate(widths)]
    return "| " + " | ".join(cells) + " |"


def render_thead(ctx: RenderContext) -> list[str]:
    widths = column_widths(ctx.children, MIN_DIVIDER_WIDTH)
    rendered = [format_row(row, widths) for row in ctx.children]
    rendered.append(format_row(["-" * width for width in widths], widths))
    return rendered


def render_tbody(ctx: RenderContext) -> list[str]:
    widths = column_widths(ctx.children)
    return [format_row(row, widths) for row in ctx.children]


@block_render_rule
def render_table(ctx: RenderContext) -> list[str]:
    return flatten(ctx.children)


def render_nothing(ctx: RenderContext) -> list[str]:
    return []


def render_row(ctx: RenderContext) -> list[str]:
    return flatten(ctx.children)


@inline_render_rule
def render_cell(ctx: RenderContext, content: str) -> str:
    return content.replace("|", "\\|")


RENDER_RULES: dict[str, RenderRule] = {
    "table": render_table,
    "colgroup": render_nothing,
    "col": render_nothing,
    "thead": render_thead,
    "tbody": render_tbody,
    "tr": render_row,
    "th": render_cell,
    "td": render_cell,
}
