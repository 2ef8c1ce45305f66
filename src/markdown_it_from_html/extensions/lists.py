"""Ordered and unordered lists."""

from __future__ import annotations

from collections.abc import Callable

from ..base import RenderContext, RenderRule
from ..rules import block_render_rule
from ..utils import flatten, indent


def list_renderer(children: list[list[str]], bullet: Callable[[int], str]) -> list[str]:
    """Put each item's first line beside its bullet and indent the rest."""
    rendered: list[str] = []
    for i, child in enumerate(children):
        first, *rest = child or [""]
        marker = bullet(i)
        rendered.append(f"{marker} {first}" if first else marker)
        rendered.extend(indent(rest, skip_empty=True))
    return rendered


def _start(ctx: RenderContext) -> int:
    try:
        return int(ctx.attrs.get("start", 1))
    except (TypeError, ValueError):
        return 1


@block_render_rule
def render_ordered_list(ctx: RenderContext) -> list[str]:
    start = _start(ctx)
    return list_renderer(ctx.children, lambda i: f"{start + i}.")


@block_render_rule
def render_bullet_list(ctx: RenderContext) -> list[str]:
    return list_renderer(ctx.children, lambda i: "*")


def render_list_item(ctx: RenderContext) -> list[str]:
    # the parent list supplies the bullet
    return flatten(ctx.children)


RENDER_RULES: dict[str, RenderRule] = {
    "ol": render_ordered_list,
    "ul": render_bullet_list,
    "li": render_list_item,
}
