"""Decorators that turn plain producers into render rules."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from .base import RenderContext, RenderRule
from .utils import inline


def block_render_rule(producer: Callable[[RenderContext], list[str]]) -> RenderRule:
    """Wrap a block producer so its output ends with exactly one empty line."""

    @wraps(producer)
    def rule(ctx: RenderContext) -> list[str]:
        rendered = list(producer(ctx))
        if not rendered or rendered[-1] != "":
            rendered.append("")
        return rendered

    return rule


def inline_render_rule(producer: Callable[[RenderContext, str], str]) -> RenderRule:
    """Wrap an inline producer; it receives the children joined into one string."""

    @wraps(producer)
    def rule(ctx: RenderContext) -> list[str]:
        return [producer(ctx, inline(ctx.children))]

    return rule


def wrap_content_rule(ctx: RenderContext) -> list[str]:
    """Wrap the content in the token's own markup, e.g. ``**content**`` or ``_content_``."""
    markup = ctx.token.markup
    return [f"{markup}{inline(ctx.children)}{markup}"]
