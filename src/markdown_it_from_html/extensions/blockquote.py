"""Block quotes, nested to any depth."""

from __future__ import annotations

from ..base import RenderContext, RenderRule
from ..rules import block_render_rule
from ..utils import flatten, indent


@block_render_rule
def render_blockquote(ctx: RenderContext) -> list[str]:
    lines = flatten(ctx.children)
    if lines and lines[-1] == "":
        lines.pop()
    return indent(lines, prefix=">", add_space=True)


RENDER_RULES: dict[str, RenderRule] = {
    "blockquote": render_blockquote,
}
