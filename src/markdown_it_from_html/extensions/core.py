"""Inline styles, links, images, paragraphs and thematic breaks."""

from __future__ import annotations

from markdown_it.token import Token

from ..base import RenderContext, RenderRule, TokenHandlerRule
from ..env import RendererEnv
from ..rules import block_render_rule, inline_render_rule, wrap_content_rule
from ..utils import inline

# Applied in order to plain text so it reads back as the same text.
COMMON_SUBSTITUTIONS: list[tuple[str, str]] = [
    ("*", "\\*"),
    ("&#x27;", "'"),
    ("&#39;", "'"),
    ("&quot;", '"'),
]


def _title_suffix(ctx: RenderContext) -> str:
    title = ctx.attrs.get("title")
    return f' "{title}"' if title else ""


@inline_render_rule
def render_text(ctx: RenderContext, content: str) -> str:
    for find, replace in COMMON_SUBSTITUTIONS:
        content = content.replace(find, replace)
    return content


@inline_render_rule
def render_link(ctx: RenderContext, content: str) -> str:
    return f"[{content}]({ctx.attrs.get('href', '')}{_title_suffix(ctx)})"


@inline_render_rule
def render_break(ctx: RenderContext, content: str) -> str:
    return "\n" if ctx.attrs.get("data-softbreak") == "true" else "  \n"


@inline_render_rule
def render_image(ctx: RenderContext, content: str) -> str:
    # markdown-it keeps the alt text in the token content, html keeps it in attrs
    alt = ctx.attrs.get("alt") or content
    return f"![{alt}]({ctx.attrs.get('src', '')}{_title_suffix(ctx)})"


@block_render_rule
def render_paragraph(ctx: RenderContext) -> list[str]:
    return [inline(ctx.children)]


@block_render_rule
def render_hr(ctx: RenderContext) -> list[str]:
    return ["***"]


def handle_softbreak(tokens: list[Token], idx: int, env: RendererEnv) -> list[str]:
    return env.push_rendered(["\n"])


RENDER_RULES: dict[str, RenderRule] = {
    # inline
    "": render_text,
    "a": render_link,
    "br": render_break,
    "em": wrap_content_rule,
    "img": render_image,
    "s": wrap_content_rule,
    "strong": wrap_content_rule,
    # block containing only inline
    "p": render_paragraph,
    # self-closing block
    "hr": render_hr,
}

TOKEN_HANDLER_RULES: dict[str, TokenHandlerRule] = {
    "softbreak": handle_softbreak,
}
