"""ATX headings, rendered from the markup recorded on the token."""

from __future__ import annotations

from markdown_it.token import Token

from ..base import TokenHandlerRule
from ..env import RendererEnv
from ..utils import inline


def handle_heading_close(tokens: list[Token], idx: int, env: RendererEnv) -> list[str]:
    # heading_open goes through the default handler
    token = tokens[idx]
    entry = env.pop_tag(token.tag)
    return env.push_rendered([f"{token.markup} {inline(entry.children)}", ""])


TOKEN_HANDLER_RULES: dict[str, TokenHandlerRule] = {
    "heading_close": handle_heading_close,
}
