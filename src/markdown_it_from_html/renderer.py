"""Markdown renderer: maps a markdown-it token stream back into Markdown text.

Use ``HtmlParser`` to produce tokens from HTML, or feed it the output of
``MarkdownIt.parse`` directly.

Two rule tables drive rendering:

``render_rules``
    Keyed by ``token.tag``. Called when a tag is popped off the stack or for
    a self-closing token, e.g. to render ``<a>`` tags::

        renderer.render_rules["a"] = inline_render_rule(
            lambda ctx, content: f"[{content}]({ctx.attrs['href']})"
        )

``token_handler_rules``
    Keyed by ``token.type``. Gives full control over a token and the render
    stack, for cases a render rule cannot express, e.g. ``heading_close``
    using the markup of the token itself.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from markdown_it.token import Token

from .base import RenderContext, RenderRule, TokenHandlerRule
from .env import RendererEnv
from .errors import ImbalancedTagsError, RenderRuleNotFoundError
from .registry import build_render_rules, build_token_handler_rules

logger = logging.getLogger(__name__)


def _merge(defaults: dict[str, Any], overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    # a None override removes the default
    merged = {**defaults, **(overrides or {})}
    return {key: value for key, value in merged.items() if value is not None}


class MarkdownRenderer:
    """Render markdown-it tokens into Markdown text."""

    def __init__(
        self,
        render_rules: Mapping[str, RenderRule | None] | None = None,
        token_handler_rules: Mapping[str, TokenHandlerRule | None] | None = None,
    ) -> None:
        self.render_rules: dict[str, RenderRule] = _merge(build_render_rules(), render_rules)
        self.token_handler_rules: dict[str, TokenHandlerRule] = _merge(
            build_token_handler_rules(), token_handler_rules
        )
        if render_rules or token_handler_rules:
            logger.debug(
                "Renderer rule overrides: render=%s, token handlers=%s",
                sorted(render_rules or {}),
                sorted(token_handler_rules or {}),
            )

    def render_attrs(self, token: Token) -> dict[str, Any]:
        """Render token attributes to a plain dict."""
        return dict(token.attrs or {})

    def handle_token(self, tokens: list[Token], idx: int, env: RendererEnv) -> list[str] | None:
        """The default token handler, which manages the render stack."""
        token = tokens[idx]
        if token.nesting == 1:
            return env.push_tag(token.tag, self.render_attrs(token))

        if token.nesting == -1:
            entry = env.pop_tag(token.tag)
            attrs, children = entry.attrs, entry.children
        else:
            attrs = self.render_attrs(token)
            children = [[token.content]] if token.content else []

        rule = self.render_rules.get(token.tag)
        if rule is None:
            raise RenderRuleNotFoundError(token)
        return env.push_rendered(rule(RenderContext(token=token, children=children, attrs=attrs)))

    def render_inline(self, tokens: list[Token], env: RendererEnv) -> list[str]:
        """Render the children of an ``inline`` token."""
        rendered: list[str] = []
        for i, token in enumerate(tokens):
            rule = self.token_handler_rules.get(token.type)
            lines = rule(tokens, i, env) if rule else self.handle_token(tokens, i, env)
            if lines:
                rendered.extend(lines)
        return rendered

    def render(self, tokens: list[Token]) -> str:
        """Render a block-level token stream into Markdown."""
        env = RendererEnv()
        rendered: list[str] = []
        for i, token in enumerate(tokens):
            rule = self.token_handler_rules.get(token.type)
            if rule:
                lines = rule(tokens, i, env)
            elif token.type == "inline":
                lines = self.render_inline(token.children or [], env)
            else:
                lines = self.handle_token(tokens, i, env)
            if lines:
                rendered.extend(lines)

        top = env.top()
        if top is not None:
            raise ImbalancedTagsError(top.tag, None)
        return "\n".join(rendered).strip()
