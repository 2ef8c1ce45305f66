"""markdown-it-from-html — convert HTML and markdown-it tokens to Markdown."""

from __future__ import annotations

from .base import RenderContext, RenderRule, TokenHandlerRule
from .convert import html_to_markdown
from .env import RendererEnv, StackEntry
from .errors import (
    ConversionError,
    ImbalancedTagsError,
    MalformedClosingTagError,
    RenderRuleNotFoundError,
    TagResolverNotFoundError,
)
from .html_parser import (
    HtmlParser,
    TagResolver,
    TagStyle,
    block_token_resolver,
    inline_token_resolver,
    self_closing_token_resolver,
    tokenize_html,
)
from .renderer import MarkdownRenderer
from .rules import block_render_rule, inline_render_rule, wrap_content_rule
from .utils import flatten, indent, inline

__all__ = [
    "ConversionError",
    "HtmlParser",
    "ImbalancedTagsError",
    "MalformedClosingTagError",
    "MarkdownRenderer",
    "RenderContext",
    "RenderRule",
    "RenderRuleNotFoundError",
    "RendererEnv",
    "StackEntry",
    "TagResolver",
    "TagResolverNotFoundError",
    "TagStyle",
    "TokenHandlerRule",
    "block_render_rule",
    "block_token_resolver",
    "flatten",
    "html_to_markdown",
    "indent",
    "inline",
    "inline_render_rule",
    "inline_token_resolver",
    "self_closing_token_resolver",
    "tokenize_html",
    "wrap_content_rule",
]
