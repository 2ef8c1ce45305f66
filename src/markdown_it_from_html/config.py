"""Configuration file support.

Looks for ``.markdown-it-from-html.toml`` in the current working directory.

Config format::

    [tags]
    sup = "inline"          # inline | block | self-closing
    figure = "block"

    [[plugins]]
    script = "./admonition.py"
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .base import RenderContext, RenderRule
from .extensions.table import render_nothing
from .html_parser import (
    HtmlParser,
    TagResolver,
    block_token_resolver,
    default_tag_resolvers,
    inline_token_resolver,
    self_closing_token_resolver,
)
from .plugins import ConverterPlugin, apply_plugins, load_plugin_from_script
from .renderer import MarkdownRenderer
from .rules import block_render_rule, inline_render_rule
from .utils import flatten

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".markdown-it-from-html.toml"

TAG_KINDS = {
    "inline": inline_token_resolver,
    "block": block_token_resolver,
    "self-closing": self_closing_token_resolver,
}


@inline_render_rule
def render_inline_content(ctx: RenderContext, content: str) -> str:
    return content


@block_render_rule
def render_block_content(ctx: RenderContext) -> list[str]:
    return flatten(ctx.children)


# Render rules installed for configured tags that have none of their own.
TAG_KIND_RULES: dict[str, RenderRule] = {
    "inline": render_inline_content,
    "block": render_block_content,
    "self-closing": render_nothing,
}

BUILTIN_TAGS = frozenset(default_tag_resolvers())


def tag_resolver_for(tag: str, kind: str) -> TagResolver:
    """Build a resolver for ``tag`` from a kind name in ``TAG_KINDS``.

    Raises ValueError for unknown kinds and for tags the parser already
    understands.
    """
    factory = TAG_KINDS.get(kind)
    if factory is None:
        raise ValueError(f"Unknown tag kind {kind!r} for <{tag}> (expected one of {sorted(TAG_KINDS)})")
    if tag in BUILTIN_TAGS:
        raise ValueError(f"<{tag}> is a built-in tag and cannot be redefined as {kind!r}")
    return factory(tag)


@dataclass
class ConverterConfig:
    """Extra tags and plugins to apply on top of the defaults."""

    tags: dict[str, str] = field(default_factory=dict)
    plugins: list[ConverterPlugin] = field(default_factory=list)

    def build(self) -> tuple[HtmlParser, MarkdownRenderer]:
        parser = HtmlParser()
        renderer = MarkdownRenderer()
        for tag, kind in self.tags.items():
            try:
                parser.tags[tag] = tag_resolver_for(tag, kind)
            except ValueError as e:
                logger.warning("Ignoring tag %s: %s", tag, e)
                continue
            renderer.render_rules.setdefault(tag, TAG_KIND_RULES[kind])
        apply_plugins(self.plugins, parser, renderer)
        return parser, renderer


def load_config(config_path: str | Path | None = None) -> ConverterConfig:
    """Load a config file; returns an empty config if it doesn't exist.

    Entries that fail to load are logged and skipped.
    """
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        return ConverterConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    config = ConverterConfig()
    for tag, kind in data.get("tags", {}).items():
        try:
            tag_resolver_for(tag.lower(), kind)
        except ValueError as e:
            logger.warning("Ignoring tag %s in %s: %s", tag, config_path, e)
            continue
        config.tags[tag.lower()] = kind

    for plugin_cfg in data.get("plugins", []):
        script = plugin_cfg.get("script")
        if not script:
            continue
        # Resolve relative paths against config file location
        script_path = config_path.parent / script
        try:
            config.plugins.append(load_plugin_from_script(script_path))
        except (FileNotFoundError, ValueError, TypeError) as e:
            logger.warning("Failed to load plugin %s: %s", script, e)

    return config
