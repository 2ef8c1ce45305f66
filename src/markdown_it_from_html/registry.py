"""Default rule table builders."""

from __future__ import annotations

from types import ModuleType

from .base import RenderRule, TokenHandlerRule
from .extensions import DEFAULT_EXTENSIONS


def build_render_rules(extensions: tuple[ModuleType, ...] = DEFAULT_EXTENSIONS) -> dict[str, RenderRule]:
    """Build a fresh render rule table (later extensions win on conflicts)."""
    rules: dict[str, RenderRule] = {}
    for extension in extensions:
        rules.update(getattr(extension, "RENDER_RULES", {}))
    return rules


def build_token_handler_rules(
    extensions: tuple[ModuleType, ...] = DEFAULT_EXTENSIONS,
) -> dict[str, TokenHandlerRule]:
    """Build a fresh token handler table (later extensions win on conflicts)."""
    rules: dict[str, TokenHandlerRule] = {}
    for extension in extensions:
        rules.update(getattr(extension, "TOKEN_HANDLER_RULES", {}))
    return rules
