"""Rule protocols and the argument passed to render rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from markdown_it.token import Token

if TYPE_CHECKING:
    from .env import RendererEnv


@dataclass
class RenderContext:
    """Everything a render rule gets to see.

    ``attrs`` are the attributes of the opening token (or of the token
    itself when it is self-closing).
    """

    token: Token
    children: list[list[str]] = field(default_factory=list)
    attrs: dict[str, Any] = field(default_factory=dict)


class RenderRule(Protocol):
    """Render a closed or self-closing tag into lines.

    Block rules end their output with a single empty line.
    """

    def __call__(self, ctx: RenderContext) -> list[str]: ...


class TokenHandlerRule(Protocol):
    """Take over handling of one token type.

    Returns lines for the document root, or None/[] if the result went onto
    the stack. Implementations normally end with ``env.push_rendered(...)``.
    """

    def __call__(self, tokens: list[Token], idx: int, env: RendererEnv) -> list[str] | None: ...
