"""Minimal HTML tokenizer producing markdown-it tokens.

Only the subset of HTML that maps onto Markdown is understood. Each tag name
is looked up in a table of tag resolvers which build the token for it, so
callers can teach the parser new tags::

    parser = HtmlParser()
    parser.tags["sup"] = inline_token_resolver("sup")
    tokens = parser.parse("<p>x<sup>2</sup></p>")
"""

from __future__ import annotations

import enum
import logging
import string
from collections.abc import Callable, Iterable, Mapping

from markdown_it.token import Token

from .errors import MalformedClosingTagError, TagResolverNotFoundError

logger = logging.getLogger(__name__)

WHITESPACE = " \n\t\r"
QUOTES = "\"'"
WORD_CHARS = frozenset(string.ascii_letters + string.digits + "-")


class TagStyle(enum.Enum):
    OPEN = "open"
    CLOSE = "close"
    SELF_CLOSING = "self-closing"


Attrs = list[tuple[str, str]]
TagResolver = Callable[[TagStyle, Attrs | None], Token | None]


# ---------------------------------------------------------------------------
# Resolver constructors
# ---------------------------------------------------------------------------

def inline_token_resolver(tag: str, type_: str | None = None, markup: str = "") -> TagResolver:
    """Resolve ``<tag>`` to ``<type_>_open``/``<type_>_close`` inline tokens.

    ``type_`` defaults to the tag name. A self-closing ``<tag />`` becomes a
    single ``<type_>`` token.
    """
    return _token_resolver(tag, type_ or tag, markup, block=False)


def block_token_resolver(tag: str, type_: str | None = None, markup: str = "") -> TagResolver:
    """Like ``inline_token_resolver`` but the tokens are block-level."""
    return _token_resolver(tag, type_ or tag, markup, block=True)


def self_closing_token_resolver(
    tag: str,
    type_: str | None = None,
    markup: str = "",
    block: bool = True,
) -> TagResolver:
    """Resolve ``<tag>`` to a single atomic token; closing tags are dropped."""
    name = type_ or tag

    def resolve(style: TagStyle, attrs: Attrs | None = None) -> Token | None:
        if style is TagStyle.CLOSE:
            return None
        return Token(name, tag, 0, attrs=dict(attrs or ()), markup=markup, block=block)

    return resolve


def _token_resolver(tag: str, name: str, markup: str, block: bool) -> TagResolver:
    def resolve(style: TagStyle, attrs: Attrs | None = None) -> Token | None:
        if style is TagStyle.OPEN:
            type_, nesting = f"{name}_open", 1
        elif style is TagStyle.CLOSE:
            type_, nesting = f"{name}_close", -1
        else:
            type_, nesting = name, 0
        return Token(type_, tag, nesting, attrs=dict(attrs or ()), markup=markup, block=block)

    return resolve


# ---------------------------------------------------------------------------
# Default tag tables
# ---------------------------------------------------------------------------

def legacy_tag_resolvers(self_closing_tags: Iterable[str] = ()) -> dict[str, TagResolver]:
    """The fixed tag set understood by ``tokenize_html``."""
    tags: dict[str, TagResolver] = {
        f"h{level}": block_token_resolver(f"h{level}", "heading", "#" * level)
        for level in range(1, 7)
    }
    tags.update(
        {
            "p": block_token_resolver("p", "paragraph"),
            "blockquote": block_token_resolver("blockquote", markup=">"),
            "aside": block_token_resolver("aside"),
            "ul": block_token_resolver("ul", "bullet_list", "*"),
            "ol": block_token_resolver("ol", "ordered_list", "."),
            "li": block_token_resolver("li", "list_item"),
            "dl": block_token_resolver("dl"),
            "dt": block_token_resolver("dt"),
            "dd": block_token_resolver("dd"),
            "hr": self_closing_token_resolver("hr", markup="***"),
            "a": inline_token_resolver("a", "link"),
            "em": inline_token_resolver("em", markup="_"),
            "s": inline_token_resolver("s", markup="~~"),
            "strong": inline_token_resolver("strong", markup="**"),
            "br": self_closing_token_resolver("br", "hardbreak", block=False),
        }
    )
    for name in self_closing_tags:
        tags[name.lower()] = self_closing_token_resolver(name.lower())
    return tags


def default_tag_resolvers() -> dict[str, TagResolver]:
    """A fresh copy of the tag table used by ``HtmlParser``."""
    tags = legacy_tag_resolvers()
    tags.update(
        {
            "b": inline_token_resolver("strong", markup="**"),
            "i": inline_token_resolver("em", markup="_"),
            "del": inline_token_resolver("s", markup="~~"),
            "img": self_closing_token_resolver("img", "image", block=False),
            "table": block_token_resolver("table"),
            "thead": block_token_resolver("thead"),
            "tbody": block_token_resolver("tbody"),
            "tr": block_token_resolver("tr"),
            "th": block_token_resolver("th"),
            "td": block_token_resolver("td"),
            "colgroup": block_token_resolver("colgroup"),
            "col": self_closing_token_resolver("col"),
        }
    )
    return tags


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class HtmlParser:
    """Tokenize HTML into a markdown-it token stream.

    ``tags`` maps lower-case tag names to resolvers and may be changed freely
    between calls to ``parse``.
    """

    def __init__(self, tags: Mapping[str, TagResolver] | None = None) -> None:
        self.tags: dict[str, TagResolver] = default_tag_resolvers()
        if tags:
            self.tags.update(tags)
            logger.debug("Tag resolver overrides: %s", sorted(tags))

    def parse(self, src: str) -> list[Token]:
        return _HtmlTokenizer(src, self.tags).run()


def tokenize_html(src: str, self_closing_tags: Iterable[str] | None = None) -> list[Token]:
    """Tokenize HTML with the fixed legacy tag set.

    Names in ``self_closing_tags`` open as atomic block tokens and their
    closing tags are ignored.
    """
    return _HtmlTokenizer(src, legacy_tag_resolvers(self_closing_tags or ())).run()


class _HtmlTokenizer:
    """State for a single left-to-right pass over ``src``."""

    def __init__(self, src: str, tags: Mapping[str, TagResolver]) -> None:
        self.src = src
        self.pos = 0
        self.tags = tags
        self.tokens: list[Token] = []

    def run(self) -> list[Token]:
        while self.pos < len(self.src):
            had_whitespace = self._consume_whitespace()
            if self.pos >= len(self.src):
                break
            if self.src[self.pos] == "<":
                if had_whitespace and self._in_inline():
                    self._push_inline(Token("text", "", 0, content=" "))
                self.pos += 1
                token = self._consume_tag()
                if token is None:
                    continue
                if token.block:
                    self.tokens.append(token)
                else:
                    self._push_inline(token)
            else:
                if had_whitespace:
                    self.pos -= 1
                self._push_inline(self._consume_text())
        return self.tokens

    # -- token stream ------------------------------------------------------

    def _in_inline(self) -> bool:
        return bool(self.tokens) and self.tokens[-1].type == "inline"

    def _push_inline(self, token: Token) -> None:
        if not self._in_inline():
            self.tokens.append(Token("inline", "", 0, children=[]))
        parent = self.tokens[-1]
        if parent.children is None:
            parent.children = []
        parent.children.append(token)

    def _open_attrs(self, tag: str) -> Attrs | None:
        """Attributes of the nearest unclosed ``<tag>`` in the current inline token."""
        if not self._in_inline():
            return None
        depth = 0
        for token in reversed(self.tokens[-1].children or []):
            if token.tag != tag:
                continue
            if token.nesting == -1:
                depth += 1
            elif token.nesting == 1:
                if depth == 0:
                    return [(name, str(value)) for name, value in token.attrItems()]
                depth -= 1
        return None

    # -- scanning ----------------------------------------------------------

    def _consume_whitespace(self) -> bool:
        start = self.pos
        while self.pos < len(self.src) and self.src[self.pos] in WHITESPACE:
            self.pos += 1
        return self.pos > start

    def _consume_word(self) -> str:
        start = self.pos
        while self.pos < len(self.src) and self.src[self.pos] in WORD_CHARS:
            self.pos += 1
        return self.src[start:self.pos]

    def _consume_quoted(self, quote: str) -> str:
        end = self.src.find(quote, self.pos)
        if end == -1:
            end = len(self.src)
        value = self.src[self.pos:end]
        self.pos = end + 1
        return value

    def _consume_text(self) -> Token:
        end = self.src.find("<", self.pos)
        if end == -1:
            end = len(self.src)
        text = self.src[self.pos:end]
        self.pos = end
        return Token("text", "", 0, content=text)

    def _consume_tag(self) -> Token | None:
        start = self.pos - 1
        closing = self.src.startswith("/", self.pos)
        if closing:
            self.pos += 1
        tag = self._consume_word().lower()

        if closing:
            self._consume_whitespace()
            if not self.src.startswith(">", self.pos):
                raise MalformedClosingTagError(tag, start)
            self.pos += 1
            return self._resolve(tag, TagStyle.CLOSE, self._open_attrs(tag))

        self_closing = False
        attrs: Attrs = []
        while self.pos < len(self.src):
            self._consume_whitespace()
            if self.src.startswith("/>", self.pos):
                self_closing = True
                self.pos += 1
                break
            if self.src.startswith(">", self.pos) or self.pos >= len(self.src):
                break
            name = self._consume_word()
            if not name:
                # not an attribute name; skip the character
                self.pos += 1
                continue
            self._consume_whitespace()
            value = "true"
            if self.src.startswith("=", self.pos):
                self.pos += 1
                self._consume_whitespace()
                if self.pos < len(self.src) and self.src[self.pos] in QUOTES:
                    quote = self.src[self.pos]
                    self.pos += 1
                    value = self._consume_quoted(quote)
                else:
                    value = self._consume_word()
            attrs.append((name, value))
        if self.src.startswith(">", self.pos):
            self.pos += 1

        style = TagStyle.SELF_CLOSING if self_closing else TagStyle.OPEN
        return self._resolve(tag, style, attrs)

    def _resolve(self, tag: str, style: TagStyle, attrs: Attrs | None) -> Token | None:
        resolver = self.tags.get(tag)
        if resolver is None:
            raise TagResolverNotFoundError(tag)
        token = resolver(style, attrs)
        if token is None:
            logger.debug("Dropped %s tag <%s>", style.value, tag)
        return token
