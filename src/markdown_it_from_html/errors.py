"""Errors raised while tokenizing HTML or rendering Markdown."""

from __future__ import annotations

from markdown_it.token import Token


class ConversionError(ValueError):
    """Base class for every failure raised by the parser or renderer."""


class ImbalancedTagsError(ConversionError):
    """A closing tag did not match the open tag on top of the render stack.

    ``received`` is None when the token stream ended with tags still open.
    """

    def __init__(self, expected: str | None, received: str | None) -> None:
        self.expected = expected
        self.received = received
        if expected is None:
            message = f'imbalanced tags; unexpected "{received}"'
        elif received is None:
            message = f'imbalanced tags; expected "{expected}", reached end of input'
        else:
            message = f'imbalanced tags; expected "{expected}", received "{received}"'
        super().__init__(message)


class MalformedClosingTagError(ConversionError):
    """A closing tag had content other than whitespace before ``>``."""

    def __init__(self, tag: str, position: int) -> None:
        self.tag = tag
        self.position = position
        super().__init__(f'malformed closing tag "{tag}" at position {position}')


class TagResolverNotFoundError(ConversionError):
    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f'no tag resolver found for tag "{tag}"')


class RenderRuleNotFoundError(ConversionError):
    def __init__(self, token: Token) -> None:
        self.token = token
        self.tag = token.tag
        self.token_type = token.type
        super().__init__(f'no render rule found for tag "{token.tag}" (type "{token.type}")')
