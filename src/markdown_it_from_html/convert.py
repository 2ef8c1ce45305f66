"""HTML to Markdown in one call."""

from __future__ import annotations

from .html_parser import HtmlParser
from .renderer import MarkdownRenderer


def html_to_markdown(
    html: str,
    parser: HtmlParser | None = None,
    renderer: MarkdownRenderer | None = None,
) -> str:
    """Convert an HTML string to Markdown.

    Raises ``ConversionError`` subclasses for unknown tags, malformed closing
    tags, unbalanced markup or tags without a render rule.
    """
    parser = parser or HtmlParser()
    renderer = renderer or MarkdownRenderer()
    return renderer.render(parser.parse(html))
