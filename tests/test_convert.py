"""End-to-end HTML to Markdown conversion."""

import pytest

from markdown_it_from_html import (
    ConversionError,
    HtmlParser,
    MarkdownRenderer,
    RenderRuleNotFoundError,
    html_to_markdown,
    inline_render_rule,
    inline_token_resolver,
)


class TestHtmlToMarkdown:
    def test_header(self):
        assert html_to_markdown("<h1>Header</h1>") == "# Header"

    def test_entities_and_stars(self):
        html = "<p>it&#x27;s &quot;quoted&quot; *star*</p>"
        assert html_to_markdown(html) == 'it\'s "quoted" \\*star\\*'

    def test_image(self):
        html = '<p><img src="a.png" alt="A" title="T"></p>'
        assert html_to_markdown(html) == '![A](a.png "T")'

    def test_b_and_i_aliases(self):
        assert html_to_markdown("<p><b>x</b> <i>y</i> <del>z</del></p>") == "**x** _y_ ~~z~~"

    def test_line_break(self):
        assert html_to_markdown("<p>one<br>two</p>") == "one  \ntwo"

    def test_soft_break_attribute(self):
        assert html_to_markdown('<p>one<br data-softbreak="true">two</p>') == "one\ntwo"

    def test_ordered_list_start(self):
        assert html_to_markdown('<ol start="3"><li>a</li><li>b</li></ol>') == "3. a\n4. b"

    def test_custom_tag_needs_resolver_and_rule(self):
        html = "<p>x<sup>2</sup></p>"
        parser = HtmlParser({"sup": inline_token_resolver("sup")})
        with pytest.raises(RenderRuleNotFoundError):
            html_to_markdown(html, parser=parser)

        renderer = MarkdownRenderer(
            render_rules={"sup": inline_render_rule(lambda ctx, content: f"^{content}^")}
        )
        assert html_to_markdown(html, parser=parser, renderer=renderer) == "x^2^"

    def test_errors_share_a_base_class(self):
        with pytest.raises(ConversionError):
            html_to_markdown("<p>unclosed")
        with pytest.raises(ValueError):
            html_to_markdown("<marquee>x</marquee>")
