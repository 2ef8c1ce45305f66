"""Tests for the default render rule extensions."""

from markdown_it.token import Token

from markdown_it_from_html import RenderContext, html_to_markdown
from markdown_it_from_html.extensions import core, lists, table


def _ctx(tag, children=(), attrs=None, markup=""):
    return RenderContext(
        token=Token(f"{tag}_close", tag, -1, markup=markup),
        children=[list(child) for child in children],
        attrs=attrs or {},
    )


class TestCore:
    def test_text_escapes_stars(self):
        assert core.render_text(_ctx("", [["2 * 3"]])) == ["2 \\* 3"]

    def test_text_unescapes_entities(self):
        assert core.render_text(_ctx("", [["it&#x27;s &quot;ok&quot;"]])) == ['it\'s "ok"']

    def test_link(self):
        assert core.render_link(_ctx("a", [["text"]], {"href": "url"})) == ["[text](url)"]

    def test_link_with_title(self):
        ctx = _ctx("a", [["text"]], {"href": "url", "title": "T"})
        assert core.render_link(ctx) == ['[text](url "T")']

    def test_link_without_href(self):
        assert core.render_link(_ctx("a", [["text"]])) == ["[text]()"]

    def test_hard_break(self):
        assert core.render_break(_ctx("br")) == ["  \n"]

    def test_soft_break_attribute(self):
        assert core.render_break(_ctx("br", attrs={"data-softbreak": "true"})) == ["\n"]

    def test_image(self):
        ctx = _ctx("img", attrs={"src": "a.png", "alt": "A", "title": "T"})
        assert core.render_image(ctx) == ['![A](a.png "T")']

    def test_image_without_title(self):
        assert core.render_image(_ctx("img", attrs={"src": "a.png", "alt": "A"})) == ["![A](a.png)"]

    def test_image_alt_from_content(self, md, renderer):
        assert renderer.render(md.parse("![alt text](a.png)")) == "![alt text](a.png)"

    def test_paragraph_is_block(self):
        assert core.render_paragraph(_ctx("p", [["a"], ["b"]])) == ["ab", ""]

    def test_hr(self):
        assert core.render_hr(_ctx("hr")) == ["***", ""]


class TestHeading:
    def test_uses_recorded_markup(self, renderer):
        tokens = [
            Token("heading_open", "h3", 1, markup="###"),
            Token("inline", "", 0, children=[Token("text", "", 0, content="Title")]),
            Token("heading_close", "h3", -1, markup="###"),
            Token("paragraph_open", "p", 1),
            Token("inline", "", 0, children=[Token("text", "", 0, content="body")]),
            Token("paragraph_close", "p", -1),
        ]
        assert renderer.render(tokens) == "### Title\n\nbody"


class TestLists:
    def test_unordered_bullets(self):
        assert lists.render_bullet_list(_ctx("ul", [["a", ""], ["b", ""]])) == ["* a", "* b", ""]

    def test_ordered_bullets(self):
        assert lists.render_ordered_list(_ctx("ol", [["a"], ["b"]])) == ["1. a", "2. b", ""]

    def test_ordered_start_attribute(self):
        ctx = _ctx("ol", [["a"], ["b"]], {"start": "7"})
        assert lists.render_ordered_list(ctx) == ["7. a", "8. b", ""]

    def test_continuation_lines_are_indented_and_empty_ones_dropped(self):
        ctx = _ctx("ul", [["a", "", "* nested", ""]])
        assert lists.render_bullet_list(ctx) == ["* a", "    * nested", ""]

    def test_empty_item(self):
        assert lists.render_bullet_list(_ctx("ul", [[]])) == ["*", ""]

    def test_list_item_flattens(self):
        assert lists.render_list_item(_ctx("li", [["a", ""], ["b"]])) == ["a", "", "b"]

    def test_two_level_nesting(self, md, renderer):
        markdown = "* a\n    * b\n        * c\n* d"
        rendered = renderer.render(md.parse(markdown))
        assert rendered.splitlines() == ["* a", "    * b", "        * c", "* d"]

    def test_html_nested_lists(self):
        html = "<ul><li>a<ul><li>b<ul><li>c</li></ul></li></ul></li></ul>"
        assert html_to_markdown(html) == "* a\n    * b\n        * c"


class TestBlockquote:
    def test_prefixes_lines(self, md, renderer):
        markdown = "> one\n>\n> two"
        assert renderer.render(md.parse(markdown)) == markdown

    def test_html_blockquote(self):
        html = "<blockquote><p>one</p><blockquote><p>two</p></blockquote></blockquote>"
        assert html_to_markdown(html) == "> one\n>\n> > two"


class TestTable:
    def test_tbody_pads_columns_to_widest_cell(self):
        ctx = _ctx("tbody", [["a", "bbbb"], ["ccc", "d"]])
        assert table.render_tbody(ctx) == ["| a   | bbbb |", "| ccc | d    |"]

    def test_thead_emits_divider(self):
        ctx = _ctx("thead", [["Name", "Qty"]])
        assert table.render_thead(ctx) == ["| Name | Qty |", "| ---- | --- |"]

    def test_divider_is_at_least_three_dashes(self):
        assert table.render_thead(_ctx("thead", [["a"]])) == ["| a   |", "| --- |"]

    def test_short_rows_are_padded(self):
        ctx = _ctx("tbody", [["a", "b"], ["c"]])
        assert table.render_tbody(ctx) == ["| a | b |", "| c |   |"]

    def test_cell_escapes_pipes(self):
        assert table.render_cell(_ctx("td", [["a|b"]])) == ["a\\|b"]

    def test_colgroup_renders_nothing(self):
        assert table.render_nothing(_ctx("colgroup", [["x"]])) == []

    def test_html_table(self):
        html = (
            "<table><colgroup><col/><col/></colgroup>"
            "<thead><tr><th>Name</th><th>Qty</th></tr></thead>"
            "<tbody><tr><td>apple</td><td>3</td></tr><tr><td>kiwi</td><td>12</td></tr></tbody>"
            "</table>"
        )
        assert html_to_markdown(html) == "\n".join([
            "| Name | Qty |",
            "| ---- | --- |",
            "| apple | 3  |",
            "| kiwi  | 12 |",
        ])

    def test_sections_are_padded_independently(self, md):
        html = (
            "<table><thead><tr><th>a</th><th>b</th></tr></thead>"
            "<tbody><tr><td>longcell</td><td>x</td></tr></tbody></table>"
        )
        output = html_to_markdown(html)
        assert output.splitlines() == ["| a   | b   |", "| --- | --- |", "| longcell | x |"]
        assert md.render(output) == md.render("| a | b |\n| - | - |\n| longcell | x |")
