"""Tests for the render stack."""

import pytest

from markdown_it_from_html import ImbalancedTagsError, RendererEnv


class TestRendererEnv:
    def test_push_rendered_returns_lines_at_top_level(self):
        env = RendererEnv()
        assert env.push_rendered(["a", ""]) == ["a", ""]

    def test_push_rendered_buffers_into_open_tag(self):
        env = RendererEnv()
        assert env.push_tag("p", {"class": "x"}) is None
        assert env.push_rendered(["a"]) == []
        assert env.push_rendered(["b"]) == []
        entry = env.pop_tag("p")
        assert entry.tag == "p"
        assert entry.attrs == {"class": "x"}
        assert entry.children == [["a"], ["b"]]

    def test_nested_tags_buffer_into_innermost(self):
        env = RendererEnv()
        env.push_tag("ul")
        env.push_tag("li")
        env.push_rendered(["item"])
        assert env.top().tag == "li"
        assert len(env) == 2
        item = env.pop_tag("li")
        env.push_rendered(item.children[0])
        assert env.pop_tag("ul").children == [["item"]]

    def test_top_is_none_when_empty(self):
        assert RendererEnv().top() is None

    def test_pop_mismatched_tag(self):
        env = RendererEnv()
        env.push_tag("em")
        with pytest.raises(ImbalancedTagsError) as exc_info:
            env.pop_tag("strong")
        assert exc_info.value.expected == "em"
        assert exc_info.value.received == "strong"
        assert str(exc_info.value) == 'imbalanced tags; expected "em", received "strong"'

    def test_pop_empty_stack(self):
        with pytest.raises(ImbalancedTagsError) as exc_info:
            RendererEnv().pop_tag("p")
        assert exc_info.value.expected is None
        assert str(exc_info.value) == 'imbalanced tags; unexpected "p"'
