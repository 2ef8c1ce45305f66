"""Shared fixtures."""

import pytest
from markdown_it import MarkdownIt

from markdown_it_from_html import HtmlParser, MarkdownRenderer


@pytest.fixture
def md():
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


@pytest.fixture
def renderer():
    return MarkdownRenderer()


@pytest.fixture
def parser():
    return HtmlParser()
