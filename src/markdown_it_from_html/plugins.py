"""Plugins that extend the parser and renderer.

A plugin is any object with an ``install(parser, renderer)`` method; it
registers tag resolvers on ``parser.tags`` and rules on
``renderer.render_rules`` / ``renderer.token_handler_rules``.

Two ways to provide plugins:
1. Python API: ``apply_plugins([MyPlugin()], parser, renderer)``
2. A script defining a ``plugin()`` factory, loaded with
   ``load_plugin_from_script`` (used by the CLI ``--plugin`` flag and the
   ``[[plugins]]`` table of the config file)
"""

from __future__ import annotations

import importlib.util
import logging
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType
from typing import Protocol, runtime_checkable

from .html_parser import HtmlParser
from .renderer import MarkdownRenderer

logger = logging.getLogger(__name__)


@runtime_checkable
class ConverterPlugin(Protocol):
    """Registers extra tag resolvers and render rules."""

    def install(self, parser: HtmlParser, renderer: MarkdownRenderer) -> None:
        ...


def _exec_script(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(f"_plugin_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Cannot load plugin script: {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def load_plugin_from_script(script_path: str | Path) -> ConverterPlugin:
    """Run ``script_path`` and return what its ``plugin()`` factory builds."""
    path = Path(script_path).resolve()
    if not path.is_file():
        raise FileNotFoundError(f"Plugin script not found: {path}")

    factory = getattr(_exec_script(path), "plugin", None)
    if not callable(factory):
        raise ValueError(f"{path.name} has no plugin() factory")

    instance = factory()
    if not isinstance(instance, ConverterPlugin):
        raise TypeError(
            f"plugin() in {path.name} must return a ConverterPlugin "
            f"(got {type(instance).__name__})"
        )
    logger.debug("Loaded plugin %s from %s", type(instance).__name__, path)
    return instance


def apply_plugins(
    plugins: Iterable[ConverterPlugin],
    parser: HtmlParser,
    renderer: MarkdownRenderer,
) -> None:
    for plugin in plugins:
        plugin.install(parser, renderer)
        logger.debug("Installed plugin %s", type(plugin).__name__)
