"""Render stack used by MarkdownRenderer to collect nested children."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import ImbalancedTagsError


@dataclass
class StackEntry:
    """An open tag waiting for its closing token.

    ``children`` holds one list of lines per child rendered so far.
    """

    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list[list[str]] = field(default_factory=list)


class RendererEnv:
    """Stack of open tags for a single render pass.

    When a tag is pushed, a new ``children`` buffer is started. When it is
    popped, the caller renders it and hands the lines to ``push_rendered``,
    which appends them to the parent buffer, or returns them to the caller
    if nothing is open.
    """

    def __init__(self) -> None:
        self._stack: list[StackEntry] = []

    def __len__(self) -> int:
        return len(self._stack)

    def top(self) -> StackEntry | None:
        return self._stack[-1] if self._stack else None

    def push_tag(self, tag: str, attrs: dict[str, Any] | None = None) -> None:
        self._stack.append(StackEntry(tag=tag, attrs=attrs or {}))

    def pop_tag(self, tag: str) -> StackEntry:
        if not self._stack or self._stack[-1].tag != tag:
            expected = self._stack[-1].tag if self._stack else None
            raise ImbalancedTagsError(expected, tag)
        return self._stack.pop()

    def push_rendered(self, lines: list[str]) -> list[str]:
        """Append ``lines`` to the open tag and return [], or return them if top-level."""
        if self._stack:
            self._stack[-1].children.append(lines)
            return []
        return lines
