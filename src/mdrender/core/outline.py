"""Outline builders: collaborators that receive each heading during render"""

import json
from typing import Protocol

from mdrender.core.models import HeadingRecord, TocEntry


class OutlineBuilder(Protocol):
    def on_heading(self, text: str, level: int, html: str) -> None:
        """Called once per heading, in document order."""
        ...


class HeadingRecorder:
    """Keep a flat, ordered list of reported headings."""

    def __init__(self) -> None:
        self.headings: list[HeadingRecord] = []

    def on_heading(self, text: str, level: int, html: str) -> None:
        self.headings.append(HeadingRecord(text=text, level=level, html=html))


class TocBuilder:
    """Nest headings into a table of contents tree.

    A heading becomes a child of the nearest preceding heading with a lower
    level; anything else starts a new root entry.
    """

    def __init__(self) -> None:
        self.entries: list[TocEntry] = []
        self._stack: list[TocEntry] = []

    def on_heading(self, text: str, level: int, html: str) -> None:
        node = TocEntry(level=level, text=text, html=html)
        while self._stack and self._stack[-1].level >= level:
            self._stack.pop()
        if self._stack:
            self._stack[-1].children.append(node)
        else:
            self.entries.append(node)
        self._stack.append(node)

    def to_dict(self) -> list[dict]:
        return [e.model_dump() for e in self.entries]

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
