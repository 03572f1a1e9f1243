"""Parses optimized SVG markup into MarkupNode trees."""

from __future__ import annotations

from typing import List, Optional
from xml.parsers import expat

from .errors import ParseError
from .models import MarkupNode


class _TreeBuilder:
    """Collects expat callbacks into a MarkupNode tree."""

    def __init__(self) -> None:
        self.root: Optional[MarkupNode] = None
        self._stack: List[MarkupNode] = []

    def start(self, tag: str, attributes: List[str]) -> None:
        # ordered_attributes yields a flat [name, value, name, value, ...] list.
        pairs = dict(zip(attributes[::2], attributes[1::2]))
        node = MarkupNode(tag=tag, attributes=pairs)
        if self._stack:
            self._stack[-1].children.append(node)
        else:
            self.root = node
        self._stack.append(node)

    def end(self, tag: str) -> None:
        node = self._stack.pop()
        node.text = _significant(node.text)
        for child in node.children:
            child.tail = _significant(child.tail)

    def data(self, text: str) -> None:
        if not self._stack:
            return
        # Text after a child belongs to that child's tail, as in ElementTree.
        parent = self._stack[-1]
        if parent.children:
            parent.children[-1].tail += text
        else:
            parent.text += text


def _significant(text: str) -> str:
    """Drop indentation-only runs; keep spacing inside real text."""
    return text if text.strip() else ""


def parse_markup(markup: str) -> MarkupNode:
    """Parse ``markup`` into a MarkupNode tree.

    Namespace processing is disabled, so prefixed attributes such as
    ``xlink:href`` keep their qualified names even without an ``xmlns``
    declaration.
    """
    builder = _TreeBuilder()
    parser = expat.ParserCreate()
    parser.ordered_attributes = True
    parser.buffer_text = True
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    try:
        parser.Parse(markup, True)
    except expat.ExpatError as exc:
        raise ParseError(f"Malformed markup: {exc}") from exc
    if builder.root is None:
        raise ParseError("Markup contains no root element")
    return builder.root


__all__ = ["parse_markup"]
