"""
Conversions between Rich renderables and typewriter content trees.

The engine itself knows nothing about styling. This module is the boundary:
it turns plain Python values, Rich ``Text`` and console markup into content
nodes, and turns (possibly partial) content nodes back into ``Text`` for
display. Container metadata that is a style (a string, a ``Style`` or a
mapping with a ``"style"`` key) is applied when rendering; anything else is
carried along untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional

from rich.style import Style
from rich.text import Text

from .content_nodes import EMPTY, Container, ContentNode, Empty, Leaf
from .exceptions import ContentTypeError


def to_content_node(value: Any) -> ContentNode:
    """Build a content tree from plain data.

    Supported values: content nodes (returned as-is), ``None`` and booleans
    (empty), strings and numbers (leaves), lists and tuples (containers
    without metadata) and Rich ``Text`` (a container of styled runs).

    Raises:
        ContentTypeError: For any other type
    """
    if isinstance(value, (Leaf, Container, Empty)):
        return value
    if value is None or isinstance(value, bool):
        return EMPTY
    if isinstance(value, (str, int, float)):
        return Leaf(value)
    if isinstance(value, Text):
        return from_text(value)
    if isinstance(value, (list, tuple)):
        return Container(tuple(to_content_node(child) for child in value))
    raise ContentTypeError(value)


def styled(*children: Any, style: Any = None) -> Container:
    """Wrap children in a container whose metadata is ``style``."""
    return Container(tuple(to_content_node(child) for child in children), style)


def from_text(text: Text) -> Container:
    """Split a Rich ``Text`` into runs at every span boundary.

    Each run becomes a leaf wrapped in one container per covering span, in
    span order, so overlapping styles nest the same way Rich layers them.
    """
    plain = text.plain
    size = len(plain)
    cuts = {0, size}
    for span in text.spans:
        cuts.add(max(0, min(span.start, size)))
        cuts.add(max(0, min(span.end, size)))
    bounds = sorted(cuts)

    children: List[ContentNode] = []
    for start, end in zip(bounds, bounds[1:]):
        if start == end:
            continue
        node: ContentNode = Leaf(plain[start:end])
        covering = [span.style for span in text.spans if span.start <= start and span.end >= end]
        for style in reversed(covering):
            node = Container((node,), style)
        children.append(node)

    return Container(tuple(children), text.style or None)


def from_markup(markup: str) -> Container:
    """Parse Rich console markup into a content tree."""
    return from_text(Text.from_markup(markup))


def style_of(metadata: Any) -> Optional[Any]:
    """Pick out the style carried by container metadata, if any."""
    if isinstance(metadata, (str, Style)):
        return metadata or None
    if isinstance(metadata, Mapping):
        return metadata.get("style")
    return None


def to_text(node: ContentNode) -> Text:
    """Render a content tree as Rich ``Text``."""
    text = Text()
    _render(node, text, [])
    return text


def _render(node: ContentNode, text: Text, styles: List[Any]) -> None:
    if isinstance(node, Leaf):
        value = node.value
        if not value:
            return
        start = len(text)
        text.append(value)
        # Outer styles first so inner ones win
        for style in styles:
            text.stylize(style, start, start + len(value))
    elif isinstance(node, Container):
        style = style_of(node.metadata)
        inner = styles + [style] if style else styles
        for child in node.children:
            _render(child, text, inner)
