"""
Tree projection: cut a content tree down to a reveal budget.

The budget is consumed depth-first, left to right, so a leaf nested several
containers deep reveals at exactly the same document offset as a flat one.
The remaining budget is threaded through the recursion as a return value,
keeping each projection O(tree size).
"""

from __future__ import annotations

from typing import Tuple

from .content_nodes import Container, ContentNode, Leaf, text_length


def _project(node: ContentNode, budget: int) -> Tuple[ContentNode, int]:
    """Project one node and return it with the budget left for its siblings."""
    if isinstance(node, Leaf):
        text = node.value
        length = len(text)
        if budget >= length:
            return node, budget - length
        if budget <= 0:
            return Leaf(""), budget
        return Leaf(text[:budget]), 0

    if isinstance(node, Container):
        children = []
        for child in node.children:
            projected, budget = _project(child, budget)
            children.append(projected)
        # Children past the budget stay in place as empty nodes so positions
        # remain stable from one tick to the next
        return Container(tuple(children), node.metadata), budget

    return node, budget


def project(node: ContentNode, budget: int) -> ContentNode:
    """Return ``node`` with only its first ``budget`` characters revealed.

    The input tree is never modified. Once the budget covers the whole tree
    the original node is returned as-is.

    Args:
        node: The content tree to project
        budget: Number of characters allowed to show, in document order

    Returns:
        A tree with the same shape as ``node`` whose leaves are truncated
    """
    if budget >= text_length(node):
        return node
    projected, _ = _project(node, budget)
    return projected
