"""
Content tree model for the typewriter engine.

A content tree is built from three node kinds:

- ``Leaf``: an indivisible run of characters (a string, or a number that is
  stringified before it is counted or sliced)
- ``Container``: ordered children plus opaque metadata the engine never reads
- ``Empty``: explicit absence, zero length

Nodes are frozen so a projected tree can share unchanged subtrees with the
caller's original without handing out write access to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Tuple, Union


@dataclass(frozen=True)
class Leaf:
    """An indivisible run of characters."""
    text: Union[str, int, float] = ""

    @property
    def value(self) -> str:
        """The leaf text, with numeric leaves in their ``str()`` form.

        Floats keep Python's formatting, so ``1e20`` counts as the five
        characters of ``"1e+20"`` and ``1.0`` as ``"1.0"``. Pass a string
        when a different rendering is wanted.
        """
        if isinstance(self.text, str):
            return self.text
        return str(self.text)


@dataclass(frozen=True)
class Container:
    """A node carrying children and caller-defined passthrough metadata."""
    children: Tuple["ContentNode", ...] = field(default_factory=tuple)
    metadata: Any = None

    def __post_init__(self):
        # Accept any iterable of children but always store a tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class Empty:
    """Explicit absence of content."""


EMPTY = Empty()

ContentNode = Union[Leaf, Container, Empty]


def text_length(node: ContentNode) -> int:
    """Count the revealable characters in a content tree.

    Leaves count their characters, containers sum their children left to
    right, and empty nodes count zero. The tree must be acyclic.
    """
    if isinstance(node, Leaf):
        return len(node.value)
    if isinstance(node, Container):
        return sum(text_length(child) for child in node.children)
    return 0


def iter_leaves(node: ContentNode) -> Iterator[Leaf]:
    """Yield leaves in document order (depth-first, left to right)."""
    if isinstance(node, Leaf):
        yield node
    elif isinstance(node, Container):
        for child in node.children:
            yield from iter_leaves(child)


def visible_text(node: ContentNode) -> str:
    """Concatenate all leaf text in document order."""
    return "".join(leaf.value for leaf in iter_leaves(node))


def same_shape(left: ContentNode, right: ContentNode) -> bool:
    """Check two trees have the same node kinds, metadata and child counts."""
    if type(left) is not type(right):
        return False
    if isinstance(left, Container):
        if left.metadata != right.metadata or len(left.children) != len(right.children):
            return False
        return all(same_shape(a, b) for a, b in zip(left.children, right.children))
    return True
