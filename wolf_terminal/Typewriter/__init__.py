"""
Typewriter engine: reveal a nested content tree one character at a time.

The engine is split into pure pieces and one stateful piece:

- content_nodes: the tree model and the character counter
- projection: cutting a tree down to a reveal budget
- scheduler: the timer-driven reveal count with exactly-once completion
- rich_adapter: conversions to and from Rich ``Text``
"""

from .content_nodes import (
    EMPTY,
    Container,
    ContentNode,
    Empty,
    Leaf,
    iter_leaves,
    same_shape,
    text_length,
    visible_text,
)
from .exceptions import ContentTypeError, InvalidStepError, TypewriterError
from .projection import project
from .rich_adapter import from_markup, from_text, styled, to_content_node, to_text
from .scheduler import RevealScheduler, TimerFactory, TimerHandle, require_positive


__all__ = [
    'EMPTY',
    'Container',
    'ContentNode',
    'Empty',
    'Leaf',
    'iter_leaves',
    'same_shape',
    'text_length',
    'visible_text',
    'project',
    'RevealScheduler',
    'TimerFactory',
    'TimerHandle',
    'require_positive',
    'from_markup',
    'from_text',
    'styled',
    'to_content_node',
    'to_text',
    'TypewriterError',
    'InvalidStepError',
    'ContentTypeError',
]
