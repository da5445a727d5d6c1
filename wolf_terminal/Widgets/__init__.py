"""Textual widgets for wolf_terminal."""

from .typewriter import Typewriter

__all__ = [
    "Typewriter",
]
