"""
wolf_terminal - a portfolio presented as a simulated terminal

Command output is revealed character by character by the typewriter engine
in ``wolf_terminal.Typewriter``, which walks nested styled content in
document order and keeps its shape intact while it types.
"""

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "__version__",
]
