"""Exceptions raised by the typewriter engine."""


class TypewriterError(Exception):
    """Base class for typewriter engine errors."""


class InvalidStepError(TypewriterError, ValueError):
    """Raised when a reveal step or interval is not a positive integer."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive integer, got {value!r}")


class ContentTypeError(TypewriterError, TypeError):
    """Raised when a value cannot be turned into a content node."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported content type: {type(value).__name__}")
