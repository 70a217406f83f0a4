"""Exception types raised while resolving and writing generated files."""

from __future__ import annotations


class GenerationError(RuntimeError):
    """Base class for failures outside input validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UnknownAliasError(GenerationError):
    """Raised when a namespace starts with an alias nobody registered."""


class OutputWriteError(GenerationError):
    """Raised when a generated file cannot be written to disk."""
