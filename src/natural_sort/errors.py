"""Exception hierarchy for natural sorting."""
from __future__ import annotations


class NaturalSortError(Exception):
    """Base class for errors raised by the package."""


class ConfigurationError(NaturalSortError, ValueError):
    """Raised when a comparer or listing configuration is invalid."""


class SourceError(NaturalSortError):
    """Raised when a listing cannot be read or fetched."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


__all__ = ["NaturalSortError", "ConfigurationError", "SourceError"]
