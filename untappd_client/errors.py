"""Exceptions raised by the Untappd client."""

from __future__ import annotations


class UntappdError(Exception):
    """Base class for errors raised by this package."""


class MissingFieldError(UntappdError, ValueError):
    """A required endpoint field was absent or None."""

    def __init__(self, field: str, path: str) -> None:
        self.field = field
        self.path = path
        super().__init__(f"Field {field} cannot be null in {path}")
