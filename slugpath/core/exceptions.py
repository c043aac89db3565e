"""Errors raised while turning content records into output mappings."""

from __future__ import annotations


class InvalidSlugError(ValueError):
    """Raised when a slug has no usable trailing path segment."""

    def __init__(self, slug: str, reason: str | None = None) -> None:
        self.slug = slug
        self.reason = reason
        message = f"Incorrect slug: {slug!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ContentConfigError(Exception):
    """Raised when the content list cannot be loaded."""
