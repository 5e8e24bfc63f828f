"""Exceptions raised by the content store."""

from __future__ import annotations


class ContentStoreError(Exception):
    """Base class for content store failures."""


class NotFound(ContentStoreError, LookupError):
    """Requested document does not exist in the store."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Document not found: {path}")


class MalformedMetadata(ContentStoreError, ValueError):
    """Front matter could not be parsed, or a field failed validation."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
