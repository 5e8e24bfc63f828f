"""Data models for the content store.

FrontMatter is the typed header schema; Document adds the location and body.
Both are frozen Pydantic models, so a loaded document is an immutable value.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from pydantic import BaseModel, Field, field_validator

# Canonical key order used when writing front matter back out
FRONT_MATTER_KEYS = ("date", "draft", "title", "tags")


class FrontMatter(BaseModel):
    """Metadata header of a content document."""

    model_config = {"frozen": True, "extra": "forbid"}

    date: datetime
    draft: bool = Field(default=False, strict=True)
    title: str = Field(min_length=1)
    tags: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_timestamp(cls, value):
        """Accept datetimes, bare dates (midnight) and ISO 8601 strings."""
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time())
        if isinstance(value, str):
            text = value.strip()
            if text[-1:] in ("Z", "z"):
                text = text[:-1] + "+00:00"
            try:
                return datetime.fromisoformat(text)
            except ValueError:
                raise ValueError(f"not a valid ISO 8601 timestamp: {value!r}") from None
        raise ValueError(f"expected an ISO 8601 timestamp, got {type(value).__name__}")

    @field_validator("draft", mode="before")
    @classmethod
    def _empty_draft_is_false(cls, value):
        return False if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        if value is None:
            return frozenset()
        if isinstance(value, str):
            return frozenset([value])
        return value


class Document(FrontMatter):
    """A content file: its front matter plus location and Markdown body."""

    path: str = Field(min_length=1)  # POSIX path relative to the content root
    body: str = ""

    @property
    def front_matter(self) -> FrontMatter:
        """The metadata header alone, without path and body."""
        return FrontMatter(**self.model_dump(include=set(FRONT_MATTER_KEYS)))

    @classmethod
    def from_front_matter(cls, path: str, front_matter: FrontMatter, body: str) -> Document:
        return cls(path=path, body=body, **front_matter.model_dump())


@dataclass
class DocumentError:
    """A document that failed to load during validation."""
    path: str
    error: str
