# Content Store — front matter documents for the static site generator
"""
Read-only access to the site's Markdown content.

Loads documents (front matter + body) from a content tree, validates their
metadata against a fixed schema, and serializes them back. Rendering is
left to the external static-site generator.
"""

from .body import fenced_code_languages, first_heading, link_references, word_count
from .errors import ContentStoreError, MalformedMetadata, NotFound
from .frontmatter import (
    parse_document,
    parse_front_matter,
    serialize_document,
    serialize_front_matter,
    split_front_matter,
)
from .models import Document, DocumentError, FrontMatter
from .store import ContentStore

__all__ = [
    "ContentStore",
    "ContentStoreError",
    "Document",
    "DocumentError",
    "FrontMatter",
    "MalformedMetadata",
    "NotFound",
    "fenced_code_languages",
    "first_heading",
    "link_references",
    "parse_document",
    "parse_front_matter",
    "serialize_document",
    "serialize_front_matter",
    "split_front_matter",
    "word_count",
]
