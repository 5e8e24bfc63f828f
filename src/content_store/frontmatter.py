"""Front matter codec — split, parse and serialize content documents.

A document is a text file of the form::

    ---
    date: 2025-01-01
    title: "Hello"
    tags: [a, b]
    ---
    Markdown body...

The header is YAML restricted to the FrontMatter schema. The body is
everything after the closing delimiter, kept exactly as written.
"""

from __future__ import annotations

import logging

import yaml
from pydantic import ValidationError

from .errors import MalformedMetadata
from .models import FRONT_MATTER_KEYS, Document, FrontMatter

logger = logging.getLogger(__name__)

DELIMITER = "---"
BOM = "\ufeff"
YAML_LINE_BREAKS = ("\x85", "\u2028", "\u2029")


def split_front_matter(text: str, path: str = "<string>") -> tuple[str, str]:
    """Split raw document text into header YAML and Markdown body.

    Args:
        text: Full document text
        path: Document path, used in error messages

    Returns:
        (header_text, body) tuple

    Raises:
        MalformedMetadata: If the delimiters are missing or unterminated
    """
    if text.startswith(BOM):
        text = text[len(BOM):]

    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != DELIMITER:
        raise MalformedMetadata(path, f"missing opening '{DELIMITER}' front matter delimiter")

    for index in range(1, len(lines)):
        if lines[index].rstrip() == DELIMITER:
            header = "".join(lines[1:index])
            body = "".join(lines[index + 1:])
            return header, body

    raise MalformedMetadata(path, f"unterminated front matter (no closing '{DELIMITER}')")


def parse_front_matter(
    header_text: str,
    path: str = "<string>",
    strict: bool = True,
) -> FrontMatter:
    """Parse header YAML into a validated FrontMatter.

    Args:
        header_text: YAML between the delimiters
        path: Document path, used in error messages
        strict: Reject unknown keys (otherwise drop them with a warning)

    Returns:
        Validated FrontMatter

    Raises:
        MalformedMetadata: On invalid YAML, a non-mapping header, or a
            missing/invalid field
    """
    try:
        data = yaml.safe_load(header_text)
    except (yaml.YAMLError, ValueError) as exc:
        # PyYAML raises ValueError for timestamps like 2025-13-45
        raise MalformedMetadata(path, f"front matter is not valid YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedMetadata(
            path, f"front matter must be a key/value mapping, got {type(data).__name__}"
        )

    data = {str(key): value for key, value in data.items()}
    if not strict:
        unknown = sorted(key for key in data if key not in FRONT_MATTER_KEYS)
        if unknown:
            logger.warning("%s: ignoring unknown front matter keys: %s", path, ", ".join(unknown))
            data = {key: value for key, value in data.items() if key in FRONT_MATTER_KEYS}

    try:
        return FrontMatter.model_validate(data)
    except ValidationError as exc:
        raise MalformedMetadata(path, _describe_errors(exc)) from exc


def parse_document(text: str, path: str, strict: bool = True) -> Document:
    """Parse full document text into a Document located at `path`."""
    header_text, body = split_front_matter(text, path)
    front_matter = parse_front_matter(header_text, path, strict=strict)
    return Document.from_front_matter(path, front_matter, body)


def serialize_front_matter(front_matter: FrontMatter) -> str:
    """Write front matter as YAML in canonical key order.

    The date becomes an ISO 8601 string and tags a sorted list, so the
    output is stable for a given FrontMatter.
    """
    data = {
        "date": front_matter.date.isoformat(),
        "draft": front_matter.draft,
        "title": front_matter.title,
        "tags": sorted(front_matter.tags),
    }
    # Raw NEL/LS/PS would be read back as line breaks; escaping keeps them
    texts = [front_matter.title, *front_matter.tags]
    allow_unicode = not any(ch in text for text in texts for ch in YAML_LINE_BREAKS)
    return yaml.safe_dump(
        data,
        sort_keys=False,
        allow_unicode=allow_unicode,
        default_flow_style=None,
    )


def serialize_document(document: Document) -> str:
    """Write a Document back to its on-disk text form."""
    header = serialize_front_matter(document.front_matter)
    return f"{DELIMITER}\n{header}{DELIMITER}\n{document.body}"


def _describe_errors(exc: ValidationError) -> str:
    """Flatten Pydantic errors into one readable line."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "front matter"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)
