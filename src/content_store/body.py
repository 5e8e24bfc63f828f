"""Read-only inspection of Markdown bodies.

Reports what a body contains (code sample languages, link reference
definitions, words, first heading) without rendering anything.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

_FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_LINK_REF_RE = re.compile(r"^ {0,3}\[(?P<label>[^\]^][^\]]*)\]:\s*<?(?P<url>[^\s>]+)>?")
_HEADING_RE = re.compile(r"^ {0,3}#\s+(?P<text>.+?)(?:\s+#+)?\s*$")

TEXT = "text"
FENCE_OPEN = "fence_open"
CODE = "code"
FENCE_CLOSE = "fence_close"


def _classify_lines(body: str) -> Iterator[tuple[str, str, str]]:
    """Yield (kind, line, info) for each line, tracking fenced code blocks.

    `info` is the opening fence's info string on FENCE_OPEN lines, else "".
    An unclosed fence runs to the end of the body.
    """
    open_fence = ""
    for line in body.splitlines():
        match = _FENCE_RE.match(line)
        if not open_fence:
            if match and not (match["fence"][0] == "`" and "`" in match["info"]):
                open_fence = match["fence"]
                yield FENCE_OPEN, line, match["info"].strip()
            else:
                yield TEXT, line, ""
        elif (
            match
            and match["fence"][0] == open_fence[0]
            and len(match["fence"]) >= len(open_fence)
            and not match["info"].strip()
        ):
            open_fence = ""
            yield FENCE_CLOSE, line, ""
        else:
            yield CODE, line, ""


def fenced_code_languages(body: str) -> list[str]:
    """Languages of fenced code blocks, in order. Unlabelled fences are skipped."""
    return [
        info.split()[0]
        for kind, _, info in _classify_lines(body)
        if kind == FENCE_OPEN and info
    ]


def link_references(body: str) -> dict[str, str]:
    """Link reference definitions as {lower-cased label: url}.

    The first definition of a label wins; definitions inside code are ignored.
    """
    refs: dict[str, str] = {}
    for kind, line, _ in _classify_lines(body):
        if kind != TEXT:
            continue
        match = _LINK_REF_RE.match(line)
        if match:
            label = " ".join(match["label"].split()).lower()
            refs.setdefault(label, match["url"])
    return refs


def word_count(body: str) -> int:
    """Whitespace-separated words outside fenced code."""
    return sum(
        len(line.split())
        for kind, line, _ in _classify_lines(body)
        if kind == TEXT
    )


def first_heading(body: str) -> str:
    """Text of the first level-1 ATX heading, or empty string."""
    for kind, line, _ in _classify_lines(body):
        if kind != TEXT:
            continue
        match = _HEADING_RE.match(line)
        if match:
            return match["text"].strip()
    return ""
