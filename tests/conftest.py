"""Shared test fixtures for the site content store."""

import logging
import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.content_store.store import ContentStore


HELLO_POST = """---
title: "Hello"
date: 2025-01-01
tags: [a, b]
---
# Hello

First post.
"""

DRAFT_POST = """---
date: 2025-02-10T08:00:00Z
draft: true
title: Work in progress
tags: go
---
Not ready yet.
"""

ABOUT_PAGE = """---
date: 2023-06-01
title: About
---
Bio goes here.
"""


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def write_doc(tmp_path):
    """Factory writing a document under tmp_path/content and returning its path."""
    root = tmp_path / "content"
    root.mkdir(exist_ok=True)

    def _write(relative: str, text: str) -> Path:
        file_path = root / relative
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(text, encoding="utf-8")
        return file_path

    return _write


@pytest.fixture
def content_dir(tmp_path, write_doc) -> Path:
    """A small valid content tree: one page, one post, one draft."""
    write_doc("_index.md", ABOUT_PAGE)
    write_doc("posts/hello.md", HELLO_POST)
    write_doc("posts/wip.md", DRAFT_POST)
    return tmp_path / "content"


@pytest.fixture
def store(content_dir) -> ContentStore:
    return ContentStore(content_dir)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so each test binds the current stdout."""
    yield
    logger = logging.getLogger("src.content_store")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
