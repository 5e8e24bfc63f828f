"""CLI entry point for checking site content.

Usage:
    python -m src.content_store.main list
    python -m src.content_store.main list --no-drafts --content-dir content/
    python -m src.content_store.main show posts/hello.md
    python -m src.content_store.main check --lenient
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from src.common.config import Settings
from src.common.logging import setup_logging

from .body import fenced_code_languages, link_references, word_count
from .errors import ContentStoreError
from .frontmatter import serialize_front_matter
from .models import Document
from .store import ContentStore

# Store and codec loggers propagate to this one
PACKAGE_LOGGER = __package__ or "src.content_store"
CONTENT_DIR_HELP = "Content root directory (default: from config/settings.yaml or CONTENT_DIR)"

logger = logging.getLogger(__name__)


def _format_row(doc: Document) -> str:
    marker = "[draft] " if doc.draft else ""
    tags = ", ".join(sorted(doc.tags))
    return f"{doc.path}\t{doc.date:%Y-%m-%d}\t{marker}{doc.title}\t{tags}"


def _run_list(store: ContentStore, args: argparse.Namespace) -> int:
    """Print one line per document."""
    shown = 0
    for doc in store.list():
        if doc.draft and not args.drafts:
            continue
        print(_format_row(doc))
        shown += 1
    logger.info("Listed %d documents", shown)
    return 0


def _run_show(store: ContentStore, args: argparse.Namespace) -> int:
    """Print normalized front matter and body facts for one document."""
    doc = store.get(args.path)
    print(f"# {doc.path}")
    print(serialize_front_matter(doc.front_matter), end="")
    print(f"words: {word_count(doc.body)}")
    languages = fenced_code_languages(doc.body)
    print(f"code: {', '.join(languages) if languages else '-'}")
    for label, url in sorted(link_references(doc.body).items()):
        print(f"ref: [{label}] {url}")
    return 0


def _run_check(store: ContentStore, args: argparse.Namespace) -> int:
    """Validate every document and report failures."""
    documents, errors = store.validate()
    for err in errors:
        logger.error("%s: %s", err.path, err.error)

    drafts = sum(1 for doc in documents if doc.draft)
    print(f"{len(documents)} ok ({drafts} drafts), {len(errors)} failed")
    return 1 if errors else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect and validate site content")
    parser.add_argument("--content-dir", type=Path, default=None, help=CONTENT_DIR_HELP)

    # Accepted after the subcommand too; SUPPRESS keeps a top-level value intact
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--content-dir", type=Path, default=argparse.SUPPRESS, help=CONTENT_DIR_HELP,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", parents=[common], help="List all documents")
    list_parser.add_argument(
        "--drafts",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show draft documents",
    )
    list_parser.set_defaults(handler=_run_list)

    show_parser = subparsers.add_parser("show", parents=[common], help="Show one document")
    show_parser.add_argument("path", help="Document path relative to the content root")
    show_parser.set_defaults(handler=_run_show)

    check_parser = subparsers.add_parser("check", parents=[common], help="Validate all documents")
    check_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Drop unknown front matter keys instead of failing",
    )
    check_parser.set_defaults(handler=_run_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(module_name=PACKAGE_LOGGER)

    store_settings = Settings.load().store
    if args.content_dir is not None:
        store_settings = store_settings.model_copy(update={"content_dir": args.content_dir.resolve()})
    if getattr(args, "lenient", False):
        store_settings = store_settings.model_copy(update={"strict": False})

    store = ContentStore.from_settings(store_settings)
    logger.info("Using content root: %s", store.root)

    try:
        return args.handler(store, args)
    except ContentStoreError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("Could not read content: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
