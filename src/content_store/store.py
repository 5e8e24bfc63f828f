"""Content store — read-only access to a tree of Markdown documents.

Usage:
    store = ContentStore(Path("content"))
    for doc in store.list():
        ...
    post = store.get("posts/hello.md")

The store keeps no parsed state: every list()/get() reads the files again,
so a fresh store per build sees the current content.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path, PurePosixPath

from src.common.config import StoreSettings

from .errors import MalformedMetadata, NotFound
from .frontmatter import parse_document
from .models import Document, DocumentError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md", ".markdown")


class ContentStore:
    """Enumerates and loads content documents under a root directory.

    Documents are identified by their POSIX path relative to the root.
    Drafts are returned like any other document; filtering them is up to
    the consumer.
    """

    def __init__(
        self,
        root: Path,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        strict: bool = True,
    ):
        self.root = Path(root)
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.strict = strict

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> ContentStore:
        """Build a store from StoreSettings."""
        return cls(
            root=settings.content_abs_dir,
            extensions=settings.extensions,
            strict=settings.strict,
        )

    # --- Public API ---

    def paths(self) -> list[str]:
        """Relative paths of all content files, sorted. Nothing is parsed."""
        if not self.root.is_dir():
            logger.warning("Content root %s does not exist", self.root)
            return []
        return sorted(
            file_path.relative_to(self.root).as_posix()
            for file_path in self.root.rglob("*")
            if self._is_content_file(file_path)
        )

    def list(self) -> Iterator[Document]:
        """Yield every document, loading each lazily in path order.

        Each call returns a new generator, so the sequence can be restarted.

        Raises:
            MalformedMetadata: When a document fails to load
            NotFound: When a listed file disappears before it is read
        """
        for path in self.paths():
            yield self._load(path)

    def get(self, path: str | Path) -> Document:
        """Load the document at `path` (relative to the content root).

        Raises:
            NotFound: If no content file exists at that path
            MalformedMetadata: If the document fails to load
        """
        relative = self._normalize(path)
        if relative is None:
            raise NotFound(str(path))
        return self._load(relative)

    def validate(self) -> tuple[list[Document], list[DocumentError]]:
        """Load every document, collecting failures instead of stopping.

        Returns:
            (documents, errors) tuple
        """
        documents: list[Document] = []
        errors: list[DocumentError] = []
        for path in self.paths():
            try:
                documents.append(self._load(path))
            except MalformedMetadata as exc:
                errors.append(DocumentError(path=path, error=exc.reason))
            except NotFound:
                errors.append(DocumentError(path=path, error="removed while validating"))
            except OSError as exc:
                errors.append(DocumentError(path=path, error=f"unreadable: {exc}"))

        logger.info(
            "Validated %d documents under %s: %d ok, %d failed",
            len(documents) + len(errors), self.root, len(documents), len(errors),
        )
        return documents, errors

    def __iter__(self) -> Iterator[Document]:
        return self.list()

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return self._normalize(path) is not None

    def __repr__(self) -> str:
        return f"ContentStore(root={str(self.root)!r}, strict={self.strict})"

    # --- Internal Methods ---

    def _is_content_file(self, file_path: Path) -> bool:
        """True for visible files with a content extension."""
        if not file_path.is_file() or file_path.suffix.lower() not in self.extensions:
            return False
        relative = file_path.relative_to(self.root)
        return not any(part.startswith(".") for part in relative.parts)

    def _normalize(self, path: str | Path) -> str | None:
        """Map a requested path to its relative POSIX form, or None if absent.

        Paths that are absolute or that climb out of the root are absent.
        """
        requested = PurePosixPath(Path(path).as_posix())
        if requested.is_absolute() or ".." in requested.parts:
            return None
        file_path = self.root / requested
        if not self._is_content_file(file_path):
            return None
        return requested.as_posix()

    def _load(self, path: str) -> Document:
        """Read and parse one document by relative path."""
        try:
            text = (self.root / path).read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError) as exc:
            # Removed or replaced since paths() listed it
            raise NotFound(path) from exc
        except UnicodeDecodeError as exc:
            raise MalformedMetadata(path, f"file is not valid UTF-8: {exc}") from exc
        document = parse_document(text, path, strict=self.strict)
        logger.debug("Loaded %s (draft=%s)", path, document.draft)
        return document
