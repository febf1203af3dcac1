"""
Knowledge document store and index build.

Pattern: Protocol → Directory source → Store → Builder

This module contains:
1. KnowledgeSource - Protocol for read-only document sources
2. DirectorySource - JSON files on disk under a base path
3. DocumentStore - In-memory store keyed by semantic identifier
4. build_store() - One-shot index build used at startup

The store is built once and frozen; requests only ever read from it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from .core.document import KnowledgeDocument, parse_document
from .errors import DocumentParseError, KnowledgeNotFoundError, StoreFrozenError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# SOURCES
# ---------------------------------------------------------------------------


class KnowledgeSource(Protocol):
    """Read-only hierarchical tree of knowledge resources."""

    def list_resources(self) -> list[str]:
        """Return slash-separated resource paths, base path included."""
        ...

    def read(self, path: str) -> bytes:
        """Return the raw bytes of a resource."""
        ...


class DirectorySource:
    """
    Knowledge resources stored as files under `root / base_path`.

    Resource paths are relative to `root`, so with the default base path
    "knowledge/data" a file yields "knowledge/data/service/nodejs.json".
    Paths are listed in sorted order to keep the build deterministic.
    """

    def __init__(self, root: Path | str, base_path: str = "knowledge/data"):
        self.root = Path(root)
        self.base_path = base_path.strip("/")

    def list_resources(self) -> list[str]:
        base = self.root / self.base_path
        if not base.is_dir():
            logger.warning(f"Knowledge base path does not exist: {base}")
            return []
        return sorted(
            path.relative_to(self.root).as_posix() for path in base.rglob("*") if path.is_file()
        )

    def read(self, path: str) -> bytes:
        return (self.root / path).read_bytes()


# ---------------------------------------------------------------------------
# STORE
# ---------------------------------------------------------------------------


class DocumentStore:
    """
    In-memory knowledge store keyed by semantic identifier.

    Iteration follows insertion order. A put with an existing identifier
    replaces the document in place (last write wins) and logs a warning.
    Once frozen, the store rejects further writes.
    """

    def __init__(self) -> None:
        self._documents: dict[str, KnowledgeDocument] = {}
        self._frozen = False

    def put(self, doc: KnowledgeDocument) -> None:
        """Insert or overwrite a document by identifier."""
        if self._frozen:
            raise StoreFrozenError(f"Cannot insert {doc.id}: store is read-only")
        if doc.id in self._documents:
            logger.warning(f"Duplicate knowledge id '{doc.id}': replacing earlier document")
        self._documents[doc.id] = doc

    def get(self, knowledge_id: str) -> KnowledgeDocument:
        """Get a document by identifier.

        Raises:
            KnowledgeNotFoundError: If no document has this identifier
        """
        try:
            return self._documents[knowledge_id]
        except KeyError:
            raise KnowledgeNotFoundError(knowledge_id) from None

    def all(self) -> list[KnowledgeDocument]:
        """All documents in insertion order."""
        return list(self._documents.values())

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, knowledge_id: object) -> bool:
        return knowledge_id in self._documents

    def __iter__(self) -> Iterator[KnowledgeDocument]:
        return iter(self._documents.values())


# ---------------------------------------------------------------------------
# BUILD
# ---------------------------------------------------------------------------


def build_store(source: KnowledgeSource) -> DocumentStore:
    """
    Build a frozen DocumentStore from every JSON resource in a source.

    Resources that are not JSON, have too short a path, cannot be read,
    or fail to parse are skipped; one bad document never aborts the build.

    Args:
        source: Document source to index

    Returns:
        Frozen DocumentStore
    """
    store = DocumentStore()
    skipped = 0

    for path in source.list_resources():
        if not path.endswith(".json"):
            continue

        try:
            data = source.read(path)
        except OSError as e:
            logger.warning(f"Skipping unreadable knowledge resource {path}: {e}")
            skipped += 1
            continue

        try:
            doc = parse_document(path, data)
        except DocumentParseError as e:
            logger.warning(f"Skipping malformed knowledge resource: {e}")
            skipped += 1
            continue

        if doc is None:
            logger.debug(f"Skipping {path}: path too short to derive an identifier")
            skipped += 1
            continue

        store.put(doc)

    store.freeze()
    logger.info(f"Indexed {len(store)} knowledge items ({skipped} skipped)")
    return store
