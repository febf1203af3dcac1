"""Test helpers for building documents, stores and sources."""

import json

from zerops_kb.engine import DocumentStore
from zerops_kb.engine.core import KnowledgeDocument, parse_document


class InMemorySource:
    """Knowledge source backed by a dict of path → bytes, listed in insertion order.

    A value that is an exception instance is raised on read.
    """

    def __init__(self, resources: dict):
        self.resources = resources

    def list_resources(self) -> list[str]:
        return list(self.resources)

    def read(self, path: str) -> bytes:
        data = self.resources[path]
        if isinstance(data, Exception):
            raise data
        return data


def make_doc(path: str, content) -> KnowledgeDocument:
    """Parse a document from a resource path and a JSON-serializable payload."""
    doc = parse_document(path, json.dumps(content).encode())
    assert doc is not None
    return doc


def make_store(*docs: KnowledgeDocument) -> DocumentStore:
    store = DocumentStore()
    for doc in docs:
        store.put(doc)
    store.freeze()
    return store
