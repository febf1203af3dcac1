"""
Unit Tests for the Document Store

Tests put/get semantics, freezing, and the startup index build.
"""

import logging

import pytest
from helpers import InMemorySource, make_doc

from zerops_kb.engine import (
    DirectorySource,
    DocumentStore,
    KnowledgeNotFoundError,
    StoreFrozenError,
    build_store,
)


# ---------------------------------------------------------------------------
# STORE OPERATIONS
# ---------------------------------------------------------------------------


class TestDocumentStore:
    """Test DocumentStore basic operations."""

    def test_put_and_get(self, nodejs_doc):
        store = DocumentStore()
        store.put(nodejs_doc)

        assert store.get("service/nodejs") is nodejs_doc
        assert "service/nodejs" in store
        assert len(store) == 1

    def test_get_unknown_raises_not_found(self):
        store = DocumentStore()

        with pytest.raises(KnowledgeNotFoundError) as exc_info:
            store.get("service/missing")

        assert exc_info.value.knowledge_id == "service/missing"

    def test_put_overwrites_and_warns(self, caplog):
        """Last write wins on identifier collision."""
        first = make_doc("knowledge/data/recipe/django.json", {"description": "first"})
        second = make_doc("knowledge/data/recipes/recipe-django.json", {"description": "second"})
        store = DocumentStore()

        with caplog.at_level(logging.WARNING):
            store.put(first)
            store.put(second)

        assert len(store) == 1
        assert store.get("recipe/django").view.description == "second"
        assert "recipe/django" in caplog.text

    def test_all_preserves_insertion_order(self, nodejs_doc, jetstream_doc):
        store = DocumentStore()
        store.put(jetstream_doc)
        store.put(nodejs_doc)

        assert [doc.id for doc in store.all()] == ["recipe/laravel-jetstream", "service/nodejs"]
        assert [doc.id for doc in store] == ["recipe/laravel-jetstream", "service/nodejs"]

    def test_frozen_store_rejects_writes(self, nodejs_doc):
        store = DocumentStore()
        store.freeze()

        with pytest.raises(StoreFrozenError):
            store.put(nodejs_doc)
        assert store.frozen


# ---------------------------------------------------------------------------
# INDEX BUILD
# ---------------------------------------------------------------------------


class TestBuildStore:
    """Test building the store from a knowledge source."""

    def test_indexes_json_resources(self):
        source = InMemorySource(
            {
                "knowledge/data/service/nodejs.json": b'{"language": "JavaScript"}',
                "knowledge/data/recipes/recipe-laravel-jetstream.json": b'{"framework": "laravel"}',
            }
        )

        store = build_store(source)

        assert len(store) == 2
        assert store.get("recipe/laravel-jetstream").type == "recipe"
        assert store.get("service/nodejs").view.language == "JavaScript"
        assert store.frozen

    def test_skips_bad_resources_without_aborting(self):
        source = InMemorySource(
            {
                "knowledge/data/service/broken.json": b"{oops",
                "knowledge/data/service/unreadable.json": OSError("permission denied"),
                "data/short.json": b"{}",
                "knowledge/data/README.md": b"# not json",
                "knowledge/data/service/postgresql.json": b'{"type": "database"}',
            }
        )

        store = build_store(source)

        assert [doc.id for doc in store] == ["service/postgresql"]

    def test_later_resource_wins_on_collision(self):
        source = InMemorySource(
            {
                "knowledge/data/recipe/django.json": b'{"description": "old"}',
                "knowledge/data/recipes/recipe-django.json": b'{"description": "new"}',
            }
        )

        store = build_store(source)

        assert len(store) == 1
        assert store.get("recipe/django").view.description == "new"

    def test_non_object_content_is_still_indexed(self):
        source = InMemorySource({"knowledge/data/nginx/list.json": b'["a", "b"]'})

        store = build_store(source)

        assert store.get("nginx/list").content == ["a", "b"]


class TestDirectorySource:
    """Test reading knowledge from a directory tree."""

    def test_lists_files_sorted_with_base_path(self, tmp_path):
        base = tmp_path / "knowledge" / "data"
        (base / "service").mkdir(parents=True)
        (base / "recipes").mkdir()
        (base / "service" / "nodejs.json").write_text('{"language": "JavaScript"}')
        (base / "recipes" / "recipe-django.json").write_text('{"framework": "Django"}')

        source = DirectorySource(tmp_path, "knowledge/data")

        assert source.list_resources() == [
            "knowledge/data/recipes/recipe-django.json",
            "knowledge/data/service/nodejs.json",
        ]
        assert source.read("knowledge/data/service/nodejs.json") == b'{"language": "JavaScript"}'

    def test_missing_base_path_yields_nothing(self, tmp_path):
        source = DirectorySource(tmp_path, "knowledge/data")

        assert source.list_resources() == []
        assert len(build_store(source)) == 0

    def test_bundled_knowledge_builds(self, bundled_store):
        assert "service/nodejs" in bundled_store
        assert "service/postgresql" in bundled_store

        jetstream = bundled_store.get("recipe/laravel-jetstream")
        assert jetstream.type == "recipe"
        assert jetstream.view.framework == "Laravel"
