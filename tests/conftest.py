"""Shared fixtures for knowledge base tests."""

import pytest
from fastapi.testclient import TestClient
from helpers import make_doc, make_store

from zerops_kb.config import settings
from zerops_kb.engine import DirectorySource, build_store
from zerops_kb.server import create_app

# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture
def nodejs_doc():
    return make_doc(
        "knowledge/data/service/nodejs.json",
        {"description": "JavaScript runtime for server-side applications"},
    )


@pytest.fixture
def jetstream_doc():
    return make_doc(
        "knowledge/data/recipes/recipe-laravel-jetstream.json",
        {"framework": "laravel", "description": "Laravel starter kit"},
    )


@pytest.fixture
def scenario_store(nodejs_doc, jetstream_doc):
    """Two-document store: service/nodejs and recipe/laravel-jetstream."""
    return make_store(nodejs_doc, jetstream_doc)


@pytest.fixture
def bundled_store():
    """Store built from the knowledge data shipped with the package."""
    return build_store(DirectorySource(settings.knowledge_root, settings.knowledge_base_path))


@pytest.fixture
def client(scenario_store):
    """Test client serving the scenario store (lifespan runs on enter)."""
    with TestClient(create_app(store=scenario_store)) as test_client:
        yield test_client
