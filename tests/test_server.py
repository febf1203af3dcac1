"""
Integration Tests for the HTTP API

Tests the FastAPI routes against an in-memory scenario store.
"""

from fastapi.testclient import TestClient
from helpers import make_doc, make_store

from zerops_kb import __version__
from zerops_kb.engine import DirectorySource, DocumentStore
from zerops_kb.server import create_app


# ---------------------------------------------------------------------------
# SEARCH
# ---------------------------------------------------------------------------


class TestSearchEndpoint:
    """POST /api/v1/search"""

    def test_search_returns_ranked_results(self, client):
        response = client.post("/api/v1/search", json={"query": "laravel"})

        assert response.status_code == 200
        body = response.json()
        assert body["query"] == "laravel"
        assert body["count"] == 1
        result = body["results"][0]
        assert result["id"] == "recipe/laravel-jetstream"
        assert result["name"] == "Laravel Jetstream"
        assert result["type"] == "recipe"
        assert result["summary"] == "Laravel starter kit"
        assert result["tags"] == ["recipe", "laravel"]
        assert result["score"] == 21.0

    def test_empty_query_lists_all(self, client):
        response = client.post("/api/v1/search", json={"query": ""})

        body = response.json()
        assert body["count"] == 2
        assert all(r["score"] == 0.1 for r in body["results"])

    def test_missing_query_lists_all(self, client):
        response = client.post("/api/v1/search", json={})

        assert response.status_code == 200
        assert response.json()["count"] == 2

    def test_query_is_echoed_verbatim(self, client):
        response = client.post("/api/v1/search", json={"query": "Laravel, NodeJS"})

        assert response.json()["query"] == "Laravel, NodeJS"

    def test_no_match_returns_empty_list(self, client):
        response = client.post("/api/v1/search", json={"query": "cobol"})

        assert response.json() == {"query": "cobol", "results": [], "count": 0}

    def test_limit_is_applied(self, client):
        response = client.post("/api/v1/search", json={"query": "", "limit": 1})

        assert response.json()["count"] == 1

    def test_out_of_range_limit_uses_default(self):
        docs = [make_doc(f"knowledge/data/service/s{i}.json", {}) for i in range(30)]
        with TestClient(create_app(store=make_store(*docs))) as client:
            for limit in (0, -5, None, 100):
                payload = {"query": ""} if limit is None else {"query": "", "limit": limit}
                response = client.post("/api/v1/search", json=payload)
                assert response.json()["count"] == 10

    def test_malformed_json_is_client_error(self, client):
        response = client.post(
            "/api/v1/search",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_invalid_limit_type_is_client_error(self, client):
        response = client.post("/api/v1/search", json={"query": "php", "limit": "lots"})

        assert response.status_code == 400
        assert "limit" in response.json()["error"]

    def test_get_not_allowed(self, client):
        response = client.get("/api/v1/search")

        assert response.status_code == 405


# ---------------------------------------------------------------------------
# LOOKUP
# ---------------------------------------------------------------------------


class TestKnowledgeEndpoint:
    """GET /api/v1/knowledge/{id}"""

    def test_get_knowledge(self, client):
        response = client.get("/api/v1/knowledge/recipe/laravel-jetstream")

        assert response.status_code == 200
        assert response.json() == {
            "id": "recipe/laravel-jetstream",
            "name": "laravel-jetstream",
            "type": "recipe",
            "content": {"framework": "laravel", "description": "Laravel starter kit"},
        }

    def test_unknown_knowledge_is_404(self, client):
        response = client.get("/api/v1/knowledge/service/unknown")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Knowledge not found"}

    def test_empty_identifier_is_404(self, client):
        response = client.get("/api/v1/knowledge/")

        assert response.status_code == 404


# ---------------------------------------------------------------------------
# INFO / HEALTH
# ---------------------------------------------------------------------------


class TestInfoEndpoints:
    """Landing page, health and readiness."""

    def test_landing_page_shows_item_count(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert '<div class="stat-value" id="item-count">2</div>' in response.text
        assert "/api/v1/search" in response.text

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__

    def test_ready_with_loaded_index(self, client):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["checks"] == {"knowledge_index": True}
        assert response.json()["knowledge_items"] == 2

    def test_not_ready_with_empty_index(self):
        with TestClient(create_app(store=DocumentStore())) as client:
            response = client.get("/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_security_headers(self, client):
        response = client.get("/health")

        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "DENY"
        assert response.headers["x-request-id"]

    def test_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Request-Id": "abc-123"})

        assert response.headers["x-request-id"] == "abc-123"


class TestStartupBuild:
    """The store is built from the configured source when none is injected."""

    def test_builds_from_source(self, tmp_path):
        base = tmp_path / "knowledge" / "data" / "service"
        base.mkdir(parents=True)
        (base / "nodejs.json").write_text('{"description": "JavaScript runtime"}')

        app = create_app(source=DirectorySource(tmp_path, "knowledge/data"))
        with TestClient(app) as client:
            response = client.get("/api/v1/knowledge/service/nodejs")

        assert response.status_code == 200
        assert response.json()["content"] == {"description": "JavaScript runtime"}

    def test_builds_bundled_knowledge_by_default(self):
        with TestClient(create_app()) as client:
            response = client.get("/api/v1/knowledge/recipe/laravel-jetstream")

        assert response.status_code == 200
        assert response.json()["type"] == "recipe"
