"""
Test suite for the HTTP API.

The application is built around a test context, so no backend probing or
remote calls happen.

System role: Verification of routes, error mapping and middleware
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from distill.boundary.vdb.memory_store import InMemoryVectorStore
from distill.core.exceptions import VectorStoreError
from distill.main import create_app


@pytest.fixture
def context(make_context, animals_corpus):
    return make_context(corpus=animals_corpus)


@pytest.fixture
def client(context):
    with TestClient(create_app(context=context)) as test_client:
        yield test_client


class TestHealthRoutes:
    def test_health_should_report_healthy(self, client) -> None:
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_vector_store_health_should_report_backend(self, client) -> None:
        response = client.get("/api/v1/health/vector-store")

        details = response.json()["details"]
        assert details["backend"] == "memory"
        assert details["pending_chunks"] == 4

    def test_vector_store_count_failure_should_return_error_response(self, make_context, animals_corpus) -> None:
        """A failing backend count surfaces as a structured 500."""
        # Arrange
        store = InMemoryVectorStore()
        store.count = AsyncMock(side_effect=VectorStoreError("pgvector count failed: timeout", operation="count"))
        context = make_context(corpus=animals_corpus, store=store)

        # Act
        with TestClient(create_app(context=context)) as test_client:
            response = test_client.get("/api/v1/health/vector-store")

        # Assert
        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["details"] == {"operation": "count"}


class TestSourceRoutes:
    """Test suite for /sources."""

    def test_create_source_should_return_201_with_chunks(self, client) -> None:
        response = client.post(
            "/api/v1/sources",
            json={"type": "text", "name": "Birds", "content": "Birds fly.\n\nSome birds swim."},
        )

        body = response.json()
        assert response.status_code == 201
        assert body["name"] == "Birds"
        assert [c["text"] for c in body["chunks"]] == ["Birds fly.", "Some birds swim."]

    def test_create_source_without_type_should_return_400(self, client) -> None:
        response = client.post("/api/v1/sources", json={"content": "text"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Missing type",
            "details": {"field": "type"},
        }

    def test_list_sources_should_return_all(self, client) -> None:
        body = client.get("/api/v1/sources").json()

        assert body["total"] == 2
        assert [s["id"] for s in body["sources"]] == ["src_cats", "src_dogs"]

    def test_get_source_should_return_text(self, client) -> None:
        body = client.get("/api/v1/sources/src_cats").json()

        assert body["text"].startswith("Cats are small")

    def test_unknown_source_should_return_404(self, client) -> None:
        response = client.get("/api/v1/sources/src_missing")

        assert response.status_code == 404
        assert response.json()["success"] is False
        assert response.json()["details"] == {"source_id": "src_missing"}

    def test_summary_should_be_naive_without_generator(self, client) -> None:
        body = client.get("/api/v1/sources/src_dogs/summary").json()

        assert body["degraded"] is True
        assert "summaries" in body["summary"]


class TestAskAndGenerateRoutes:
    """Test suite for /ask, /generate and /flows."""

    def test_ask_should_return_answer_with_citations(self, client) -> None:
        response = client.post("/api/v1/ask", json={"question": "What do cats eat?", "top_k": 2})

        body = response.json()
        assert response.status_code == 200
        assert body["retrieval_tier"] == "memory"
        assert body["citations"]
        assert set(body["summaries"]) == {"short", "medium", "long"}

    def test_ask_without_question_should_return_400(self, client) -> None:
        response = client.post("/api/v1/ask", json={})

        assert response.status_code == 400
        assert response.json()["details"] == {"field": "question"}

    def test_generate_should_return_single_step(self, client) -> None:
        response = client.post("/api/v1/generate", json={"type": "quiz", "source_ids": ["src_dogs"]})

        body = response.json()
        assert response.status_code == 200
        assert [s["id"] for s in body["steps"]] == ["quiz"]
        assert body["sources"] == [{"id": "src_dogs", "name": "Dogs"}]

    def test_generate_without_type_should_return_400(self, client) -> None:
        assert client.post("/api/v1/generate", json={}).status_code == 400

    def test_flow_should_run_requested_steps_in_order(self, client) -> None:
        response = client.post(
            "/api/v1/flows",
            json={"steps": [{"id": "mind_map"}, {"id": "flashcards"}]},
        )

        body = response.json()
        assert [s["id"] for s in body["steps"]] == ["mind_map", "flashcards"]
        keys = [(c["source_id"], c["snippet"]) for c in body["citations"]]
        assert len(keys) == len(set(keys))


class TestIndexRoutes:
    def test_rebuild_should_embed_corpus(self, client, context) -> None:
        response = client.post("/api/v1/index/rebuild")

        body = response.json()
        assert response.status_code == 200
        assert body["embedded_chunks"] == 4
        assert body["epoch"] == context.indexer.epoch


class TestCorrelationHeader:
    def test_given_correlation_id_should_be_echoed(self, client) -> None:
        response = client.get("/api/v1/health", headers={"X-Correlation-ID": "req-123"})

        assert response.headers["X-Correlation-ID"] == "req-123"

    def test_missing_correlation_id_should_be_generated(self, client) -> None:
        response = client.get("/api/v1/health")

        assert len(response.headers["X-Correlation-ID"]) == 32
