"""
Test suite for vector store backends.

Covers the in-memory store and the SQLite blob table against the shared
contract: replace by chunk id, source filtering, dimension filtering,
deterministic tie order and reset.

System role: Verification of vector backends
"""

import numpy as np
import pytest

from distill.boundary.vdb.memory_store import InMemoryVectorStore
from distill.boundary.vdb.sqlite_store import (
    SQLiteBlobVectorStore,
    cosine_scores,
    pack_vector,
    unpack_vector,
)
from distill.boundary.vdb.vector_schemas import VectorStoreRecord
from distill.core.exceptions import VectorStoreError


def record(chunk_id: str, source_id: str, vector: list[float], text: str | None = None) -> VectorStoreRecord:
    return VectorStoreRecord(
        chunk_id=chunk_id,
        source_id=source_id,
        text=text or f"text of {chunk_id}",
        vector=vector,
    )


@pytest.fixture(params=["memory", "sqlite"])
async def store(request, tmp_path):
    """Each backend under test, ready and empty."""
    if request.param == "memory":
        backend = InMemoryVectorStore(max_top_k=3)
    else:
        backend = SQLiteBlobVectorStore(str(tmp_path / "vectors.db"), max_top_k=3)
    await backend.setup()
    yield backend
    await backend.close()


class TestVectorStoreRecord:
    """Test suite for record validation."""

    def test_dim_should_be_derived_from_vector(self) -> None:
        assert record("c1", "s1", [0.1, 0.2, 0.3]).dim == 3

    def test_mismatched_dim_should_raise(self) -> None:
        with pytest.raises(ValueError):
            VectorStoreRecord(chunk_id="c1", source_id="s1", text="t", vector=[1.0], dim=2)


class TestVectorStoreContract:
    """Contract tests run against every backend."""

    @pytest.mark.asyncio
    async def test_upsert_should_replace_by_chunk_id(self, store) -> None:
        await store.upsert([record("c1", "s1", [1.0, 0.0], text="old")])
        await store.upsert([record("c1", "s1", [1.0, 0.0], text="new")])

        results = await store.query_top_k(None, [1.0, 0.0], 5)

        assert await store.count() == 1
        assert [r.content for r in results] == ["new"]

    @pytest.mark.asyncio
    async def test_query_should_rank_by_cosine(self, store) -> None:
        await store.upsert(
            [
                record("c1", "s1", [0.0, 1.0]),
                record("c2", "s1", [1.0, 0.0]),
                record("c3", "s1", [1.0, 1.0]),
            ]
        )

        results = await store.query_top_k(None, [1.0, 0.1], 3)

        assert [r.chunk_id for r in results] == ["c2", "c3", "c1"]
        assert results[0].similarity_score == pytest.approx(0.995, abs=1e-3)

    @pytest.mark.asyncio
    async def test_query_should_filter_sources(self, store) -> None:
        await store.upsert([record("c1", "s1", [1.0, 0.0]), record("c2", "s2", [1.0, 0.0])])

        results = await store.query_top_k(["s2"], [1.0, 0.0], 5)

        assert [r.source_id for r in results] == ["s2"]

    @pytest.mark.asyncio
    async def test_empty_source_filter_should_return_nothing(self, store) -> None:
        await store.upsert([record("c1", "s1", [1.0, 0.0])])

        assert await store.query_top_k([], [1.0, 0.0], 5) == []

    @pytest.mark.asyncio
    async def test_query_should_skip_other_dimensions(self, store) -> None:
        await store.upsert([record("c1", "s1", [1.0, 0.0]), record("c2", "s1", [1.0, 0.0, 0.0])])

        results = await store.query_top_k(None, [1.0, 0.0, 0.0], 5)

        assert [r.chunk_id for r in results] == ["c2"]

    @pytest.mark.asyncio
    async def test_query_should_cap_at_max_top_k(self, store) -> None:
        await store.upsert([record(f"c{i}", "s1", [1.0, float(i)]) for i in range(6)])

        results = await store.query_top_k(None, [1.0, 1.0], 50)

        assert len(results) == 3

    @pytest.mark.asyncio
    async def test_equal_scores_should_keep_insertion_order(self, store) -> None:
        await store.upsert([record("c1", "s1", [2.0, 0.0]), record("c2", "s1", [1.0, 0.0])])

        results = await store.query_top_k(None, [1.0, 0.0], 2)

        assert [r.chunk_id for r in results] == ["c1", "c2"]

    @pytest.mark.asyncio
    async def test_reset_should_remove_every_record(self, store) -> None:
        await store.upsert([record("c1", "s1", [1.0, 0.0]), record("c2", "s2", [0.0, 1.0])])

        await store.reset()

        assert await store.count() == 0
        assert await store.query_top_k(None, [1.0, 0.0], 5) == []


class TestSQLiteBlobVectorStore:
    """Backend specific behaviour of the blob table."""

    def test_pack_should_round_trip_float32(self) -> None:
        restored = unpack_vector(pack_vector([0.5, -1.25, 3.0]))

        assert restored.dtype == np.float32
        assert restored.tolist() == [0.5, -1.25, 3.0]

    def test_zero_norm_rows_should_score_zero(self) -> None:
        scores = cosine_scores(np.array([[0.0, 0.0], [1.0, 0.0]], dtype=np.float32), np.array([1.0, 0.0]))

        assert scores.tolist() == pytest.approx([0.0, 1.0])

    @pytest.mark.asyncio
    async def test_records_should_survive_reopen(self, tmp_path) -> None:
        """Data written by one store instance is visible to the next."""
        path = str(tmp_path / "nested" / "vectors.db")
        first = SQLiteBlobVectorStore(path)
        await first.setup()
        await first.upsert([record("c1", "s1", [1.0, 0.0])])
        await first.close()

        second = SQLiteBlobVectorStore(path)
        await second.setup()
        try:
            assert await second.count() == 1
            assert second.durable is True
        finally:
            await second.close()


    @pytest.mark.asyncio
    async def test_count_without_table_should_raise_store_error(self, tmp_path) -> None:
        store = SQLiteBlobVectorStore(str(tmp_path / "vectors.db"))
        try:
            with pytest.raises(VectorStoreError) as exc_info:
                await store.count()
        finally:
            await store.close()

        assert exc_info.value.details["operation"] == "count"
