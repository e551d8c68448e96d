"""
Test suite for the remote embedding tiers.

No network: transports are patched, credentials are controlled through
the environment.

System role: Verification of fail-closed embedding transports
"""

from unittest.mock import AsyncMock, patch

import pytest

from distill.boundary.embeddings.bedrock_embeddings import BedrockEmbeddingTier
from distill.boundary.embeddings.google_embeddings import GoogleEmbeddingTier
from distill.core.embeddings.results import FailureReason


@pytest.fixture
def google_tier(monkeypatch) -> GoogleEmbeddingTier:
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    return GoogleEmbeddingTier(dimension=4, api_key="test-key", attempts=1)


class TestGoogleEmbeddingTier:
    """Test suite for GoogleEmbeddingTier."""

    def test_provider_id_should_include_model(self, google_tier) -> None:
        assert google_tier.provider_id == "google:models/gemini-embedding-001"

    @pytest.mark.asyncio
    async def test_disabled_tier_should_fail_without_call(self, monkeypatch) -> None:
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        tier = GoogleEmbeddingTier(api_key="test-key", enabled=False)

        with patch.object(tier, "_embed_remote", new=AsyncMock()) as remote:
            result = await tier.embed(["hello"])

        assert result.ok is False
        assert result.reason is FailureReason.DISABLED
        remote.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_key_should_report_missing_credential(self, monkeypatch) -> None:
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        tier = GoogleEmbeddingTier()

        result = await tier.embed(["hello"])

        assert result.reason is FailureReason.MISSING_CREDENTIAL

    @pytest.mark.asyncio
    async def test_success_should_return_batch_with_identity(self, google_tier) -> None:
        vectors = [[0.1, 0.2, 0.3, 0.4], [0.4, 0.3, 0.2, 0.1]]

        with patch.object(google_tier, "_embed_remote", new=AsyncMock(return_value=vectors)):
            result = await google_tier.embed(["a", "b"])

        assert result.ok is True
        assert result.batch.dim == 4
        assert result.batch.provider == google_tier.provider_id
        assert result.batch.vectors == vectors

    @pytest.mark.asyncio
    async def test_transport_error_should_fail_closed(self, google_tier) -> None:
        with patch.object(
            google_tier, "_embed_remote", new=AsyncMock(side_effect=ConnectionError("reset"))
        ):
            result = await google_tier.embed(["a"])

        assert result.ok is False
        assert result.reason is FailureReason.TRANSPORT_ERROR

    @pytest.mark.asyncio
    async def test_transient_error_should_be_retried(self, monkeypatch) -> None:
        """A second attempt that succeeds yields a normal batch."""
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        tier = GoogleEmbeddingTier(api_key="test-key", attempts=2)
        remote = AsyncMock(side_effect=[TimeoutError("slow"), [[1.0, 0.0]]])

        with patch.object(tier, "_embed_remote", new=remote):
            result = await tier.embed(["a"])

        assert result.ok is True
        assert remote.await_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "vectors",
        [
            [],
            [[0.1, 0.2]],
            [[0.1, 0.2], [0.1, 0.2, 0.3]],
            [[], []],
        ],
    )
    async def test_malformed_response_should_report_bad_response(self, google_tier, vectors) -> None:
        with patch.object(google_tier, "_embed_remote", new=AsyncMock(return_value=vectors)):
            result = await google_tier.embed(["a", "b"])

        assert result.reason is FailureReason.BAD_RESPONSE


class TestBedrockEmbeddingTier:
    """Test suite for BedrockEmbeddingTier."""

    def test_empty_model_id_should_raise(self) -> None:
        with pytest.raises(ValueError):
            BedrockEmbeddingTier(model_id="")

    @pytest.mark.asyncio
    async def test_missing_credentials_should_fail_closed(self) -> None:
        tier = BedrockEmbeddingTier()

        with patch.object(BedrockEmbeddingTier, "has_credentials", return_value=False):
            result = await tier.embed(["hello"])

        assert tier.provider_id == "bedrock:amazon.titan-embed-text-v2:0"
        assert result.reason is FailureReason.MISSING_CREDENTIAL
