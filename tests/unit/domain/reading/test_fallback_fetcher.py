"""Unit tests for FallbackFetcher."""

import logging
from unittest.mock import AsyncMock, call

import pytest

from fng.domain.reading.model.value import ReadingSource, SourceReading
from fng.domain.reading.port.source import SentimentSource
from fng.domain.reading.service.fetch import FallbackFetcher
from fng.domain.shared.error import FetchError

PRIMARY = "https://primary.example/graphdata"
BACKUP = "https://backup.example/cnn_api.json"


def make_fetcher(source: AsyncMock) -> FallbackFetcher:
    return FallbackFetcher(source=source, primary_url=PRIMARY, backup_url=BACKUP)


class TestFallbackFetcher:
    @pytest.mark.asyncio
    async def test_primary_success_is_tagged_primary(self):
        source = AsyncMock(spec=SentimentSource)
        source.fetch.return_value = SourceReading(score=55.3, timestamp="2024-01-01T12:00:00Z")

        reading = await make_fetcher(source).fetch()

        assert reading.source is ReadingSource.PRIMARY
        assert reading.score == 55.3
        assert reading.timestamp == "2024-01-01T12:00:00Z"
        source.fetch.assert_awaited_once_with(PRIMARY)

    @pytest.mark.asyncio
    async def test_primary_failure_falls_back_to_backup(self, caplog):
        source = AsyncMock(spec=SentimentSource)
        source.fetch.side_effect = [
            FetchError("HTTP 418 @ primary", url=PRIMARY),
            SourceReading(score=20, timestamp="2024-01-01T13:00:00Z"),
        ]

        with caplog.at_level(logging.WARNING):
            reading = await make_fetcher(source).fetch()

        assert reading.source is ReadingSource.BACKUP
        assert reading.score == 20
        assert source.fetch.await_args_list == [call(PRIMARY), call(BACKUP)]
        assert "HTTP 418 @ primary" in caplog.text

    @pytest.mark.asyncio
    async def test_backup_failure_propagates_unchanged(self):
        backup_error = FetchError("Timed out after 12s @ backup", url=BACKUP)
        source = AsyncMock(spec=SentimentSource)
        source.fetch.side_effect = [FetchError("primary down", url=PRIMARY), backup_error]

        with pytest.raises(FetchError) as exc_info:
            await make_fetcher(source).fetch()

        assert exc_info.value is backup_error
        assert source.fetch.await_count == 2

    @pytest.mark.asyncio
    async def test_any_primary_error_falls_back(self):
        source = AsyncMock(spec=SentimentSource)
        source.fetch.side_effect = [
            OverflowError("int too large to convert to float"),
            SourceReading(score=42, timestamp="2024-01-01T13:00:00Z"),
        ]

        reading = await make_fetcher(source).fetch()

        assert reading.source is ReadingSource.BACKUP
        assert source.fetch.await_args_list == [call(PRIMARY), call(BACKUP)]
