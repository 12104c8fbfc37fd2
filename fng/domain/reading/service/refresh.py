"""The refresh pipeline: fetch, persist, broadcast."""

import logging
from dataclasses import dataclass

import logfire

from fng.domain.reading.model.value import SentimentReading
from fng.domain.reading.port.broadcaster import ReadingBroadcaster
from fng.domain.reading.port.repository import ReadingRepository
from fng.domain.reading.service.fetch import FallbackFetcher

logger = logging.getLogger(__name__)


@dataclass
class ReadingContext:
    """Collaborators of one pipeline run, built by the DI container per unit of work."""

    fetcher: FallbackFetcher
    repository: ReadingRepository
    broadcaster: ReadingBroadcaster


async def refresh_reading(ctx: ReadingContext) -> SentimentReading:
    """Fetch the current reading, overwrite the stored slot, then broadcast it.

    Shared by the scheduled and the manual trigger. Steps run strictly in
    order; a failure in any step aborts the rest (a publish failure leaves the
    already-written record in place).

    Raises:
        FetchError: Both the primary and the backup source failed.
        PersistenceError: The store rejected the write. Nothing is published.
        PublishError: The push transport failed after the write.
    """
    with logfire.span("RefreshReading"):
        reading = await ctx.fetcher.fetch()
        await ctx.repository.save(reading)
        await ctx.broadcaster.publish(reading)

    logger.info(
        "Updated & broadcast: score=%s timestamp=%s source=%s",
        reading.score_text,
        reading.timestamp,
        reading.source.value,
    )
    return reading
