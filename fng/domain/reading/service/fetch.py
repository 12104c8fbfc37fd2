"""FallbackFetcher - primary source first, static mirror second."""

import logging
from dataclasses import dataclass

from fng.domain.reading.model.value import ReadingSource, SentimentReading
from fng.domain.reading.port.source import SentimentSource

logger = logging.getLogger(__name__)


@dataclass
class FallbackFetcher:
    """Fetches the current reading with a two-tier fallback.

    The primary URL is tried once. Any failure is logged as a warning and the
    backup URL is tried once. A backup failure propagates unchanged.
    """

    source: SentimentSource
    primary_url: str
    backup_url: str

    async def fetch(self) -> SentimentReading:
        try:
            fetched = await self.source.fetch(self.primary_url)
            return SentimentReading(
                score=fetched.score,
                timestamp=fetched.timestamp,
                source=ReadingSource.PRIMARY,
            )
        except Exception as e:
            logger.warning("Primary fetch failed, falling back to backup: %s", e)

        fetched = await self.source.fetch(self.backup_url)
        return SentimentReading(
            score=fetched.score,
            timestamp=fetched.timestamp,
            source=ReadingSource.BACKUP,
        )
