"""Log-only broadcaster for local development."""

import logging

from fng.domain.reading.model.value import SentimentReading
from fng.domain.reading.port.broadcaster import ReadingBroadcaster

logger = logging.getLogger(__name__)


class LoggingBroadcaster(ReadingBroadcaster):
    """Logs the data payload instead of sending it."""

    def __init__(self, topic: str = "fng-all") -> None:
        self._topic = topic

    async def publish(self, reading: SentimentReading) -> None:
        logger.info("Broadcast (log only) to topic %s: %s", self._topic, reading.as_push_data())
