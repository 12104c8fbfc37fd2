from fng.domain.reading.port.broadcaster import ReadingBroadcaster
from fng.domain.reading.port.repository import ReadingRepository
from fng.domain.reading.port.source import SentimentSource

__all__ = ["ReadingBroadcaster", "ReadingRepository", "SentimentSource"]
