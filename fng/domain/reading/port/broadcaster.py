"""Port for fanning a reading out to subscribed clients."""

from abc import abstractmethod
from typing import Protocol

from fng.domain.reading.model.value import SentimentReading
from fng.domain.shared.port import Port


class ReadingBroadcaster(Port, Protocol):
    """Sends one silent, data-only message to every subscriber of a topic."""

    @abstractmethod
    async def publish(self, reading: SentimentReading) -> None:
        """Raises PublishError on transport failure."""
        ...
