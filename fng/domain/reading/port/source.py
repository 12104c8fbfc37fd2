"""Port for fetching a reading from an upstream URL."""

from abc import abstractmethod
from typing import Protocol

from fng.domain.reading.model.value import SourceReading
from fng.domain.shared.port import Port


class SentimentSource(Port, Protocol):
    """Fetches and validates one Fear & Greed payload.

    Implementations raise FetchError for every failure mode (timeout,
    transport, HTTP status, undecodable body, missing or invalid fields).
    """

    @abstractmethod
    async def fetch(self, url: str) -> SourceReading: ...
