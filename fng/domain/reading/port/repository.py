"""Port for the single latest-reading slot."""

from abc import abstractmethod
from typing import Protocol

from fng.domain.reading.model.value import SentimentReading, StoredReading
from fng.domain.shared.port import Port


class ReadingRepository(Port, Protocol):
    """Stores exactly one record, overwritten on every save."""

    @abstractmethod
    async def save(self, reading: SentimentReading) -> None:
        """Merge-upsert the slot and stamp it with the store's current time.

        Raises:
            PersistenceError: If the store is unreachable or rejects the write.
        """
        ...

    @abstractmethod
    async def get_latest(self) -> StoredReading | None: ...
