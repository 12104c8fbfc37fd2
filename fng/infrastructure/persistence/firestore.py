"""Firestore adapter implementing ReadingRepository."""

import logging

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud.firestore import SERVER_TIMESTAMP, AsyncClient

from fng.domain.reading.model.value import ReadingSource, SentimentReading, StoredReading
from fng.domain.reading.port.repository import ReadingRepository
from fng.domain.shared.error import PersistenceError

logger = logging.getLogger(__name__)


class FirestoreReadingRepository(ReadingRepository):
    """Keeps the latest reading in one Firestore document (``fng/latest`` by default).

    Field names follow the document layout mobile clients already read:
    ``score``, ``timestamp``, ``source``, ``updatedAt``.
    """

    def __init__(self, client: AsyncClient, collection: str = "fng", document: str = "latest") -> None:
        self._client = client
        self._collection = collection
        self._document = document

    def _ref(self):
        return self._client.collection(self._collection).document(self._document)

    async def save(self, reading: SentimentReading) -> None:
        try:
            await self._ref().set(
                {
                    "score": reading.score,
                    "timestamp": reading.timestamp,
                    "source": reading.source.value,
                    "updatedAt": SERVER_TIMESTAMP,
                },
                merge=True,
            )
        except (GoogleAPIError, GoogleAuthError) as e:
            raise PersistenceError(f"Firestore write failed: {e}") from e

        logger.debug("Saved reading %s/%s", self._collection, self._document)

    async def get_latest(self) -> StoredReading | None:
        try:
            snapshot = await self._ref().get()
        except (GoogleAPIError, GoogleAuthError) as e:
            raise PersistenceError(f"Firestore read failed: {e}") from e

        if not snapshot.exists:
            return None

        data = snapshot.to_dict() or {}
        return StoredReading(
            score=data["score"],
            timestamp=data["timestamp"],
            source=ReadingSource(data["source"]),
            updated_at=data.get("updatedAt"),
        )
