"""Global test fixtures."""

import os
from datetime import UTC, datetime

import pytest

from fng.config import Config, FirebaseConfig, PushConfig, ScheduleConfig, StoreConfig
from fng.domain.reading.model.value import SentimentReading, StoredReading
from fng.domain.shared.error import PublishError

# Keep a developer's fng.yaml out of the tests
os.environ.pop("FNG_CONFIG_FILE", None)


class InMemoryReadingRepository:
    """ReadingRepository fake holding one slot, like the real stores."""

    def __init__(self) -> None:
        self.slot: StoredReading | None = None
        self.saves = 0

    async def save(self, reading: SentimentReading) -> None:
        self.saves += 1
        self.slot = StoredReading(
            score=reading.score,
            timestamp=reading.timestamp,
            source=reading.source,
            updated_at=datetime.now(UTC),
        )

    async def get_latest(self) -> StoredReading | None:
        return self.slot


class RecordingBroadcaster:
    """ReadingBroadcaster fake that keeps every published payload."""

    def __init__(self, fail: bool = False) -> None:
        self.published: list[dict[str, str]] = []
        self._fail = fail

    async def publish(self, reading: SentimentReading) -> None:
        if self._fail:
            raise PublishError("topic unavailable")
        self.published.append(reading.as_push_data())


@pytest.fixture
def repository() -> InMemoryReadingRepository:
    return InMemoryReadingRepository()


@pytest.fixture
def broadcaster() -> RecordingBroadcaster:
    return RecordingBroadcaster()


@pytest.fixture
def failing_broadcaster() -> RecordingBroadcaster:
    return RecordingBroadcaster(fail=True)


@pytest.fixture
def test_config() -> Config:
    """Config with an in-memory store, log-only push and no schedule."""
    return Config(
        store=StoreConfig(backend="sql", url="sqlite+aiosqlite:///:memory:"),
        push=PushConfig(backend="log"),
        schedule=ScheduleConfig(enabled=False),
        firebase=FirebaseConfig(),
    )
