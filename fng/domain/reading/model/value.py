"""Value objects for Fear & Greed readings."""

import math
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class ReadingSource(StrEnum):
    """Which upstream satisfied a fetch."""

    PRIMARY = "cnn"
    BACKUP = "github"


class SourceReading(BaseModel):
    """Score and origin timestamp as extracted from an upstream payload."""

    model_config = ConfigDict(frozen=True)

    score: int | float
    timestamp: str  # Opaque origin token, never reparsed

    @field_validator("score", mode="before")
    @classmethod
    def _score_is_number(cls, value: object) -> int | float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("score must be a number")
        try:
            finite = math.isfinite(value)
        except OverflowError:
            # Integers too large for a float
            raise ValueError("score is out of range") from None
        if not finite:
            raise ValueError("score must be finite")
        return value

    @field_validator("timestamp")
    @classmethod
    def _timestamp_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("timestamp must not be empty")
        return value


class SentimentReading(SourceReading):
    """A validated reading tagged with the source that produced it."""

    source: ReadingSource

    @property
    def score_text(self) -> str:
        """Score as pushed to clients: ``55`` for integral values, ``55.3`` otherwise."""
        if float(self.score).is_integer():
            return str(int(self.score))
        return repr(float(self.score))

    def as_push_data(self) -> dict[str, str]:
        """Data-only push payload (all values must be strings)."""
        return {
            "score": self.score_text,
            "timestamp": self.timestamp,
            "source": self.source.value,
        }


class StoredReading(SentimentReading):
    """The persisted slot: a reading plus the store-assigned write time."""

    updated_at: datetime | None = None
