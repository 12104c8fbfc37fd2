from fng.domain.reading.model.value import (
    ReadingSource,
    SentimentReading,
    SourceReading,
    StoredReading,
)

__all__ = ["ReadingSource", "SentimentReading", "SourceReading", "StoredReading"]
