from fng.domain.reading.util.di.provider import ReadingProvider

__all__ = ["ReadingProvider"]
