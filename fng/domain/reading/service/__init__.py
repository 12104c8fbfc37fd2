from fng.domain.reading.service.fetch import FallbackFetcher
from fng.domain.reading.service.refresh import ReadingContext, refresh_reading

__all__ = ["FallbackFetcher", "ReadingContext", "refresh_reading"]
