from dishka import Provider, provide

from fng.config import Config
from fng.domain.reading.port.source import SentimentSource
from fng.domain.reading.service.fetch import FallbackFetcher
from fng.domain.reading.service.refresh import ReadingContext
from fng.util.di.scope import Scope


class ReadingProvider(Provider):
    """Wires the fallback fetcher and the per-run pipeline context."""

    @provide(scope=Scope.APP)
    def get_fallback_fetcher(self, source: SentimentSource, config: Config) -> FallbackFetcher:
        return FallbackFetcher(
            source=source,
            primary_url=config.source.primary_url,
            backup_url=config.source.backup_url,
        )

    reading_context = provide(ReadingContext, scope=Scope.UOW)
