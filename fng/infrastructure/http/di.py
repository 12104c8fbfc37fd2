"""DI provider for HTTP infrastructure."""

from typing import AsyncIterable, NewType

import httpx
from dishka import Provider, provide

from fng.config import Config
from fng.domain.reading.port.source import SentimentSource
from fng.infrastructure.http.source_client import HttpSentimentSource
from fng.util.di.scope import Scope

SourceHttpClient = NewType("SourceHttpClient", httpx.AsyncClient)


class HttpProvider(Provider):
    """DI provider for the upstream source client."""

    @provide(scope=Scope.APP)
    async def get_source_http_client(self, config: Config) -> AsyncIterable[SourceHttpClient]:
        """Shared client for upstream fetches, closed with the container."""
        client = httpx.AsyncClient(
            timeout=httpx.Timeout(config.source.timeout),
            follow_redirects=True,
        )
        yield SourceHttpClient(client)
        await client.aclose()

    @provide(scope=Scope.APP, provides=SentimentSource)
    def get_sentiment_source(self, client: SourceHttpClient, config: Config) -> HttpSentimentSource:
        return HttpSentimentSource(client=client, timeout=config.source.timeout)
