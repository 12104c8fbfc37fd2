"""DI providers for the broadcaster, one per push backend."""

import firebase_admin
from dishka import Provider, provide

from fng.config import Config
from fng.domain.reading.port.broadcaster import ReadingBroadcaster
from fng.infrastructure.push.fcm import FcmBroadcaster
from fng.infrastructure.push.log import LoggingBroadcaster
from fng.util.di.scope import Scope


class FcmPushProvider(Provider):
    @provide(scope=Scope.APP)
    def get_broadcaster(self, app: firebase_admin.App, config: Config) -> ReadingBroadcaster:
        return FcmBroadcaster(app, topic=config.push.topic)


class LogPushProvider(Provider):
    @provide(scope=Scope.APP)
    def get_broadcaster(self, config: Config) -> ReadingBroadcaster:
        return LoggingBroadcaster(topic=config.push.topic)


def push_provider(config: Config) -> Provider:
    """Select the push provider for the configured backend."""
    if config.push.backend == "fcm":
        return FcmPushProvider()
    return LogPushProvider()
