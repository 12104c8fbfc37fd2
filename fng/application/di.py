from dishka import AsyncContainer, Provider, from_context, make_async_container

from fng.config import Config
from fng.domain.reading.util.di import ReadingProvider
from fng.infrastructure.firebase import FirebaseProvider
from fng.infrastructure.http.di import HttpProvider
from fng.infrastructure.persistence.di import store_provider
from fng.infrastructure.push.di import push_provider
from fng.infrastructure.schedule.di import ScheduleProvider
from fng.util.di.scope import Scope


class ContextProvider(Provider):
    """Values handed to the container rather than built by it."""

    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    providers: list[Provider] = [
        ContextProvider(),
        HttpProvider(),
        ReadingProvider(),
        ScheduleProvider(),
        store_provider(config),
        push_provider(config),
    ]
    if config.store.backend == "firestore" or config.push.backend == "fcm":
        providers.append(FirebaseProvider())

    return make_async_container(
        *providers,
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
