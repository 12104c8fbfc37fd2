"""DI providers for the reading store, one per store backend."""

from typing import AsyncIterable

import firebase_admin
from dishka import Provider, provide
from firebase_admin import firestore_async
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from fng.config import Config
from fng.domain.reading.port.repository import ReadingRepository
from fng.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    create_tables,
)
from fng.infrastructure.persistence.firestore import FirestoreReadingRepository
from fng.infrastructure.persistence.repository.reading import SQLAlchemyReadingRepository
from fng.util.di.scope import Scope


class SqlStoreProvider(Provider):
    """Reading store backed by SQLAlchemy (SQLite or PostgreSQL)."""

    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.store)
        if config.store.auto_create:
            await create_tables(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_reading_repository(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        config: Config,
    ) -> ReadingRepository:
        return SQLAlchemyReadingRepository(session_factory, record_id=config.store.record_id)


class FirestoreStoreProvider(Provider):
    """Reading store backed by a Firestore document."""

    @provide(scope=Scope.APP)
    def get_reading_repository(self, app: firebase_admin.App, config: Config) -> ReadingRepository:
        return FirestoreReadingRepository(
            firestore_async.client(app),
            collection=config.store.collection,
            document=config.store.record_id,
        )


def store_provider(config: Config) -> Provider:
    """Select the store provider for the configured backend."""
    if config.store.backend == "firestore":
        return FirestoreStoreProvider()
    return SqlStoreProvider()
