"""SQLAlchemy adapter implementing ReadingRepository."""

import logging

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fng.domain.reading.model.value import ReadingSource, SentimentReading, StoredReading
from fng.domain.reading.port.repository import ReadingRepository
from fng.domain.shared.error import PersistenceError
from fng.infrastructure.persistence.tables import readings_table

logger = logging.getLogger(__name__)

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SQLAlchemyReadingRepository(ReadingRepository):
    """Keeps the latest reading in a single row of ``fng_readings``.

    Every save runs in its own committed transaction, so the write is durable
    before the pipeline moves on to broadcasting.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        record_id: str = "latest",
    ) -> None:
        self._session_factory = session_factory
        self._record_id = record_id

    async def save(self, reading: SentimentReading) -> None:
        values = {
            "score": reading.score,
            "timestamp": reading.timestamp,
            "source": reading.source.value,
            "updated_at": func.now(),
        }
        try:
            async with self._session_factory.begin() as session:
                insert = _INSERTS.get(session.get_bind().dialect.name)
                if insert is None:
                    raise PersistenceError(
                        f"Unsupported database dialect: {session.get_bind().dialect.name}"
                    )
                stmt = insert(readings_table).values(id=self._record_id, **values)
                stmt = stmt.on_conflict_do_update(
                    index_elements=[readings_table.c.id],
                    set_=values,
                )
                await session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to write reading: {e}") from e

        logger.debug("Saved reading %s: %s", self._record_id, reading)

    async def get_latest(self) -> StoredReading | None:
        stmt = select(
            readings_table.c.score,
            readings_table.c.timestamp,
            readings_table.c.source,
            readings_table.c.updated_at,
        ).where(readings_table.c.id == self._record_id)

        try:
            async with self._session_factory() as session:
                row = (await session.execute(stmt)).first()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read reading: {e}") from e

        if row is None:
            return None

        return StoredReading(
            score=row.score,
            timestamp=row.timestamp,
            source=ReadingSource(row.source),
            updated_at=row.updated_at,
        )
