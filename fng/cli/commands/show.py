"""Show the stored reading."""

import asyncio
import sys

from fng.application.di import create_container
from fng.cli.console import get_console
from fng.config import Config
from fng.domain.reading.model.value import StoredReading
from fng.domain.reading.port.repository import ReadingRepository
from fng.domain.shared.error import FNGError


async def _latest(config: Config) -> StoredReading | None:
    container = create_container(config)
    try:
        repo = await container.get(ReadingRepository)
        return await repo.get_latest()
    finally:
        await container.close()


def show() -> None:
    """Print the most recently stored reading."""
    console = get_console()
    config = Config()  # type: ignore[call-arg]

    try:
        reading = asyncio.run(_latest(config))
    except FNGError as e:
        console.error(f"Could not read store: {e.message}")
        sys.exit(1)

    if reading is None:
        console.error("No reading stored yet", hint="Run 'fng refresh' first")
        sys.exit(1)

    console.reading(reading, title=f"{config.store.collection}/{config.store.record_id}")
