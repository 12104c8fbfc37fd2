"""Run the refresh pipeline once from the command line."""

import asyncio
import sys

from fng.application.di import create_container
from fng.cli.console import get_console
from fng.config import Config, configure_logging
from fng.domain.reading.model.value import SentimentReading
from fng.domain.reading.service.refresh import ReadingContext, refresh_reading
from fng.domain.shared.error import FNGError
from fng.util.di.scope import Scope


async def _refresh(config: Config) -> SentimentReading:
    container = create_container(config)
    try:
        async with container(scope=Scope.UOW) as scope:
            ctx = await scope.get(ReadingContext)
            return await refresh_reading(ctx)
    finally:
        await container.close()


def refresh() -> None:
    """Fetch, store and broadcast the current reading now."""
    console = get_console()
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)

    try:
        reading = asyncio.run(_refresh(config))
    except FNGError as e:
        console.error(f"Refresh failed: {e.message}")
        sys.exit(1)

    console.success(f"Updated & broadcast to topic '{config.push.topic}'")
    console.reading(reading)
