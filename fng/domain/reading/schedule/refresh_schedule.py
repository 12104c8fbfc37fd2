"""RefreshSchedule - hourly pipeline run."""

import logging
from dataclasses import dataclass
from typing import Any

from fng.domain.reading.service.refresh import ReadingContext, refresh_reading
from fng.domain.shared.schedule import Schedule

logger = logging.getLogger(__name__)


@dataclass
class RefreshSchedule(Schedule):
    """Scheduled task that runs the refresh pipeline once per fire.

    Errors propagate to the schedule runner, which logs them and waits for
    the next fire.
    """

    context: ReadingContext

    async def run(self, **params: Any) -> None:
        logger.info("Scheduled refresh started")
        await refresh_reading(self.context)
