"""ScheduleRunner - cron-driven scheduled tasks."""

import asyncio
import logging
from contextlib import AsyncExitStack
from dataclasses import dataclass, field
from typing import Any, NewType

from apscheduler import AsyncScheduler
from apscheduler.triggers.cron import CronTrigger
from dishka import AsyncContainer

from fng.domain.shared.schedule import Schedule
from fng.util.di.scope import Scope

logger = logging.getLogger(__name__)

# Consecutive failures before a schedule is reported at CRITICAL level
FAILURE_ALERT_THRESHOLD = 5


@dataclass
class ScheduleConfig:
    """Configuration for a scheduled task."""

    schedule_type: type[Schedule]
    cron: str
    id: str
    timezone: str = "UTC"
    params: dict[str, Any] = field(default_factory=dict)


ScheduleConfigs = NewType("ScheduleConfigs", list[ScheduleConfig])


class ScheduleRunner:
    """Runs Schedule tasks on cron triggers.

    Each fire resolves the Schedule in a fresh UOW scope. Failures are logged
    and swallowed; the task simply runs again on its next fire.

    Usage:
        runner = ScheduleRunner(container, schedules)

        async with runner:
            # Schedules are firing
            await serve_forever()
        # Scheduler is stopped
    """

    def __init__(
        self,
        container: AsyncContainer,
        schedules: ScheduleConfigs | None = None,
    ) -> None:
        self._container = container
        self._schedules = schedules or ScheduleConfigs([])
        self._scheduler: AsyncScheduler | None = None
        self._exit_stack: AsyncExitStack | None = None
        self._schedule_failures: dict[str, int] = {}

    @property
    def schedules(self) -> list[ScheduleConfig]:
        return list(self._schedules)

    def failures(self, schedule_id: str) -> int:
        """Consecutive failures of a schedule since its last success."""
        return self._schedule_failures.get(schedule_id, 0)

    async def start(self) -> None:
        """Register all schedules and start the scheduler in the background."""
        self._exit_stack = AsyncExitStack()
        await self._exit_stack.__aenter__()

        self._scheduler = AsyncScheduler()
        await self._exit_stack.enter_async_context(self._scheduler)

        for config in self._schedules:
            await self._scheduler.add_schedule(
                self._run_schedule,
                CronTrigger.from_crontab(config.cron, timezone=config.timezone),
                id=config.id,
                kwargs={"config": config},
            )
            logger.info(
                "Registered schedule %s (cron=%s, tz=%s)", config.id, config.cron, config.timezone
            )

        await self._scheduler.start_in_background()
        logger.info("ScheduleRunner started with %d schedules", len(self._schedules))

    async def stop(self) -> None:
        """Stop the scheduler."""
        if self._exit_stack:
            await self._exit_stack.__aexit__(None, None, None)
            self._exit_stack = None
            self._scheduler = None

        logger.info("ScheduleRunner stopped")

    async def _run_schedule(self, config: ScheduleConfig) -> None:
        """Cron task: run a scheduled task in UOW scope."""
        try:
            async with self._container(scope=Scope.UOW) as scope:
                schedule = await scope.get(config.schedule_type)
                await schedule.run(**config.params)

            # Reset failure counter on success
            self._schedule_failures.pop(config.id, None)
            logger.debug("Ran schedule %s", config.id)

        except (asyncio.CancelledError, SystemExit, KeyboardInterrupt):
            # Let control exceptions propagate for graceful shutdown
            raise
        except Exception as e:
            failures = self._schedule_failures.get(config.id, 0) + 1
            self._schedule_failures[config.id] = failures
            logger.error("Failed to run schedule %s (failures: %d): %s", config.id, failures, e)
            if failures >= FAILURE_ALERT_THRESHOLD:
                logger.critical(
                    "Schedule %s has failed %d consecutive times", config.id, failures
                )

    async def __aenter__(self) -> "ScheduleRunner":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.stop()
