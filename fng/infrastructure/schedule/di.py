"""Dependency injection provider for scheduled tasks."""

import logging

from dishka import AsyncContainer, Provider, provide

from fng.config import Config
from fng.domain.reading.schedule import RefreshSchedule
from fng.infrastructure.schedule.runner import ScheduleConfig, ScheduleConfigs, ScheduleRunner
from fng.util.di.scope import Scope

logger = logging.getLogger(__name__)


class ScheduleProvider(Provider):
    """ScheduleRunner is an APP-scoped singleton; schedules resolve per UOW."""

    refresh_schedule = provide(RefreshSchedule, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_schedule_configs(self, config: Config) -> ScheduleConfigs:
        if not config.schedule.enabled:
            logger.info("Scheduled refresh disabled")
            return ScheduleConfigs([])
        return ScheduleConfigs(
            [
                ScheduleConfig(
                    schedule_type=RefreshSchedule,
                    cron=config.schedule.cron,
                    timezone=config.schedule.timezone,
                    id="refresh-reading",
                )
            ]
        )

    @provide(scope=Scope.APP)
    def get_schedule_runner(
        self,
        container: AsyncContainer,
        schedules: ScheduleConfigs,
    ) -> ScheduleRunner:
        return ScheduleRunner(container=container, schedules=schedules)
