"""Container wiring tests."""

import pytest
from dishka.exceptions import NoFactoryError
from starlette.requests import Request

from fng.application.di import create_container
from fng.config import Config, ScheduleConfig
from fng.domain.reading.port.broadcaster import ReadingBroadcaster
from fng.domain.reading.port.repository import ReadingRepository
from fng.domain.reading.service.refresh import ReadingContext
from fng.infrastructure.persistence.repository.reading import SQLAlchemyReadingRepository
from fng.infrastructure.push.log import LoggingBroadcaster
from fng.infrastructure.schedule.runner import ScheduleRunner
from fng.util.di.scope import Scope


class TestCreateContainer:
    @pytest.mark.asyncio
    async def test_resolves_pipeline_with_local_backends(self, test_config: Config):
        container = create_container(test_config)
        try:
            async with container(scope=Scope.UOW) as scope:
                ctx = await scope.get(ReadingContext)

            assert isinstance(ctx.repository, SQLAlchemyReadingRepository)
            assert isinstance(ctx.broadcaster, LoggingBroadcaster)
            assert ctx.fetcher.primary_url == test_config.source.primary_url
            assert ctx.fetcher.backup_url == test_config.source.backup_url
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_store_is_shared_across_runs(self, test_config: Config):
        container = create_container(test_config)
        try:
            assert await container.get(ReadingRepository) is await container.get(ReadingRepository)
            assert isinstance(await container.get(ReadingBroadcaster), LoggingBroadcaster)
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_disabled_schedule_registers_nothing(self, test_config: Config):
        container = create_container(test_config)
        try:
            runner = await container.get(ScheduleRunner)
            assert runner.schedules == []
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_enabled_schedule_uses_configured_cron(self, test_config: Config):
        test_config = test_config.model_copy(update={"schedule": ScheduleConfig()})
        container = create_container(test_config)
        try:
            runner = await container.get(ScheduleRunner)
            [schedule] = runner.schedules
            assert schedule.id == "refresh-reading"
            assert schedule.cron == "55 * * * *"
            assert schedule.timezone == "Asia/Seoul"
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_unit_of_work_needs_no_request(self, test_config: Config):
        container = create_container(test_config)
        try:
            async with container(scope=Scope.UOW) as scope:
                with pytest.raises(NoFactoryError):
                    await scope.get(Request)
                assert isinstance(await scope.get(ReadingContext), ReadingContext)
        finally:
            await container.close()
