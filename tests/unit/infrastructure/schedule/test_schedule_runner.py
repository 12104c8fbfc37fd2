"""Unit tests for ScheduleRunner."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from fng.domain.reading.schedule import RefreshSchedule
from fng.domain.shared.error import FetchError
from fng.infrastructure.schedule.runner import (
    FAILURE_ALERT_THRESHOLD,
    ScheduleConfig,
    ScheduleConfigs,
    ScheduleRunner,
)
from fng.util.di.scope import Scope


def make_mock_container(schedule):
    """Create a mock DI container whose UOW scope resolves ``schedule``."""
    scope = AsyncMock()
    scope.get = AsyncMock(return_value=schedule)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=scope)
    context.__aexit__ = AsyncMock(return_value=None)

    container = MagicMock()
    container.return_value = context

    return container, scope


REFRESH = ScheduleConfig(
    schedule_type=RefreshSchedule,
    cron="55 * * * *",
    id="refresh-reading",
    timezone="Asia/Seoul",
)


class TestRunSchedule:
    @pytest.mark.asyncio
    async def test_resolves_schedule_in_uow_scope(self):
        schedule = AsyncMock()
        container, scope = make_mock_container(schedule)
        runner = ScheduleRunner(container, ScheduleConfigs([REFRESH]))

        await runner._run_schedule(REFRESH)

        container.assert_called_once_with(scope=Scope.UOW)
        scope.get.assert_awaited_once_with(RefreshSchedule)
        schedule.run.assert_awaited_once_with()
        assert runner.failures("refresh-reading") == 0

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_swallowed(self, caplog):
        schedule = AsyncMock()
        schedule.run.side_effect = FetchError("HTTP 503 @ https://example.test")
        container, _ = make_mock_container(schedule)
        runner = ScheduleRunner(container, ScheduleConfigs([REFRESH]))

        with caplog.at_level(logging.ERROR):
            await runner._run_schedule(REFRESH)

        assert runner.failures("refresh-reading") == 1
        assert "HTTP 503" in caplog.text

    @pytest.mark.asyncio
    async def test_success_resets_failure_count(self):
        schedule = AsyncMock()
        schedule.run.side_effect = [FetchError("down"), FetchError("down"), None]
        container, _ = make_mock_container(schedule)
        runner = ScheduleRunner(container, ScheduleConfigs([REFRESH]))

        await runner._run_schedule(REFRESH)
        await runner._run_schedule(REFRESH)
        assert runner.failures("refresh-reading") == 2

        await runner._run_schedule(REFRESH)
        assert runner.failures("refresh-reading") == 0

    @pytest.mark.asyncio
    async def test_repeated_failures_escalate_to_critical(self, caplog):
        schedule = AsyncMock()
        schedule.run.side_effect = FetchError("down")
        container, _ = make_mock_container(schedule)
        runner = ScheduleRunner(container, ScheduleConfigs([REFRESH]))

        with caplog.at_level(logging.ERROR):
            for _ in range(FAILURE_ALERT_THRESHOLD):
                await runner._run_schedule(REFRESH)

        critical = [r for r in caplog.records if r.levelno == logging.CRITICAL]
        assert len(critical) == 1
        assert runner.failures("refresh-reading") == FAILURE_ALERT_THRESHOLD


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_start_and_stop(self):
        container, _ = make_mock_container(AsyncMock())
        runner = ScheduleRunner(container, ScheduleConfigs([]))

        async with runner:
            assert runner._scheduler is not None

        assert runner._scheduler is None
