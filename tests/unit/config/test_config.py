"""Unit tests for Config loading."""

import pytest

from fng.config import BACKUP_URL, CNN_URL, Config, StoreConfig


class TestConfigDefaults:
    def test_sources(self):
        config = Config()

        assert config.source.primary_url == CNN_URL
        assert config.source.backup_url == BACKUP_URL
        assert config.source.timeout == 12.0

    def test_schedule_runs_at_55_past_seoul_time(self):
        config = Config()

        assert config.schedule.enabled is True
        assert config.schedule.cron == "55 * * * *"
        assert config.schedule.timezone == "Asia/Seoul"

    def test_push_topic(self):
        assert Config().push.topic == "fng-all"

    def test_empty_store_url_means_local_sqlite(self):
        assert StoreConfig().database_url == "sqlite+aiosqlite:///~/.fng/fng.db"
        assert StoreConfig(url="postgresql+asyncpg://db/fng").database_url == "postgresql+asyncpg://db/fng"


class TestConfigSources:
    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FNG_SOURCE__TIMEOUT", "3.5")
        monkeypatch.setenv("FNG_PUSH__BACKEND", "fcm")

        config = Config()

        assert config.source.timeout == 3.5
        assert config.push.backend == "fcm"

    def test_yaml_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path):
        path = tmp_path / "fng.yaml"
        path.write_text("push:\n  topic: fng-test\nschedule:\n  enabled: false\n")
        monkeypatch.setenv("FNG_CONFIG_FILE", str(path))

        config = Config()

        assert config.push.topic == "fng-test"
        assert config.schedule.enabled is False

    def test_env_beats_yaml(self, monkeypatch: pytest.MonkeyPatch, tmp_path):
        path = tmp_path / "fng.yaml"
        path.write_text("push:\n  topic: from-yaml\n")
        monkeypatch.setenv("FNG_CONFIG_FILE", str(path))
        monkeypatch.setenv("FNG_PUSH__TOPIC", "from-env")

        assert Config().push.topic == "from-env"

    def test_missing_yaml_file_is_ignored(self, monkeypatch: pytest.MonkeyPatch, tmp_path):
        monkeypatch.setenv("FNG_CONFIG_FILE", str(tmp_path / "absent.yaml"))

        assert Config().push.topic == "fng-all"
