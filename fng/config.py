import logging
import os
import sys
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


# =============================================================================
# Source Configuration
# =============================================================================

CNN_URL = "https://production.dataviz.cnn.io/index/fearandgreed/graphdata"
BACKUP_URL = "https://thinker89.github.io/docs_hub/project_market_mood/api/cnn_api.json"


class SourceConfig(BaseModel):
    """Upstream endpoints (nested in Config, uses env_nested_delimiter)."""

    primary_url: str = CNN_URL
    backup_url: str = BACKUP_URL  # Static mirror with the same response shape
    timeout: float = 12.0  # Seconds, whole request including body


class ScheduleConfig(BaseModel):
    """Hourly refresh schedule."""

    enabled: bool = True
    cron: str = "55 * * * *"
    timezone: str = "Asia/Seoul"


# =============================================================================
# Storage / Push Configuration
# =============================================================================


class StoreConfig(BaseModel):
    """Where the latest reading is kept.

    The url field uses empty string as sentinel to mean "SQLite under ~/.fng".
    """

    backend: Literal["sql", "firestore"] = "sql"
    url: str = ""  # Empty string = ~/.fng/fng.db; explicit value = use as-is
    echo: bool = False
    auto_create: bool = True  # Create the readings table on first use
    collection: str = "fng"  # Firestore collection
    record_id: str = "latest"  # Key of the single overwritten record

    @property
    def database_url(self) -> str:
        return self.url or "sqlite+aiosqlite:///~/.fng/fng.db"


class PushConfig(BaseModel):
    """Topic broadcast configuration."""

    backend: Literal["fcm", "log"] = "log"
    topic: str = "fng-all"


class FirebaseConfig(BaseModel):
    """Firebase credentials, only needed by the firestore / fcm backends."""

    credentials_file: str | None = None  # Falls back to application default credentials
    project_id: str | None = None


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings from the YAML file named by FNG_CONFIG_FILE (missing file = no settings)."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._read().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._read()

    def _read(self) -> dict[str, Any]:
        path = os.environ.get("FNG_CONFIG_FILE")
        if not path or not Path(path).is_file():
            return {}
        return yaml.safe_load(Path(path).read_text()) or {}


class Server(BaseModel):
    """Server configuration (nested in Config, uses env_nested_delimiter)."""

    name: str = "Fear & Greed Broadcaster"
    version: str = "0.1.0"
    description: str = "Fetches the CNN Fear & Greed index and fans it out to subscribers"
    region: str = "asia-northeast3"  # Seoul


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from FNG_LOG_FILE env var."""
        return os.environ.get("FNG_LOG_FILE")


class Config(BaseSettings):
    server: Server = Server()
    source: SourceConfig = SourceConfig()
    schedule: ScheduleConfig = ScheduleConfig()
    store: StoreConfig = StoreConfig()
    push: PushConfig = PushConfig()
    firebase: FirebaseConfig = FirebaseConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": "FNG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows FNG_SOURCE__TIMEOUT override
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - FNG_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Install a single root handler (stderr, or FNG_LOG_FILE when set).

    Called once at startup by the API factory and the CLI commands; calling it
    again replaces the previous handler.
    """
    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(config.level)

    # Chatty libraries only report problems
    for name in ("httpx", "httpcore", "asyncio", "aiosqlite", "apscheduler", "google", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug("Logging configured (level=%s)", config.level)
