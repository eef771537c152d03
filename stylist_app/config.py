"""Configuration helpers for the wardrobe stylist app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_DATABASE_PATH = "data/wardrobe.db"
DEFAULT_SUGGESTION_COUNT = 10
DEFAULT_RECENT_WINDOW_DAYS = 7
DEFAULT_RATED_HISTORY_LIMIT = 50


def _as_int(value: Optional[str], default: int) -> int:
    if value is None or str(value).strip() == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass
class StylistConfig:
    """Configuration values for the stylist app.

    Scoring weights and taxonomy tables are not configurable here; they are
    product constants. This object only carries deployment and history-window
    settings used when loading snapshots for the engine.
    """

    database_path: str = DEFAULT_DATABASE_PATH
    weather_api_key: Optional[str] = None
    default_zip_code: Optional[str] = None
    suggestion_count: int = DEFAULT_SUGGESTION_COUNT
    recent_window_days: int = DEFAULT_RECENT_WINDOW_DAYS
    rated_history_limit: int = DEFAULT_RATED_HISTORY_LIMIT
    log_level: str = "INFO"
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment file.

        Environment specific files live in ``config/environments/<env>.yaml`` by
        default and are merged with environment variables so that secrets can be
        injected by the runtime environment.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        file_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            file_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, file_config.get(key, default))

        return cls(
            database_path=str(get_value("wardrobe_db_path", DEFAULT_DATABASE_PATH) or DEFAULT_DATABASE_PATH),
            weather_api_key=get_value("openweather_api_key"),
            default_zip_code=get_value("default_zip_code"),
            suggestion_count=_as_int(get_value("suggestion_count"), DEFAULT_SUGGESTION_COUNT),
            recent_window_days=_as_int(get_value("recent_window_days"), DEFAULT_RECENT_WINDOW_DAYS),
            rated_history_limit=_as_int(get_value("rated_history_limit"), DEFAULT_RATED_HISTORY_LIMIT),
            log_level=str(get_value("log_level", "INFO") or "INFO"),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
