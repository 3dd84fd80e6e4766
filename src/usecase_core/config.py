from functools import lru_cache
from typing import Literal

from pydantic_settings import SettingsConfigDict, BaseSettings

from usecase_core.shared.constants import ENV_PREFIX


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX, env_file=".env", extra="allow"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_logs: bool = False


@lru_cache
def get_app_config() -> AppConfig:
    """Return the application config, loaded on first use (cached)."""
    return AppConfig()
