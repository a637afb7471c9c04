"""Central settings — loads from ~/.taskboard/config.json + environment variables."""

from __future__ import annotations

import json
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from taskboard.config.constants import CONFIG_FILE, TASKBOARD_HOME
from taskboard.config.models import AppearanceConfig, TransitionConfig

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """All taskboard configuration in one place.

    Priority (highest → lowest):
      1. Environment variables (TASKBOARD_ prefix, ``__`` for nesting)
      2. .env file
      3. ~/.taskboard/config.json
      4. Defaults defined here
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKBOARD_",
        env_nested_delimiter="__",
        env_file=(".env", str(TASKBOARD_HOME / ".env")),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Sub-configs ---
    transitions: TransitionConfig = Field(default_factory=TransitionConfig)
    appearance: AppearanceConfig = Field(default_factory=AppearanceConfig)

    # --- Top-level settings ---
    seed_demo: bool = True
    log_level: str = "INFO"

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values: dict) -> dict:
        """Merge config.json values as defaults (env vars still override)."""
        if CONFIG_FILE.exists():
            try:
                file_data = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
                if isinstance(file_data, dict):
                    values = {**file_data, **{k: v for k, v in values.items() if v is not None}}
            except (json.JSONDecodeError, OSError):
                pass
        return values

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level

    def save(self) -> None:
        """Persist current settings to config.json."""
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(mode="json")
        CONFIG_FILE.write_text(json.dumps(data, indent=2), encoding="utf-8")

    @classmethod
    def config_exists(cls) -> bool:
        return CONFIG_FILE.exists()


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
