"""Application settings using Pydantic for environment-based configuration."""
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from DAFFODIL_* environment variables."""

    # Application Configuration
    app_name: str = Field(default="daffodil", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/production)")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=True, description="Render logs as JSON (False: console)")

    model_config = SettingsConfigDict(
        env_prefix="DAFFODIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level. Must be one of: {VALID_LOG_LEVELS}")
        return v.upper()

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings, optionally overridden by a YAML file.

    Args:
        config_path: Path to a YAML mapping of Settings fields. If None,
            settings come from the environment only.

    Returns:
        Settings object.
    """
    if config_path is None:
        return Settings()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config_dict = yaml.safe_load(f)

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return Settings(**config_dict)
