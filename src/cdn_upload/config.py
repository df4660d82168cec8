"""Application configuration loaded from settings files and environment variables."""

from pathlib import Path
from typing import ClassVar

from cdn_common import ConfigurationError, LayeredSettings
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(LayeredSettings):
    """Immutable storage configuration.

    ``STORAGE_PATH`` or ``StorageConfiguration.Path`` in the settings files.
    """

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    settings_section: ClassVar[str] = "StorageConfiguration"

    path: Path

    @field_validator("path", mode="before")
    @classmethod
    def _absolute_path(cls, value):
        if value is None or not str(value).strip():
            raise ValueError("storage path must not be empty")
        return Path(value).resolve()


class AppConfig(BaseSettings):
    """Root application configuration."""

    model_config = SettingsConfigDict(env_prefix="CDN_", frozen=True, extra="ignore")

    storage: StorageConfig
    environment: str = "Production"

    @property
    def is_development(self) -> bool:
        return self.environment == "Development"


def load_config() -> AppConfig:
    """
    Loads the configuration once at startup.

    Raises:
        ConfigurationError: If no storage path is configured or a settings
            file cannot be parsed.
    """
    try:
        storage = StorageConfig()
    except ValueError as e:
        raise ConfigurationError(f"{StorageConfig.settings_section}.Path", e) from e

    return AppConfig(storage=storage)
