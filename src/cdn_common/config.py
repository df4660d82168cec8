"""Layered settings shared by the service and client configuration."""

import os
from pathlib import Path
from typing import Any, ClassVar

from pydantic.alias_generators import to_snake
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_SETTINGS_FILE = "appsettings.json"


class JsonSectionSettingsSource(JsonConfigSettingsSource):
    """Reads one top-level section of a JSON settings file.

    Section keys are written in PascalCase (``ServiceAddress``) and mapped to
    snake_case field names.
    """

    def __init__(self, settings_cls: type[BaseSettings], json_file: Path, section: str):
        self._section = section
        super().__init__(settings_cls, json_file=json_file)

    def __call__(self) -> dict[str, Any]:
        values = super().__call__().get(self._section) or {}
        return {to_snake(key): value for key, value in values.items()}


class LayeredSettings(BaseSettings):
    """
    Immutable settings read from files and the environment.

    Sources, highest priority first: constructor arguments, environment
    variables, ``appsettings.<CDN_ENVIRONMENT>.json``, ``appsettings.json``.
    ``CDN_SETTINGS_FILE`` replaces the base file name; both files are optional.
    Subclasses name their JSON section in ``settings_section``.
    """

    model_config = SettingsConfigDict(frozen=True, extra="ignore")

    settings_section: ClassVar[str]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        base_file = Path(os.getenv("CDN_SETTINGS_FILE", DEFAULT_SETTINGS_FILE))
        sources = [init_settings, env_settings]

        environment = os.getenv("CDN_ENVIRONMENT")
        if environment:
            env_file = base_file.with_name(f"{base_file.stem}.{environment}.json")
            sources.append(
                JsonSectionSettingsSource(settings_cls, env_file, cls.settings_section)
            )

        sources.append(
            JsonSectionSettingsSource(settings_cls, base_file, cls.settings_section)
        )
        return tuple(sources)
