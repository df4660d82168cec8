"""Client configuration loaded from settings files and environment variables."""

from typing import ClassVar

from cdn_common import ConfigurationError, LayeredSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict


class CdnClientConfig(LayeredSettings):
    """Immutable upload client configuration.

    ``CDN_SERVICE_ADDRESS`` or ``CdnClient.ServiceAddress`` in the settings files.
    """

    model_config = SettingsConfigDict(env_prefix="CDN_")

    settings_section: ClassVar[str] = "CdnClient"

    service_address: str = Field(min_length=1)


def load_client_config() -> CdnClientConfig:
    """
    Loads the client configuration.

    Raises:
        ConfigurationError: If no service address is configured or a settings
            file cannot be parsed.
    """
    try:
        return CdnClientConfig()
    except ValueError as e:
        raise ConfigurationError(
            f"{CdnClientConfig.settings_section}.ServiceAddress", e
        ) from e
