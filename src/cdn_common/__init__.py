from cdn_common.config import LayeredSettings
from cdn_common.exceptions import ConfigurationError
from cdn_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "ConfigurationError",
    "LayeredSettings",
]
