"""Exceptions shared by the upload service and client."""


class ConfigurationError(Exception):
    """Raised at startup when a required setting is missing."""

    def __init__(self, setting: str, cause: Exception | None = None):
        self.setting = setting
        self.cause = cause
        super().__init__(f"Required setting '{setting}' must be defined")
