"""Custom exceptions for the upload client."""


class CdnUploadError(Exception):
    """Raised when the upload service does not accept a file."""

    def __init__(
        self,
        path: str,
        file_name: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.path = path
        self.file_name = file_name
        self.status_code = status_code
        self.cause = cause
        message = f"Failed to upload '{file_name}' to '{path}'"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        super().__init__(message)
