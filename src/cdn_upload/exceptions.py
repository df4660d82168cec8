"""Custom exceptions for the upload service."""

from pathlib import Path


class FileAlreadyExistsError(Exception):
    """Raised when the target path of an upload is already taken."""

    def __init__(self, path: Path, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"File '{path}' already exists")


class PathOutsideStorageError(Exception):
    """Raised when an upload path is invalid or escapes the storage directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"Path '{path}' does not name a file inside the storage directory"
        )


class StorageUploadError(Exception):
    """Raised when writing an uploaded file to storage fails."""

    def __init__(self, path: Path, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write '{path}' to storage")


class UploadCancelledError(Exception):
    """Raised when the client disconnects while its upload is being written."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Upload of '{path}' was cancelled by the client")
