"""Abstract interface for file storage operations."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from pathlib import Path


class StorageClient(ABC):
    """Abstract base class for file storage backends."""

    @abstractmethod
    def resolve_target(self, upload_path: str, file_name: str) -> Path:
        """
        Computes where an upload is written.

        Args:
            upload_path: Caller-supplied directory relative to the storage root.
            file_name: Declared name of the uploaded file.

        Returns:
            The absolute target path.

        Raises:
            PathOutsideStorageError: If the target escapes the storage root or
                is not a valid file system path.
        """

    @abstractmethod
    async def exists(self, target: Path) -> bool:
        """
        Returns whether a file is already stored at the target path.

        Raises:
            PathOutsideStorageError: If the target is not a valid path.
        """

    @abstractmethod
    async def save(self, target: Path, chunks: AsyncIterator[bytes]) -> int:
        """
        Writes a new file, never overwriting an existing one.

        Missing parent directories are created first.

        Args:
            target: Path returned by ``resolve_target``.
            chunks: File content, consumed until exhausted.

        Returns:
            The number of bytes written.

        Raises:
            FileAlreadyExistsError: If the target exists at creation time.
            StorageUploadError: If writing fails.
        """
