"""Abstract interface for the upload client."""

from abc import ABC, abstractmethod

from cdn_client.models import FileUpload, RandomNameFileUpload


class CdnClient(ABC):
    """Abstract base class for clients of the upload service."""

    @abstractmethod
    async def upload_file(self, upload: FileUpload) -> None:
        """
        Uploads a stream under the given path and file name.

        The stream is rewound before it is sent.

        Args:
            upload: Destination path, file name and content.

        Raises:
            ValueError: If the path or file name is blank.
            CdnUploadError: If the request fails or is rejected.
        """

    @abstractmethod
    async def upload_file_with_random_name(self, upload: RandomNameFileUpload) -> str:
        """
        Uploads a stream under a newly generated unique file name.

        Args:
            upload: Destination path and content.

        Returns:
            The generated file name.

        Raises:
            ValueError: If the path is blank.
            CdnUploadError: If the request fails or is rejected.
        """
