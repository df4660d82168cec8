"""httpx implementation of the CdnClient interface."""

import logging
import uuid
from io import IOBase

import httpx

from cdn_client.config import CdnClientConfig
from cdn_client.exceptions import CdnUploadError
from cdn_client.interfaces import CdnClient
from cdn_client.models import FileUpload, RandomNameFileUpload

logger = logging.getLogger(__name__)

UPLOAD_PATH_PARAM = "uploadPath"


def _require_text(value: str, name: str) -> None:
    if value is None or not value.strip():
        raise ValueError(f"{name} must be a non-blank string")


class HttpCdnClient(CdnClient):
    """Uploads files to the service over HTTP as multipart forms."""

    def __init__(
        self,
        config: CdnClientConfig,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._config = config
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient()

    async def __aenter__(self) -> "HttpCdnClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Closes the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def upload_file(self, upload: FileUpload) -> None:
        _require_text(upload.path, "path")
        _require_text(upload.file_name, "file_name")

        await self._upload(upload.path, upload.file_name, upload.file_content)

    async def upload_file_with_random_name(self, upload: RandomNameFileUpload) -> str:
        _require_text(upload.path, "path")

        file_name = str(uuid.uuid4())
        await self._upload(upload.path, file_name, upload.file_content)
        return file_name

    async def _upload(self, path: str, file_name: str, content: IOBase) -> None:
        content.seek(0)

        try:
            response = await self._http_client.post(
                self._config.service_address,
                params={UPLOAD_PATH_PARAM: path},
                files={file_name: (file_name, content)},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Upload rejected by service",
                extra={
                    "path": path,
                    "file_name": file_name,
                    "status_code": e.response.status_code,
                },
            )
            raise CdnUploadError(path, file_name, e.response.status_code, e) from e
        except httpx.HTTPError as e:
            logger.exception(
                "Upload request failed",
                extra={"path": path, "file_name": file_name},
            )
            raise CdnUploadError(path, file_name, cause=e) from e

        logger.info("File uploaded", extra={"path": path, "file_name": file_name})
