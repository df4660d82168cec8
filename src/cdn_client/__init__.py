"""Client library for the CDN upload service."""

from cdn_client.client import HttpCdnClient
from cdn_client.config import CdnClientConfig, load_client_config
from cdn_client.exceptions import CdnUploadError
from cdn_client.interfaces import CdnClient
from cdn_client.models import FileUpload, RandomNameFileUpload

__all__ = [
    "CdnClient",
    "HttpCdnClient",
    "CdnClientConfig",
    "load_client_config",
    "CdnUploadError",
    "FileUpload",
    "RandomNameFileUpload",
]
