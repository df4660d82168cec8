"""FastAPI dependency injection configuration."""

from fastapi import Request

from cdn_upload.interfaces import StorageClient


def get_storage(request: Request) -> StorageClient:
    """Returns the storage client constructed at application startup."""
    return request.app.state.storage
