"""
Upload Service.

FastAPI application entry point, served with
``uvicorn cdn_upload.main:create_app --factory``.
"""

from ddtrace import patch_all
from fastapi import FastAPI

from cdn_upload.config import AppConfig, load_config
from cdn_upload.infrastructure import LocalFileStorage
from cdn_upload.middleware import RequestLoggingMiddleware
from cdn_upload.routes import upload_router

patch_all()


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Builds the application around an immutable configuration."""
    config = config or load_config()

    docs_enabled = config.is_development
    app = FastAPI(
        title="CDN Upload Service",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.config = config
    app.state.storage = LocalFileStorage(config.storage.path)

    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(upload_router)
    return app
