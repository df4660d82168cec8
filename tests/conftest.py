"""Shared pytest fixtures for the upload service and client tests."""

import logging
import os

os.environ.setdefault("DD_TRACE_ENABLED", "false")

from pathlib import Path

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cdn_client import CdnClientConfig, HttpCdnClient
from cdn_upload.config import AppConfig, StorageConfig
from cdn_upload.main import create_app

SERVICE_ADDRESS = "http://testserver/"

CONFIG_ENV_VARS = [
    "STORAGE_PATH",
    "CDN_SERVICE_ADDRESS",
    "CDN_ENVIRONMENT",
    "CDN_SETTINGS_FILE",
]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path: Path):
    """Runs every test without inherited settings files or variables."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undoes handler changes made by setup_logging during a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    root = tmp_path / "storage"
    root.mkdir()
    return root


@pytest.fixture
def app_config(storage_root: Path) -> AppConfig:
    return AppConfig(storage=StorageConfig(path=storage_root))


@pytest.fixture
def app(app_config: AppConfig) -> FastAPI:
    return create_app(app_config)


@pytest.fixture
def client(app: FastAPI):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def http_client(app: FastAPI):
    """An httpx client that sends requests straight to the application."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport) as client:
        yield client


@pytest.fixture
def cdn_client(http_client: httpx.AsyncClient) -> HttpCdnClient:
    return HttpCdnClient(CdnClientConfig(service_address=SERVICE_ADDRESS), http_client)
