"""Tests for layered configuration loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from cdn_client.config import load_client_config
from cdn_common import ConfigurationError
from cdn_upload.config import StorageConfig, load_config
from cdn_upload.main import create_app


def _write_settings(path: Path, data: dict) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


class TestServiceConfig:
    def test_missing_storage_path_is_fatal(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config()

        assert exc_info.value.setting == "StorageConfiguration.Path"

    def test_create_app_fails_fast_without_configuration(self):
        with pytest.raises(ConfigurationError):
            create_app()

    def test_storage_path_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STORAGE_PATH", str(tmp_path / "cdn"))

        config = load_config()

        assert config.storage.path == (tmp_path / "cdn").resolve()
        assert config.environment == "Production"
        assert not config.is_development

    def test_storage_path_from_settings_file(self, isolated_environment, tmp_path):
        _write_settings(
            isolated_environment / "appsettings.json",
            {"StorageConfiguration": {"Path": str(tmp_path / "from-file")}},
        )

        config = load_config()

        assert config.storage.path == (tmp_path / "from-file").resolve()

    def test_environment_file_overrides_base_file(
        self, monkeypatch, isolated_environment, tmp_path
    ):
        _write_settings(
            isolated_environment / "appsettings.json",
            {"StorageConfiguration": {"Path": str(tmp_path / "base")}},
        )
        _write_settings(
            isolated_environment / "appsettings.Development.json",
            {"StorageConfiguration": {"Path": str(tmp_path / "dev")}},
        )
        monkeypatch.setenv("CDN_ENVIRONMENT", "Development")

        config = load_config()

        assert config.storage.path == (tmp_path / "dev").resolve()
        assert config.is_development

    def test_environment_variable_overrides_files(
        self, monkeypatch, isolated_environment, tmp_path
    ):
        _write_settings(
            isolated_environment / "appsettings.json",
            {"StorageConfiguration": {"Path": str(tmp_path / "file")}},
        )
        monkeypatch.setenv("STORAGE_PATH", str(tmp_path / "env"))

        assert load_config().storage.path == (tmp_path / "env").resolve()

    def test_custom_settings_file(self, monkeypatch, tmp_path):
        settings = tmp_path / "custom.json"
        _write_settings(settings, {"StorageConfiguration": {"Path": str(tmp_path)}})
        monkeypatch.setenv("CDN_SETTINGS_FILE", str(settings))

        assert load_config().storage.path == tmp_path.resolve()

    def test_invalid_settings_file_is_fatal(self, isolated_environment):
        (isolated_environment / "appsettings.json").write_text("{not json")

        with pytest.raises(ConfigurationError):
            load_config()

    def test_config_is_immutable(self, tmp_path):
        config = StorageConfig(path=tmp_path)

        with pytest.raises(ValidationError):
            config.path = tmp_path / "other"


class TestClientConfig:
    def test_missing_service_address_is_fatal(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_client_config()

        assert exc_info.value.setting == "CdnClient.ServiceAddress"

    def test_service_address_from_environment(self, monkeypatch):
        monkeypatch.setenv("CDN_SERVICE_ADDRESS", "http://cdn.local:8080/")

        assert load_client_config().service_address == "http://cdn.local:8080/"

    def test_service_address_from_settings_file(self, isolated_environment):
        _write_settings(
            isolated_environment / "appsettings.json",
            {"CdnClient": {"ServiceAddress": "http://cdn.internal/"}},
        )

        assert load_client_config().service_address == "http://cdn.internal/"


class TestSharedSettingsFile:
    def test_one_file_configures_service_and_client(
        self, isolated_environment, tmp_path
    ):
        _write_settings(
            isolated_environment / "appsettings.json",
            {
                "StorageConfiguration": {"Path": str(tmp_path / "shared")},
                "CdnClient": {"ServiceAddress": "http://cdn.shared/"},
                "Logging": {"Level": "DEBUG"},
            },
        )

        assert load_config().storage.path == (tmp_path / "shared").resolve()
        assert load_client_config().service_address == "http://cdn.shared/"

    def test_constructor_argument_beats_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STORAGE_PATH", str(tmp_path / "env"))

        config = StorageConfig(path=tmp_path / "explicit")

        assert config.path == (tmp_path / "explicit").resolve()

    def test_blank_storage_path_is_fatal(self, monkeypatch):
        monkeypatch.setenv("STORAGE_PATH", "   ")

        with pytest.raises(ConfigurationError):
            load_config()
