"""
Unit tests for settings loading.

Tests cover:
- Defaults
- Config file creation and parsing
- URL validation
- Derived bind address and auth URLs
"""

import json

import pytest

from gateway.config.settings import Settings, default_config, load_settings
from gateway.utils.exceptions import ConfigError


class TestDefaults:
    """Default values."""

    def test_default_endpoints(self):
        """Defaults match the documented local ports."""
        settings = Settings()
        assert settings.address == "http://localhost:8082/"
        assert settings.auth_endpoint == "http://localhost:8081/"
        assert settings.processing_delay_seconds == 1.0

    def test_default_config_covers_all_fields(self):
        """The default document lists every setting."""
        assert set(default_config()) == set(Settings.model_fields)


class TestLoadSettings:
    """Loading from a JSON config file."""

    def test_missing_file_is_created(self, tmp_path):
        """A missing config file is written with defaults."""
        path = tmp_path / "config.json"

        settings = load_settings(path)

        assert path.exists()
        assert json.loads(path.read_text()) == default_config()
        assert settings.auth_endpoint == "http://localhost:8081/"

    def test_values_from_file(self, tmp_path):
        """Values in the file override defaults."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "address": "http://0.0.0.0:9000/",
            "auth_endpoint": "http://auth.internal:8081/",
        }))

        settings = load_settings(path)

        assert settings.bind_host == "0.0.0.0"
        assert settings.bind_port == 9000
        assert settings.auth_endpoint == "http://auth.internal:8081/"
        # Absent keys keep their defaults
        assert settings.processing_delay_seconds == 1.0

    def test_unknown_keys_ignored(self, tmp_path):
        """Unknown keys do not break loading."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"legacy_option": True}))

        assert load_settings(path).address == "http://localhost:8082/"

    def test_invalid_json(self, tmp_path):
        """Unparsable file raises ConfigError."""
        path = tmp_path / "config.json"
        path.write_text("{address: ")

        with pytest.raises(ConfigError):
            load_settings(path)

    def test_not_an_object(self, tmp_path):
        """Top-level value must be an object."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigError):
            load_settings(path)

    @pytest.mark.parametrize(
        "values",
        [
            {"auth_endpoint": "ftp://auth:21/"},
            {"auth_endpoint": "not a url"},
            {"address": "localhost:8082"},
            {"processing_delay_seconds": -1},
            {"auth_timeout_seconds": 0},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values(self, tmp_path, values):
        """Invalid values raise ConfigError."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps(values))

        with pytest.raises(ConfigError):
            load_settings(path)


class TestDerivedValues:
    """Properties computed from settings."""

    def test_log_level_normalized(self):
        """Log level names are upper-cased."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_auth_url_joins_path(self):
        """Fixed paths are appended to the endpoint."""
        settings = Settings(auth_endpoint="http://auth:8081/")
        assert settings.auth_url("/issue-accesskeys") == "http://auth:8081/issue-accesskeys"

    def test_auth_url_keeps_base_path(self):
        """A base path on the endpoint is kept."""
        settings = Settings(auth_endpoint="https://auth.example/api/")
        assert (
            settings.auth_url("/verify-withdrawal-request")
            == "https://auth.example/api/verify-withdrawal-request"
        )

    def test_default_bind_address(self):
        """Default bind is localhost:8082."""
        settings = Settings()
        assert settings.bind_host == "localhost"
        assert settings.bind_port == 8082
