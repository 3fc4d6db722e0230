"""
Tests for the Config loader and ClientConfig

These tests verify:
1. Config can be instantiated with test data (dependency injection)
2. Config.get() works with dot notation
3. YAML files are loaded from disk and the environment override
4. ClientConfig is built from config and stays immutable
"""

from typing import Any

import pytest

from firetruck.config import DEFAULT_HEADERS, ClientConfig, ConfigurationError
from firetruck.config.loader import CONFIG_DIR_ENV, Config


class TestConfigDependencyInjection:
    """Test that Config supports dependency injection for testing"""

    def test_config_with_test_dict(self):
        """Should accept config dictionary for testing"""
        config = Config({"api": {"timeout": 30, "version": "v2"}})

        assert config.get("api.timeout") == 30
        assert config.get("api.version") == "v2"

    def test_config_get_with_dot_notation(self):
        """Should navigate nested config with dot notation"""
        config = Config({"level1": {"level2": {"level3": {"value": "deep_value"}}}})

        assert config.get("level1.level2.level3.value") == "deep_value"

    def test_config_get_returns_default_when_not_found(self):
        """Should return default value for missing keys"""
        config = Config({"existing": {"key": "value"}})

        assert config.get("non.existent.key", "default") == "default"
        assert config.get("existing.missing", 42) == 42
        assert config.get("missing") is None

    def test_config_get_handles_non_dict_values(self):
        """Should return default if path goes through non-dict value"""
        config = Config({"string_value": "just a string", "number": 42})

        assert config.get("string_value.key", "default") == "default"
        assert config.get("number.nested", "default") == "default"

    def test_get_required(self):
        config = Config({"api": {"version": "v1", "verify": False}})

        assert config.get_required("api.version") == "v1"
        assert config.get_required("api.verify") is False

    def test_get_required_raises_for_missing_key(self):
        config = Config({"api": {}})

        with pytest.raises(ConfigurationError) as exc_info:
            config.get_required("api.base_url")

        assert exc_info.value.config_key == "api.base_url"
        assert "api.base_url" in str(exc_info.value)

    def test_config_property_returns_empty_dict_when_missing(self):
        """Should return empty dict for missing config sections"""
        test_config: dict[str, Any] = {}

        assert Config(test_config).api == {}


class TestConfigFiles:
    def test_shipped_defaults(self):
        config = Config()

        assert config.get("api.base_url") == "https://api.firetruck.io"
        assert config.get("api.version") == "v1"
        assert config.get("api.timeout") == 10
        assert config.get("api.verify") is True
        assert config.get("api.headers") == DEFAULT_HEADERS

    def test_loads_from_directory(self, tmp_path):
        (tmp_path / "api_config.yaml").write_text(
            'base_url: "https://sandbox.firetruck.io"\nversion: "v9"\n', encoding="utf-8"
        )

        config = Config(config_dir=tmp_path)

        assert config.get("api.base_url") == "https://sandbox.firetruck.io"
        assert config.get("api.version") == "v9"

    def test_environment_override(self, tmp_path, monkeypatch):
        (tmp_path / "api_config.yaml").write_text("version: v3\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))

        assert Config().get("api.version") == "v3"

    def test_missing_directory(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / "nope"))

        with pytest.raises(ConfigurationError):
            Config()

    def test_missing_file_gives_empty_section(self, tmp_path):
        assert Config(config_dir=tmp_path).api == {}

    def test_non_dict_file_gives_empty_section(self, tmp_path):
        (tmp_path / "api_config.yaml").write_text("- just\n- a list\n", encoding="utf-8")

        assert Config(config_dir=tmp_path).api == {}

    def test_reload(self, tmp_path):
        config_file = tmp_path / "api_config.yaml"
        config_file.write_text("version: v1\n", encoding="utf-8")
        config = Config(config_dir=tmp_path)

        config_file.write_text("version: v2\n", encoding="utf-8")
        config.reload()

        assert config.get("api.version") == "v2"


class TestClientConfig:
    def test_from_config(self, test_config):
        client_config = ClientConfig.from_config("key", test_config)

        assert client_config.api_key == "key"
        assert client_config.api_url == "https://api.firetruck.io/v1"
        assert client_config.timeout == 10
        assert client_config.verify is True
        assert dict(client_config.headers) == DEFAULT_HEADERS

    def test_from_empty_config_uses_defaults(self):
        client_config = ClientConfig.from_config("key", Config({}))

        assert client_config == ClientConfig(api_key="key")

    @pytest.mark.parametrize(
        "api_section,key",
        [
            ({"headers": ["Accept"]}, "api.headers"),
            ({"timeout": "ten"}, "api.timeout"),
            ({"timeout": True}, "api.timeout"),
            ({"verify": "yes"}, "api.verify"),
        ],
    )
    def test_from_config_validates_types(self, api_section, key):
        with pytest.raises(ConfigurationError) as exc_info:
            ClientConfig.from_config("key", Config({"api": api_section}))

        assert exc_info.value.config_key == key

    def test_is_frozen(self):
        client_config = ClientConfig(api_key="key")

        with pytest.raises(AttributeError):
            client_config.api_key = "other"

    def test_headers_are_read_only(self):
        client_config = ClientConfig(api_key="key")

        with pytest.raises(TypeError):
            client_config.headers["Accept"] = "text/plain"

    def test_headers_are_copied(self):
        headers = {"Accept": "application/json"}
        client_config = ClientConfig(api_key="key", headers=headers)

        headers["Accept"] = "text/plain"

        assert client_config.headers["Accept"] == "application/json"

    def test_with_headers_merges(self):
        client_config = ClientConfig(api_key="key").with_headers({"X-Extra": "1"})

        assert client_config.headers["X-Extra"] == "1"
        assert client_config.headers["Accept"] == "application/vnd.api+json"

    def test_with_changes(self):
        original = ClientConfig(api_key="key")

        changed = original.with_changes(api_version="v2", verify=False)

        assert changed.api_url == "https://api.firetruck.io/v2"
        assert changed.verify is False
        assert original.api_version == "v1"
