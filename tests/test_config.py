"""
Tests for remote-driver configuration system.
"""

import json

import pytest
from pydantic import ValidationError

from remote_driver.config import (
    DEFAULT_CHROMEDRIVER,
    DEFAULT_HOST,
    DEFAULT_STARTUP_TIMEOUT,
    ConfigLoader,
    ConfigurationError,
    RemoteDriverConfig,
    ServiceOptions,
    env_var,
    find_config_file,
    load_config,
    load_env_config,
    load_file,
    merge_configs,
)


class TestServiceOptions:
    """Tests for ServiceOptions class."""

    def test_default_values(self):
        """Test default service options."""
        options = ServiceOptions()
        assert options.host == DEFAULT_HOST
        assert options.startup_timeout == DEFAULT_STARTUP_TIMEOUT
        assert options.chromedriver == DEFAULT_CHROMEDRIVER
        assert options.extra_args == []

    def test_validation(self):
        """Test timeouts must be positive."""
        with pytest.raises(ValidationError):
            ServiceOptions(startup_timeout=0)
        with pytest.raises(ValidationError):
            ServiceOptions(poll_interval=-1)

    def test_poll_interval_within_timeout(self):
        """Test the readiness probe must fit inside the startup timeout."""
        with pytest.raises(ValidationError, match="poll_interval"):
            ServiceOptions(startup_timeout=1.0, poll_interval=2.0)


class TestRemoteDriverConfig:
    def test_from_dict(self):
        """Test creating config from dictionary."""
        config = RemoteDriverConfig.from_dict(
            {"service": {"phantomjs": "/usr/bin/phantomjs"}, "transport": {"timeout": 5}}
        )
        assert config.service.phantomjs == "/usr/bin/phantomjs"
        assert config.transport.timeout == 5.0
        assert config.service.host == DEFAULT_HOST


class TestEnvironment:
    """Tests for environment variable overrides."""

    def test_env_var(self):
        assert env_var("service", "startup_timeout") == "REMOTE_DRIVER_SERVICE_STARTUP_TIMEOUT"

    def test_load_env_config(self, monkeypatch):
        """Test variables are converted to their option types."""
        monkeypatch.setenv("REMOTE_DRIVER_SERVICE_STARTUP_TIMEOUT", "12")
        monkeypatch.setenv("REMOTE_DRIVER_SERVICE_EXTRA_ARGS", "--verbose, --log-path=/tmp/driver.log")
        monkeypatch.setenv("REMOTE_DRIVER_TRANSPORT_TIMEOUT", "30")

        data = load_env_config()

        assert data["service"]["startup_timeout"] == 12.0
        assert data["service"]["extra_args"] == ["--verbose", "--log-path=/tmp/driver.log"]
        assert data["transport"] == {"timeout": 30.0}

    def test_unset_sections_are_omitted(self):
        assert load_env_config({"REMOTE_DRIVER_SERVICE_HOST": "0.0.0.0"}) == {
            "service": {"host": "0.0.0.0"}
        }

    def test_bad_number(self):
        with pytest.raises(ValueError, match="REMOTE_DRIVER_SERVICE_STARTUP_TIMEOUT='abc'"):
            load_env_config({"REMOTE_DRIVER_SERVICE_STARTUP_TIMEOUT": "abc"})


class TestLoadFile:
    """Tests for configuration file formats."""

    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"service": {"host": "localhost"}}))
        assert load_file(path) == {"service": {"host": "localhost"}}

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("service:\n  startup_timeout: 8\n  extra_args:\n    - --verbose\n")
        assert load_file(path) == {"service": {"startup_timeout": 8, "extra_args": ["--verbose"]}}

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_file(path) == {}

    def test_load_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[transport]\ntimeout = 15.0\n")
        assert load_file(path) == {"transport": {"timeout": 15.0}}

    @pytest.mark.parametrize(
        "name, content",
        [
            ("config.yaml", "service: [unclosed\n"),
            ("config.json", "{not json"),
            ("config.toml", "[transport\n"),
        ],
    )
    def test_invalid_content(self, tmp_path, name, content):
        path = tmp_path / name
        path.write_text(content)
        with pytest.raises(ConfigurationError, match="Failed to parse"):
            load_file(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError, match="must hold a mapping"):
            load_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_file(tmp_path / "missing.json")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.xml"
        path.write_text("<config/>")
        with pytest.raises(ConfigurationError, match="Unsupported configuration format"):
            load_file(path)

    def test_find_config_file(self, tmp_path):
        (tmp_path / "remote-driver.config.yaml").write_text("{}")
        assert find_config_file([str(tmp_path)]) == tmp_path / "remote-driver.config.yaml"
        assert find_config_file([str(tmp_path / "nowhere")]) is None


class TestConfigLoader:
    """Tests for layered configuration loading."""

    def test_priority(self, tmp_path, monkeypatch):
        """Test overrides beat environment, which beats the file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "service": {"chromedriver": "/file/chromedriver", "phantomjs": "/file/phantomjs",
                        "selenium": "/file/selenium"},
        }))
        monkeypatch.setenv("REMOTE_DRIVER_SERVICE_PHANTOMJS", "/env/phantomjs")
        monkeypatch.setenv("REMOTE_DRIVER_SERVICE_SELENIUM", "/env/selenium")

        config = ConfigLoader(config_file=path).load({"service": {"selenium": "/override/selenium"}})

        assert config.service.chromedriver == "/file/chromedriver"
        assert config.service.phantomjs == "/env/phantomjs"
        assert config.service.selenium == "/override/selenium"

    def test_ignores_environment_when_disabled(self, monkeypatch):
        monkeypatch.setenv("REMOTE_DRIVER_TRANSPORT_TIMEOUT", "1")
        config = ConfigLoader(load_env=False, auto_find=False).load()
        assert config.transport.timeout != 1.0

    def test_auto_find(self, tmp_path):
        (tmp_path / "remote-driver.config.json").write_text(json.dumps({"service": {"host": "0.0.0.0"}}))
        config = ConfigLoader(search_paths=[str(tmp_path)], load_env=False).load()
        assert config.service.host == "0.0.0.0"

    def test_invalid_values(self):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(overrides={"service": {"startup_timeout": -1}}, load_env=False)

    def test_invalid_environment(self, monkeypatch, tmp_path):
        """Test a malformed variable surfaces as a configuration error."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("REMOTE_DRIVER_SERVICE_STARTUP_TIMEOUT", "abc")

        with pytest.raises(ConfigurationError, match="REMOTE_DRIVER_SERVICE_STARTUP_TIMEOUT") as exc_info:
            load_config()

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_merge_configs(self):
        """Test merging multiple configurations."""
        merged = merge_configs(
            {"service": {"host": "a", "selenium": "s"}},
            {"service": {"host": "b"}},
        )
        assert merged == {"service": {"host": "b", "selenium": "s"}}
