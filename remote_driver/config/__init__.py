"""
Configuration module for remote-driver.

- ServiceOptions / TransportOptions / RemoteDriverConfig: validated options
- load_config / ConfigLoader: defaults < file < environment < overrides
- Configuration files: JSON, YAML or TOML named ``remote-driver.config.*``

Example usage:
    from remote_driver.config import RemoteDriverConfig, ServiceOptions, load_config

    # Load from file with environment overrides
    config = load_config("remote-driver.config.yaml")

    # Create programmatically
    config = RemoteDriverConfig(
        service=ServiceOptions(startup_timeout=10.0, chromedriver="/opt/bin/chromedriver"),
    )

Environment variables:
    REMOTE_DRIVER_SERVICE_STARTUP_TIMEOUT=10
    REMOTE_DRIVER_SERVICE_EXTRA_ARGS=--verbose,--log-path=/tmp/driver.log
    REMOTE_DRIVER_TRANSPORT_TIMEOUT=120
"""

from .defaults import (
    DEFAULT_CHROMEDRIVER,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_HOST,
    DEFAULT_PHANTOMJS,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_SELENIUM,
    DEFAULT_SHUTDOWN_TIMEOUT,
    DEFAULT_STARTUP_TIMEOUT,
    DEFAULT_TRANSPORT_TIMEOUT,
    ENV_PREFIX,
)
from .env import env_var, load_env_config
from .loader import (
    ConfigLoader,
    ConfigurationError,
    find_config_file,
    load_config,
    load_file,
    merge_configs,
)
from .options import (
    RemoteDriverConfig,
    ServiceOptions,
    TransportOptions,
)

__all__ = [
    "RemoteDriverConfig",
    "ServiceOptions",
    "TransportOptions",
    "ConfigLoader",
    "ConfigurationError",
    "load_config",
    "load_file",
    "find_config_file",
    "merge_configs",
    "env_var",
    "load_env_config",
    "DEFAULT_CHROMEDRIVER",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_HOST",
    "DEFAULT_PHANTOMJS",
    "DEFAULT_POLL_INTERVAL",
    "DEFAULT_SELENIUM",
    "DEFAULT_SHUTDOWN_TIMEOUT",
    "DEFAULT_STARTUP_TIMEOUT",
    "DEFAULT_TRANSPORT_TIMEOUT",
    "ENV_PREFIX",
]
