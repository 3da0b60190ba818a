"""
Default configuration values for remote-driver.

This module contains all default values used throughout the configuration system.
"""

# Service defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_STARTUP_TIMEOUT = 5.0
DEFAULT_POLL_INTERVAL = 0.1
DEFAULT_SHUTDOWN_TIMEOUT = 5.0

# Driver executables
DEFAULT_CHROMEDRIVER = "chromedriver"
DEFAULT_PHANTOMJS = "phantomjs"
DEFAULT_SELENIUM = "selenium-server"

# Transport defaults
DEFAULT_TRANSPORT_TIMEOUT = 60.0
DEFAULT_CONNECT_TIMEOUT = 10.0

# File config defaults
DEFAULT_CONFIG_FILENAME = "remote-driver.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/remote-driver",
    "/etc/remote-driver",
]

# Environment variable prefix
ENV_PREFIX = "REMOTE_DRIVER_"

