"""
Configuration options classes for remote-driver.

This module provides strongly-typed option classes for the WebDriver service
and the HTTP transport, with validation via Pydantic.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

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
)


class ServiceOptions(BaseModel):
    """WebDriver process options.

    Controls where drivers listen, which executables are launched and how
    long startup and shutdown may take.
    """

    host: str = Field(DEFAULT_HOST, description="Interface the driver binds to")
    startup_timeout: float = Field(
        DEFAULT_STARTUP_TIMEOUT, gt=0, description="Seconds to wait for readiness"
    )
    poll_interval: float = Field(
        DEFAULT_POLL_INTERVAL, gt=0, description="Seconds between readiness probes"
    )
    shutdown_timeout: float = Field(
        DEFAULT_SHUTDOWN_TIMEOUT, ge=0, description="Seconds to wait before killing"
    )
    chromedriver: str = Field(DEFAULT_CHROMEDRIVER, description="ChromeDriver executable")
    phantomjs: str = Field(DEFAULT_PHANTOMJS, description="PhantomJS executable")
    selenium: str = Field(DEFAULT_SELENIUM, description="Selenium server executable")
    extra_args: list[str] = Field(
        default_factory=list, description="Additional driver arguments"
    )

    @model_validator(mode="after")
    def check_poll_interval(self) -> "ServiceOptions":
        """Polling must happen at least once before the timeout."""
        if self.poll_interval > self.startup_timeout:
            raise ValueError("poll_interval must not exceed startup_timeout")
        return self


class TransportOptions(BaseModel):
    """HTTP transport options for wire protocol commands."""

    timeout: float = Field(
        DEFAULT_TRANSPORT_TIMEOUT, gt=0, description="Request timeout in seconds"
    )
    connect_timeout: float = Field(
        DEFAULT_CONNECT_TIMEOUT, gt=0, description="Connection timeout in seconds"
    )


class RemoteDriverConfig(BaseModel):
    """Main configuration class combining all options."""

    service: ServiceOptions = Field(
        default_factory=ServiceOptions, description="Service options"
    )
    transport: TransportOptions = Field(
        default_factory=TransportOptions, description="Transport options"
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RemoteDriverConfig":
        """Create configuration from dictionary."""
        return cls(**data)

