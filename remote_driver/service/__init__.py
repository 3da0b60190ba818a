"""
Service module for remote-driver.

Launches and supervises WebDriver executables:
- WebDriverService: Spawns a driver and polls it until it accepts connections
- free_address: Picks an unused local TCP address for a driver to bind
- ServiceError: Raised when a driver cannot be started or stopped
"""

from remote_driver.service.launcher import ServiceError, WebDriverService, free_address

__all__ = [
    "ServiceError",
    "WebDriverService",
    "free_address",
]
