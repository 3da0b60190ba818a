"""
Browser management module for remote-driver.

This module provides the driver process manager and its factories:
- Browser: Owns one WebDriver service and every session opened on it
- chrome / phantomjs / selenium: Browsers for the common driver executables
- StartError / StopError / SessionCleanupError / ServiceStopError: Lifecycle failures
- TooManyArgumentsError / NotStartedError: Misuse of ``Browser.page``

Example usage:
    from remote_driver.browser import chrome

    with chrome() as browser:
        page = browser.page()
        page.navigate("https://example.com")
        print(page.title())
"""

from remote_driver.browser.browser import (
    Browser,
    NotStartedError,
    ServiceStopError,
    SessionCleanupError,
    StartError,
    StopError,
    TooManyArgumentsError,
)
from remote_driver.browser.factory import chrome, phantomjs, selenium

__all__ = [
    "Browser",
    "chrome",
    "phantomjs",
    "selenium",
    "NotStartedError",
    "ServiceStopError",
    "SessionCleanupError",
    "StartError",
    "StopError",
    "TooManyArgumentsError",
]
