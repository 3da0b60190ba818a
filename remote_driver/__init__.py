"""
remote-driver: WebDriver process and session control for Python.

Launches a WebDriver executable (ChromeDriver, PhantomJS, Selenium server),
opens sessions on it and drives pages and elements over the JSON wire
protocol.

Basic usage:
    from remote_driver import chrome

    with chrome() as browser:
        page = browser.page()
        page.navigate("https://example.com")
        print(page.find("h1").text())
        page.find("a").click()

Selenium with a specific browser:
    from remote_driver import selenium

    browser = selenium()
    browser.start()
    try:
        page = browser.page("firefox")
        page.navigate("https://example.com")
    finally:
        browser.stop()
"""

__version__ = "0.1.0"
__license__ = "MIT"

from remote_driver.models import (
    Capabilities,
    Cookie,
    Selector,
    SelectorStrategy,
)

from remote_driver.interfaces import (
    Executor,
    Service,
)

from remote_driver.session import (
    HTTPTransport,
    ProtocolError,
    Session,
    TransportError,
)

from remote_driver.elements import (
    Element,
    Selection,
    SelectionError,
)

from remote_driver.page import Page

from remote_driver.service import (
    ServiceError,
    WebDriverService,
    free_address,
)

from remote_driver.browser import (
    Browser,
    NotStartedError,
    ServiceStopError,
    SessionCleanupError,
    StartError,
    StopError,
    TooManyArgumentsError,
    chrome,
    phantomjs,
    selenium,
)

from remote_driver.config import (
    ConfigurationError,
    RemoteDriverConfig,
    ServiceOptions,
    TransportOptions,
    load_config,
)

__all__ = [
    "__version__",
    "__license__",
    # Models
    "Capabilities",
    "Cookie",
    "Selector",
    "SelectorStrategy",
    # Interfaces
    "Executor",
    "Service",
    # Sessions
    "HTTPTransport",
    "ProtocolError",
    "Session",
    "TransportError",
    # Elements and pages
    "Element",
    "Selection",
    "SelectionError",
    "Page",
    # Services
    "ServiceError",
    "WebDriverService",
    "free_address",
    # Browser management
    "Browser",
    "NotStartedError",
    "ServiceStopError",
    "SessionCleanupError",
    "StartError",
    "StopError",
    "TooManyArgumentsError",
    "chrome",
    "phantomjs",
    "selenium",
    # Configuration
    "ConfigurationError",
    "RemoteDriverConfig",
    "ServiceOptions",
    "TransportOptions",
    "load_config",
]
