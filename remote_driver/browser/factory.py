"""
Ready-made browsers for the common WebDriver executables.

Each factory reserves a free local address, builds the launch command for its
driver and wraps the resulting service in a Browser. Nothing is launched until
``Browser.start`` is called.
"""

import logging
from typing import Callable, Optional

from remote_driver.browser.browser import Browser
from remote_driver.config import RemoteDriverConfig, load_config
from remote_driver.service import WebDriverService, free_address
from remote_driver.session import HTTPTransport

logger = logging.getLogger(__name__)


def _build(
    config: Optional[RemoteDriverConfig],
    url_for: Callable[[str], str],
    command_for: Callable[[RemoteDriverConfig, str, str], list[str]],
) -> Browser:
    config = config or load_config()
    options = config.service

    address = free_address(options.host)
    port = address.rsplit(":", 1)[1]
    url = url_for(address)
    command = command_for(config, address, port) + list(options.extra_args)
    logger.debug(f"Prepared WebDriver at {url}: {command}")

    transport = HTTPTransport(
        timeout=config.transport.timeout,
        connect_timeout=config.transport.connect_timeout,
    )
    service = WebDriverService(
        url,
        command,
        timeout=options.startup_timeout,
        transport=transport,
        poll_interval=options.poll_interval,
        shutdown_timeout=options.shutdown_timeout,
    )
    return Browser(service)


def chrome(config: Optional[RemoteDriverConfig] = None) -> Browser:
    """Chrome via ChromeDriver."""
    return _build(
        config,
        lambda address: f"http://{address}",
        lambda cfg, address, port: [cfg.service.chromedriver, "--silent", f"--port={port}"],
    )


def phantomjs(config: Optional[RemoteDriverConfig] = None) -> Browser:
    """PhantomJS in WebDriver mode."""
    return _build(
        config,
        lambda address: f"http://{address}",
        lambda cfg, address, port: [cfg.service.phantomjs, f"--webdriver={address}"],
    )


def selenium(config: Optional[RemoteDriverConfig] = None) -> Browser:
    """Selenium server. Pass a browser name to ``Browser.page`` to pick the browser."""
    return _build(
        config,
        lambda address: f"http://{address}/wd/hub",
        lambda cfg, address, port: [cfg.service.selenium, "-port", port],
    )
