"""
Driver process manager.

A Browser owns one WebDriver service and every session opened against it,
and is the unit of startup and shutdown.
"""

import logging
from typing import Any, Optional

from remote_driver.interfaces import Service
from remote_driver.models import Capabilities
from remote_driver.page import Page
from remote_driver.service import ServiceError
from remote_driver.session import ProtocolError, Session, TransportError

logger = logging.getLogger(__name__)


class TooManyArgumentsError(ValueError):
    """More than one browser name was passed to ``Browser.page``."""

    def __init__(self, message: str = "too many arguments") -> None:
        super().__init__(message)


class NotStartedError(RuntimeError):
    """A page was requested before the browser was started."""

    def __init__(self, message: str = "browser has not been started") -> None:
        super().__init__(message)


class StartError(Exception):
    """The WebDriver service failed to start."""

    pass


class StopError(Exception):
    """Shutdown did not complete cleanly. The service stop was still attempted."""

    def __init__(self, message: str, failures: Optional[list[Exception]] = None) -> None:
        super().__init__(message)
        self.failures = failures or []


class SessionCleanupError(StopError):
    """One or more sessions could not be destroyed during shutdown."""

    pass


class ServiceStopError(StopError):
    """The WebDriver service could not be stopped."""

    pass


class Browser:
    """Selenium, PhantomJS or ChromeDriver process with its sessions.

    Example:
        browser = chrome()
        browser.start()
        try:
            page = browser.page()
            page.navigate("https://example.com")
        finally:
            browser.stop()
    """

    def __init__(self, service: Service) -> None:
        """Initialize Browser.

        Args:
            service: The WebDriver service to manage.
        """
        self._service = service
        self._sessions: list[Session] = []
        self._started = False

    @property
    def service(self) -> Service:
        return self._service

    @property
    def started(self) -> bool:
        return self._started

    @property
    def sessions(self) -> tuple[Session, ...]:
        """Sessions opened through this browser and not yet stopped."""
        return tuple(self._sessions)

    def start(self) -> None:
        """Launch the WebDriver process.

        Raises:
            StartError: If the service fails to start.
        """
        try:
            self._service.start()
        except (ServiceError, OSError) as e:
            raise StartError(f"failed to start service: {e}") from e
        self._started = True
        logger.debug("Browser service started")

    def page(self, *browser_name: str) -> Page:
        """Open a new session and return its page.

        Args:
            *browser_name: Optional browser name for Selenium ("firefox",
                "safari", "chrome", ...). At most one may be given.

        Raises:
            TooManyArgumentsError: If more than one name is given.
            NotStartedError: If ``start`` has not succeeded.
            TransportError, ProtocolError: If the driver refuses the session.
        """
        if len(browser_name) > 1:
            raise TooManyArgumentsError()
        if not self._started:
            raise NotStartedError()

        capabilities = Capabilities(browser_name=browser_name[0] if browser_name else "")
        session = self._service.create_session(capabilities)
        self._sessions.append(session)
        return Page(session)

    def stop(self) -> None:
        """End all sessions and stop the WebDriver process.

        Every tracked session is deleted even if some deletions fail, and
        the service is stopped regardless.

        Raises:
            ServiceStopError: If the service could not be stopped.
            SessionCleanupError: If any session could not be destroyed.
        """
        failures: list[Exception] = []
        for session in self._sessions:
            try:
                session.delete()
            except (TransportError, ProtocolError) as e:
                logger.warning(f"Failed to destroy session {session.url}: {e}")
                failures.append(e)
        self._sessions.clear()
        self._started = False

        try:
            self._service.stop()
        except (ServiceError, OSError) as e:
            raise ServiceStopError(f"failed to stop service: {e}", failures) from e

        if failures:
            raise SessionCleanupError("failed to destroy all running sessions", failures)

    def __enter__(self) -> "Browser":
        self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        self.stop()
