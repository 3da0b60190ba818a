"""Tests for the driver process manager."""

from unittest.mock import MagicMock

import httpx
import pytest

from remote_driver.browser import (
    Browser,
    NotStartedError,
    ServiceStopError,
    SessionCleanupError,
    StartError,
    TooManyArgumentsError,
)
from remote_driver.interfaces import Service
from remote_driver.models import Capabilities
from remote_driver.page import Page
from remote_driver.service import ServiceError, WebDriverService, free_address
from remote_driver.session import ProtocolError, Session

from _utils import RecordingHandler, http_server_command, make_transport


@pytest.fixture
def service() -> MagicMock:
    return MagicMock(spec=Service)


@pytest.fixture
def browser(service) -> Browser:
    return Browser(service)


def attach_sessions(service: MagicMock, handler: RecordingHandler) -> None:
    """Make ``create_session`` hand out real sessions over a mock transport."""
    transport = make_transport(handler)
    counter = iter(range(1, 100))
    service.create_session.side_effect = lambda caps: Session(
        f"http://driver/session/{next(counter)}", transport
    )


class TestStart:
    def test_starts_service(self, browser, service):
        browser.start()

        service.start.assert_called_once_with()
        assert browser.started

    def test_service_failure(self, browser, service):
        service.start.side_effect = ServiceError("some error")

        with pytest.raises(StartError, match="failed to start service: some error") as exc_info:
            browser.start()

        assert isinstance(exc_info.value.__cause__, ServiceError)
        assert not browser.started


class TestPage:
    """Tests for Browser.page()."""

    def test_not_started(self, browser, service):
        with pytest.raises(NotStartedError):
            browser.page()
        service.create_session.assert_not_called()

    def test_default_browser(self, browser, service):
        session = MagicMock(spec=Session)
        service.create_session.return_value = session
        browser.start()

        page = browser.page()

        service.create_session.assert_called_once_with(Capabilities(browser_name=""))
        assert isinstance(page, Page)
        assert page.session is session
        assert browser.sessions == (session,)

    def test_named_browser(self, browser, service):
        browser.start()
        browser.page("firefox")
        service.create_session.assert_called_once_with(Capabilities(browser_name="firefox"))

    def test_too_many_arguments(self, browser, service):
        with pytest.raises(TooManyArgumentsError, match="too many arguments"):
            browser.page("one", "two")
        service.create_session.assert_not_called()

    def test_too_many_arguments_is_value_error(self, browser):
        browser.start()
        with pytest.raises(ValueError):
            browser.page("one", "two")

    def test_session_failure_propagates(self, browser, service):
        error = ProtocolError("browser not installed")
        service.create_session.side_effect = error
        browser.start()

        with pytest.raises(ProtocolError) as exc_info:
            browser.page()

        assert exc_info.value is error
        assert browser.sessions == ()


class TestStop:
    """Tests for Browser.stop()."""

    def test_destroys_every_session(self, browser, service):
        handler = RecordingHandler()
        attach_sessions(service, handler)
        browser.start()
        browser.page()
        browser.page()

        browser.stop()

        deletes = [r for r in handler.requests if r.method == "DELETE"]
        assert [str(r.url) for r in deletes] == [
            "http://driver/session/1",
            "http://driver/session/2",
        ]
        service.stop.assert_called_once_with()
        assert browser.sessions == ()
        assert not browser.started

    def test_session_failures_still_stop_service(self, browser, service):
        handler = RecordingHandler(httpx.Response(400, json={"value": {"message": "gone"}}))
        attach_sessions(service, handler)
        browser.start()
        browser.page()
        browser.page()

        with pytest.raises(SessionCleanupError, match="failed to destroy all running sessions") as exc_info:
            browser.stop()

        assert len(handler.requests) == 2
        assert len(exc_info.value.failures) == 2
        service.stop.assert_called_once_with()
        assert browser.sessions == ()

    def test_service_stop_failure(self, browser, service):
        service.stop.side_effect = ServiceError("some error")
        browser.start()

        with pytest.raises(ServiceStopError, match="failed to stop service: some error"):
            browser.stop()

    def test_service_failure_reports_session_failures(self, browser, service):
        handler = RecordingHandler(httpx.Response(500, json={"value": {"message": "gone"}}))
        attach_sessions(service, handler)
        service.stop.side_effect = ServiceError("some error")
        browser.start()
        browser.page()

        with pytest.raises(ServiceStopError) as exc_info:
            browser.stop()

        assert len(exc_info.value.failures) == 1

    def test_stop_twice(self):
        """Test a second stop over a real service is harmless."""
        address = free_address()
        browser = Browser(WebDriverService(f"http://{address}", http_server_command(address), timeout=10))

        browser.start()
        browser.stop()
        browser.stop()

        assert not browser.started
        assert not browser.service.running

    def test_stop_before_start(self):
        browser = Browser(WebDriverService("http://127.0.0.1:1", ["unused"]))
        browser.stop()
        assert not browser.started

    def test_context_manager(self, service):
        with Browser(service) as browser:
            assert browser.started
        service.start.assert_called_once_with()
        service.stop.assert_called_once_with()
