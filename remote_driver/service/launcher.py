"""
WebDriver process launcher.

Handles launching a WebDriver executable (ChromeDriver, PhantomJS, Selenium
server) and waiting until it accepts HTTP connections.
"""

import logging
import os
import signal
import socket
import subprocess
import tempfile
import time
from typing import IO, Any, Optional

from remote_driver.config.defaults import (
    DEFAULT_HOST,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_SHUTDOWN_TIMEOUT,
    DEFAULT_STARTUP_TIMEOUT,
)
from remote_driver.interfaces import Service
from remote_driver.models import Capabilities
from remote_driver.session import HTTPTransport, Session, TransportError

logger = logging.getLogger(__name__)

# How much of the driver's stderr to quote when it exits during startup
STDERR_TAIL_BYTES = 4096


class ServiceError(Exception):
    """The WebDriver process could not be started or stopped."""

    pass


def free_address(host: str = DEFAULT_HOST) -> str:
    """Find an available TCP address on ``host``.

    The socket is released before returning so the driver can bind the port.

    Returns:
        Address in ``host:port`` form.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((host, 0))
        port = s.getsockname()[1]
    return f"{host}:{port}"


class WebDriverService(Service):
    """Manages a WebDriver subprocess reachable at ``url``.

    Example:
        address = free_address()
        port = address.split(":")[1]
        service = WebDriverService(
            f"http://{address}",
            ["chromedriver", "--silent", f"--port={port}"],
        )
        service.start()
        session = service.create_session(Capabilities())
        service.stop()
    """

    def __init__(
        self,
        url: str,
        command: list[str],
        *,
        timeout: float = DEFAULT_STARTUP_TIMEOUT,
        transport: Optional[HTTPTransport] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        shutdown_timeout: float = DEFAULT_SHUTDOWN_TIMEOUT,
    ) -> None:
        """Initialize WebDriverService.

        Args:
            url: Base URL the driver will listen on.
            command: Executable and arguments that launch the driver.
            timeout: Seconds to wait for the driver to accept connections.
            transport: Transport for readiness polling and created sessions.
            poll_interval: Seconds between readiness probes.
            shutdown_timeout: Seconds to wait for a graceful exit before killing.
        """
        self._url = url.rstrip("/")
        self._command = list(command)
        self._timeout = timeout
        self._transport = transport or HTTPTransport()
        self._poll_interval = poll_interval
        self._shutdown_timeout = shutdown_timeout
        self._process: Optional[subprocess.Popen[bytes]] = None
        self._stderr: Optional[IO[bytes]] = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def command(self) -> list[str]:
        return list(self._command)

    @property
    def transport(self) -> HTTPTransport:
        """Get the transport shared with created sessions."""
        return self._transport

    @property
    def process(self) -> Optional[subprocess.Popen[bytes]]:
        """Get the driver subprocess."""
        return self._process

    @property
    def running(self) -> bool:
        return self._process is not None and self._process.poll() is None

    def start(self) -> None:
        """Launch the driver and wait until it answers on ``/status``.

        The driver's stderr is captured in a temporary file so a chatty
        driver never blocks on a full pipe.

        Raises:
            ServiceError: If already running, the executable cannot be
                launched, it exits early, or the timeout elapses.
        """
        if self._process is not None:
            raise ServiceError("service is already running")

        logger.debug(f"Launching WebDriver: {self._command}")
        self._stderr = tempfile.TemporaryFile(prefix="remote-driver-")
        try:
            self._process = subprocess.Popen(
                self._command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=self._stderr,
                env=os.environ.copy(),
            )
        except OSError as e:
            self._close_stderr()
            raise ServiceError(f"failed to run command {self._command[0]!r}: {e}") from e

        try:
            self._wait_until_ready()
        except ServiceError:
            self._terminate()
            raise

        logger.debug(f"WebDriver ready at {self._url}")

    def _wait_until_ready(self) -> None:
        """Poll the status endpoint until any HTTP response arrives."""
        status_url = f"{self._url}/status"
        deadline = time.monotonic() + self._timeout

        while time.monotonic() < deadline:
            try:
                self._transport.request("GET", status_url, timeout=self._poll_interval * 5)
                return
            except TransportError:
                pass

            # Check if process died
            if self._process is not None and self._process.poll() is not None:
                raise ServiceError(
                    f"process exited unexpectedly with code {self._process.returncode}: "
                    f"{self._stderr_tail()}"
                )

            time.sleep(self._poll_interval)

        raise ServiceError(f"failed to start before timeout ({self._timeout}s)")

    def _stderr_tail(self) -> str:
        if self._stderr is None:
            return ""
        self._stderr.seek(0, os.SEEK_END)
        size = self._stderr.tell()
        self._stderr.seek(max(0, size - STDERR_TAIL_BYTES))
        return self._stderr.read().decode(errors="replace").strip()

    def _close_stderr(self) -> None:
        if self._stderr is not None:
            self._stderr.close()
            self._stderr = None

    def stop(self) -> None:
        """Stop the driver process and close idle connections to it.

        Stopping a service that is not running does nothing.

        Raises:
            ServiceError: If the process cannot be stopped.
        """
        if self._process is None:
            logger.debug("WebDriver is not running")
        else:
            self._terminate()
            logger.debug("WebDriver stopped")
        self._transport.close()

    def _terminate(self) -> None:
        process = self._process
        self._process = None
        if process is None:
            return

        try:
            if process.poll() is not None:
                return
            # Try graceful shutdown first
            if os.name == "posix":
                process.send_signal(signal.SIGTERM)
            else:
                process.terminate()

            try:
                process.wait(timeout=self._shutdown_timeout)
            except subprocess.TimeoutExpired:
                logger.warning("WebDriver did not exit in time, killing it")
                process.kill()
                process.wait()
        except ProcessLookupError:
            pass
        except OSError as e:
            raise ServiceError(f"failed to stop process: {e}") from e
        finally:
            self._close_stderr()

    def create_session(self, capabilities: Capabilities) -> Session:
        """Open a new remote session on this driver."""
        return Session.create(self._url, capabilities, self._transport)

    def __enter__(self) -> "WebDriverService":
        self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        self.stop()
