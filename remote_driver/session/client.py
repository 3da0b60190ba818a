"""
Wire protocol session.

A Session is bound to one live remote session URL and is the single choke
point through which every page and element command passes.
"""

import logging
from typing import Any, Optional

from remote_driver.interfaces import Executor
from remote_driver.models import Capabilities
from remote_driver.session.transport import (
    HTTPTransport,
    ProtocolError,
    decode_response,
    parse_body,
)

logger = logging.getLogger(__name__)


class Session(Executor):
    """Command executor for a single remote session.

    Example:
        transport = HTTPTransport()
        session = Session.create("http://127.0.0.1:9515", Capabilities(), transport)
        session.execute("POST", "url", {"url": "https://example.com"})
        title = session.execute("GET", "title")
        session.delete()
    """

    def __init__(self, url: str, transport: Optional[HTTPTransport] = None) -> None:
        """Initialize Session.

        Args:
            url: Remote session URL, e.g. ``http://host:port/session/<id>``.
            transport: Transport used for requests.
        """
        self._url = url.rstrip("/")
        self._transport = transport or HTTPTransport()

    @property
    def url(self) -> str:
        """Get the remote session URL."""
        return self._url

    @property
    def transport(self) -> HTTPTransport:
        return self._transport

    def _endpoint_url(self, endpoint: str) -> str:
        endpoint = endpoint.strip("/")
        if not endpoint:
            return self._url
        return f"{self._url}/{endpoint}"

    def execute(self, method: str, endpoint: str, body: Optional[Any] = None) -> Any:
        """Issue a command against this session.

        Args:
            method: HTTP method.
            endpoint: Path relative to the session URL. Empty for the session
                itself.
            body: JSON-serialisable request body, or None.

        Returns:
            The ``value`` of the driver's response envelope.

        Raises:
            TransportError: If the driver cannot be reached.
            ProtocolError: If the driver reports a failure.
        """
        url = self._endpoint_url(endpoint)
        logger.debug(f"{method} {url}")
        response = self._transport.request(method, url, body)
        return decode_response(response)

    def delete(self) -> None:
        """Release the remote session."""
        logger.debug(f"Deleting session {self._url}")
        self.execute("DELETE", "")

    @classmethod
    def create(
        cls,
        service_url: str,
        capabilities: Capabilities,
        transport: Optional[HTTPTransport] = None,
    ) -> "Session":
        """Open a new remote session.

        Args:
            service_url: Root URL of the WebDriver process.
            capabilities: Requested session configuration.
            transport: Transport shared by the new session.

        Returns:
            A Session bound to the URL of the newly created remote session.

        Raises:
            TransportError: If the driver cannot be reached.
            ProtocolError: If the driver refuses or returns no session ID.
        """
        transport = transport or HTTPTransport()
        service_url = service_url.rstrip("/")
        response = transport.request("POST", f"{service_url}/session", capabilities.to_wire())
        decode_response(response)

        session_id = _session_id(parse_body(response))
        if not session_id:
            raise ProtocolError(
                "failed to retrieve a session ID", status_code=response.status_code
            )

        url = f"{service_url}/session/{session_id}"
        logger.debug(f"Created session {url} ({capabilities.browser_name or 'default browser'})")
        return cls(url, transport)

    def __repr__(self) -> str:
        return f"Session(url={self._url!r})"


def _session_id(payload: Any) -> Optional[str]:
    """Find the session ID in a legacy or W3C new-session response."""
    if not isinstance(payload, dict):
        return None
    if payload.get("sessionId"):
        return payload["sessionId"]
    value = payload.get("value")
    if isinstance(value, dict) and value.get("sessionId"):
        return value["sessionId"]
    return None
