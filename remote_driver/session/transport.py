"""
HTTP transport for the JSON wire protocol.

Provides a thin synchronous client over httpx that sends JSON command bodies
to a WebDriver process, and the decoding of the driver's response envelope.
"""

import json
import logging
from typing import Any, Optional

import httpx

from remote_driver.config.defaults import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TRANSPORT_TIMEOUT

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """The remote driver could not be reached."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class ProtocolError(Exception):
    """The remote driver answered but reported a failure."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class HTTPTransport:
    """Sends wire protocol requests over a pooled httpx client.

    Example:
        transport = HTTPTransport(timeout=30.0)
        response = transport.request("GET", "http://127.0.0.1:9515/status")
        print(response.status_code)
        transport.close()
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        timeout: float = DEFAULT_TRANSPORT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> None:
        """Initialize HTTPTransport.

        Args:
            client: Preconfigured httpx client. Created on demand if omitted.
            timeout: Overall request timeout in seconds.
            connect_timeout: Connection timeout in seconds.
        """
        self._client = client
        self._owns_client = client is None
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)

    @property
    def closed(self) -> bool:
        """Whether no client connections are held open."""
        return self._client is None or self._client.is_closed

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout)
        return self._client

    def request(
        self,
        method: str,
        url: str,
        body: Optional[Any] = None,
        *,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """Perform a request and return the raw response.

        Args:
            method: HTTP method.
            url: Absolute request URL.
            body: JSON-serialisable payload, or None for no body.
            timeout: Per-request timeout override in seconds.

        Returns:
            The httpx response, whatever its status.

        Raises:
            TransportError: On any connection-level failure.
        """
        client = self._ensure_client()
        content = json.dumps(body).encode("utf-8") if body is not None else None
        headers = {"Accept": "application/json"}
        if content is not None:
            headers["Content-Type"] = "application/json;charset=utf-8"

        try:
            return client.request(
                method,
                url,
                content=content,
                headers=headers,
                timeout=timeout if timeout is not None else self._timeout,
            )
        except httpx.RequestError as e:
            raise TransportError(method, url, str(e) or type(e).__name__) from e

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def parse_body(response: httpx.Response) -> Any:
    """Parse a response body as JSON, returning None for an empty body."""
    if not response.content.strip():
        return None
    try:
        return response.json()
    except ValueError as e:
        raise ProtocolError(
            f"invalid JSON response: {response.text[:200]}",
            status_code=response.status_code,
        ) from e


def _error_message(payload: Any, raw: str) -> str:
    """Extract the driver's error message from a failure envelope.

    PhantomJS nests a JSON document with an ``errorMessage`` key inside
    ``value.message``; other drivers put plain text there.
    """
    if not isinstance(payload, dict):
        return raw.strip() or "unknown error"

    value = payload.get("value")
    message = value.get("message") if isinstance(value, dict) else None
    if not message:
        return raw.strip() or "unknown error"

    try:
        nested = json.loads(message)
    except ValueError:
        return message
    if isinstance(nested, dict) and nested.get("errorMessage"):
        return nested["errorMessage"]
    return message


def decode_response(response: httpx.Response) -> Any:
    """Decode a wire protocol envelope into its ``value``.

    Raises:
        ProtocolError: For non-2xx statuses, non-zero envelope status codes
            or undecodable bodies.
    """
    if not response.is_success:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        message = _error_message(payload, response.text)
        raise ProtocolError(
            f"request unsuccessful: {message}", status_code=response.status_code
        )

    payload = parse_body(response)
    if not isinstance(payload, dict):
        return payload

    status = payload.get("status")
    if isinstance(status, int) and status != 0:
        message = _error_message(payload, response.text)
        raise ProtocolError(
            f"request unsuccessful: {message}", status_code=response.status_code
        )

    return payload.get("value")
