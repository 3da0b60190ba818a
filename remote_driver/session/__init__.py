"""
Session module for remote-driver.

This module provides the command executor for one remote WebDriver session:
- Session: Binds a remote session URL and dispatches commands to it
- HTTPTransport: Synchronous JSON-over-HTTP client built on httpx
- TransportError / ProtocolError: Connection and driver-reported failures

Example usage:
    from remote_driver.models import Capabilities
    from remote_driver.session import HTTPTransport, Session

    with HTTPTransport() as transport:
        session = Session.create("http://127.0.0.1:9515", Capabilities(), transport)
        session.execute("POST", "url", {"url": "https://example.com"})
        print(session.execute("GET", "title"))
        session.delete()
"""

from remote_driver.session.client import Session
from remote_driver.session.transport import (
    HTTPTransport,
    ProtocolError,
    TransportError,
    decode_response,
)

__all__ = [
    "Session",
    "HTTPTransport",
    "ProtocolError",
    "TransportError",
    "decode_response",
]
