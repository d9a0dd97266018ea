"""
Pluggable HTTP transport for the Form3 client.

The client never talks to the network directly; it hands a prepared request
to a Transport and gets a response back. Tests substitute an in-memory
transport, applications can bring their own session (proxies, TLS, adapters).
"""

import logging
from typing import Protocol, runtime_checkable

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@runtime_checkable
class Transport(Protocol):
    """
    Sends a prepared HTTP request and returns the response.

    Implementations raise requests.exceptions.RequestException (or a
    subclass) for network-level failures. A transport shared by several
    threads must be safe for concurrent use.
    """

    def send(self, request: requests.PreparedRequest) -> requests.Response: ...


class SessionTransport:
    """Default transport backed by a requests.Session with a per-call timeout."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the transport.

        Args:
            session: Session to send requests with (a new one if omitted)
            timeout: Connect/read timeout in seconds for every call
        """
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        logger.debug(f"Sending {request.method} {request.url} (timeout={self.timeout}s)")
        return self.session.send(request, timeout=self.timeout)

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()
