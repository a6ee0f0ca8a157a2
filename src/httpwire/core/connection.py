"""
=============================================================================
CLIENT CONNECTION
=============================================================================

The transport side of a single exchange: open a TCP connection (with TLS
for https), expose it as a binary stream, write one request, read one
response, close.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                          fetch(target)                               │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Target("https://example.com/")                                    │
    │      │                                                               │
    │      ▼                                                               │
    │   socket.create_connection()  ──►  ssl.wrap_socket() (https only)   │
    │      │                                                               │
    │      ▼                                                               │
    │   sock.makefile("rwb")        ← buffered binary stream              │
    │      │                                                               │
    │      ├──► RequestMessage.serialize(stream); stream.flush()          │
    │      │                                                               │
    │      └──► ResponseMessage.parse(stream)                             │
    │                                                                      │
    │   stream + socket closed on exit, even on error                     │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

No keep-alive, no redirects, no retries: one exchange per connection.

=============================================================================
"""

import logging
import socket
import ssl
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional
from urllib.parse import urlsplit

from ..config import ClientConfig
from ..http.headers import HeaderList
from ..http.request import RequestMessage
from ..http.response import ResponseMessage


logger = logging.getLogger(__name__)


DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class Target:
    """
    Where to connect and what to ask for.

    Attributes:
        secure: True for TLS (https).
        host:   Server host name or address.
        port:   Server TCP port.
        path:   Request target, including any query string.
    """

    secure: bool
    host: str
    port: int
    path: str = "/"

    @classmethod
    def from_url(cls, url: str) -> "Target":
        """
        Build a Target from an absolute http(s) URL.

        Examples:
            "http://localhost/"            → Target(False, "localhost", 80, "/")
            "https://example.com:8443/a?b" → Target(True, "example.com", 8443, "/a?b")

        Raises:
            ValueError: If the scheme is not http/https or the host is missing.
        """
        parts = urlsplit(url)
        if parts.scheme not in DEFAULT_PORTS:
            raise ValueError(f"Unsupported URL scheme: {parts.scheme!r}")
        if not parts.hostname:
            raise ValueError(f"URL has no host: {url!r}")

        path = parts.path or "/"
        if parts.query:
            path += "?" + parts.query

        return cls(
            secure=parts.scheme == "https",
            host=parts.hostname,
            port=parts.port or DEFAULT_PORTS[parts.scheme],
            path=path,
        )

    @property
    def authority(self) -> str:
        """host:port, with IPv6 literals in brackets (RFC 3986 §3.2.2)."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"

    @property
    def host_header(self) -> str:
        return self.authority

    def __str__(self) -> str:
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.authority}{self.path}"


def build_request(target: Target, config: Optional[ClientConfig] = None) -> RequestMessage:
    """Build the default GET request for `target`."""
    config = config or ClientConfig()
    headers = HeaderList([
        ("Host", target.host_header),
        ("Accept-Encoding", config.accept_encoding),
    ])
    return RequestMessage("GET", target.path, headers, version=config.version)


def exchange(stream: BinaryIO, request: RequestMessage) -> ResponseMessage:
    """Write `request` to an open stream and parse the response."""
    request.serialize(stream)
    stream.flush()
    return ResponseMessage.parse(stream)


@contextmanager
def open_stream(target: Target, timeout: Optional[float] = 30.0) -> Iterator[BinaryIO]:
    """
    Connect to `target` and yield the connection as a binary stream.

    The socket (and TLS layer) are closed when the block exits.

    Raises:
        OSError: If the connection or TLS handshake fails.
    """
    sock = socket.create_connection((target.host, target.port), timeout=timeout)
    logger.info(f"Connected to {target.authority}")
    try:
        if target.secure:
            context = ssl.create_default_context()
            sock = context.wrap_socket(sock, server_hostname=target.host)
            logger.debug(f"TLS established with {target.host} ({sock.version()})")

        with sock.makefile("rwb") as stream:
            yield stream
    finally:
        sock.close()
        logger.info(f"Connection to {target.authority} closed")


def fetch(target: Target, config: Optional[ClientConfig] = None) -> ResponseMessage:
    """
    Perform one GET exchange with `target`.

    Raises:
        OSError: On connection failures and timeouts.
        HTTPWireError: If the response cannot be framed or decoded.
    """
    config = config or ClientConfig()
    request = build_request(target, config)

    with open_stream(target, timeout=config.timeout) as stream:
        logger.debug(f"Sending: {request.request_line}")
        return exchange(stream, request)
