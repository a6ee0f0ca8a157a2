"""
=============================================================================
CORE TRANSPORT
=============================================================================

Connection handling for the sample client. The framing engine
(httpwire.http) never opens sockets itself; it only reads from and
writes to the stream this package provides.

=============================================================================
"""

from .connection import Target, build_request, exchange, fetch, open_stream

__all__ = [
    "Target",         # URL → host/port/path/TLS flag
    "build_request",  # Default GET request for a target
    "exchange",       # Write request, parse response on an open stream
    "fetch",          # Connect, exchange, close
    "open_stream",    # TCP/TLS connection as a binary stream
]
