"""
=============================================================================
HTTPWIRE - HTTP/1.1 Message Framing and Decoding
=============================================================================

Turns a raw byte stream into structured HTTP responses and structured
requests back into wire bytes, with strict failure on malformed input.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpwire/
    ├── __init__.py          # This file - package exports
    ├── __main__.py          # CLI: python -m httpwire URL
    ├── config.py            # Client configuration
    ├── http/                # Framing engine (no sockets)
    │   ├── stream.py        # CRLF line reader, exact reads
    │   ├── headers.py       # HeaderField, HeaderList
    │   ├── body.py          # Decoded body + hex dump
    │   ├── decoding.py      # identity/chunked + deflate/gzip/br
    │   ├── content_type.py  # Content-Type parsing
    │   ├── request.py       # RequestMessage serializer
    │   ├── response.py      # ResponseMessage parser
    │   └── errors.py        # Error hierarchy
    └── core/
        └── connection.py    # TCP/TLS connection, one exchange

=============================================================================
QUICK START
=============================================================================

    import io
    from httpwire import ResponseMessage

    raw = b"200 OK\\r\\nContent-Length: 2\\r\\n\\r\\nhi"
    response = ResponseMessage.parse(io.BytesIO(raw))

    response.status_line        # "200 OK"
    str(response.headers)       # "[Content-Length=2]"
    bytes(response.body)        # b"hi"

    # Over the network
    from httpwire import Target, fetch
    response = fetch(Target.from_url("http://localhost/"))

=============================================================================
"""

__version__ = "1.0.0"

from .config import ClientConfig
from .core.connection import Target, fetch
from .http import (
    Body,
    ContentType,
    HeaderField,
    HeaderList,
    HTTPWireError,
    RequestMessage,
    ResponseMessage,
)

__all__ = [
    "Body",
    "ClientConfig",
    "ContentType",
    "HeaderField",
    "HeaderList",
    "HTTPWireError",
    "RequestMessage",
    "ResponseMessage",
    "Target",
    "fetch",
    "__version__",
]
