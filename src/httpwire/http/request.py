"""
=============================================================================
HTTP REQUEST SERIALIZER
=============================================================================

Turns a structured request into wire bytes.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     HTTP REQUEST STRUCTURE                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │    GET /index.html HTTP/1.1\r\n        ← request line               │
    │    ─┬─ ─────┬───── ────┬───                                          │
    │   method   path     "HTTP/" + version                                │
    │                                                                      │
    │    Host: example.com:80\r\n            ← header block                │
    │    Accept-Encoding: gzip, deflate, br\r\n                            │
    │    \r\n                                ← end of headers              │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Requests carry no body: the message ends with the header block. Text is
written one byte per character (see stream.py).

=============================================================================
"""

import io
from dataclasses import dataclass, field
from typing import BinaryIO

from .headers import HeaderList
from .stream import write_text


@dataclass(frozen=True)
class RequestMessage:
    """
    A request ready to be written to a stream.

    Attributes:
        method:  Request method ("GET", "HEAD", ...), written verbatim.
        path:    Request target ("/", "/search?q=x"), written verbatim.
        headers: Header fields, written in order.
        version: Protocol version without the "HTTP/" prefix.
    """

    method: str
    path: str
    headers: HeaderList = field(default_factory=HeaderList)
    version: str = "1.1"

    @property
    def request_line(self) -> str:
        return f"{self.method} {self.path} HTTP/{self.version}"

    def serialize(self, stream: BinaryIO) -> None:
        """
        Write the request line and header block to the stream.

        Raises:
            UnencodableTextError: If any text is outside the single-byte range.
        """
        write_text(stream, self.request_line + "\r\n")
        self.headers.serialize(stream)

    def to_bytes(self) -> bytes:
        """Return exactly the bytes serialize() would write."""
        buffer = io.BytesIO()
        self.serialize(buffer)
        return buffer.getvalue()
