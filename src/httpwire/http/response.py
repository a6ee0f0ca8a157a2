"""
=============================================================================
HTTP RESPONSE PARSER
=============================================================================

Reads one complete response from a stream:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    ResponseMessage.parse(stream)                    │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   1. read_line()          "HTTP/1.1 200 OK"        → status_line    │
    │   2. HeaderList.parse()   "Name: value" ... ""     → headers        │
    │   3. decode_body()        identity/chunked + gzip  → body           │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The status line is kept as opaque text; nothing here interprets the
status code. Any error from the three steps propagates unchanged and no
partial response is returned.

=============================================================================
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Mapping, Optional

from .body import Body
from .content_type import ContentType
from .decoding import Decoder, decode_body
from .headers import HeaderList
from .stream import read_line


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResponseMessage:
    """A fully parsed and decoded response."""

    status_line: str
    headers: HeaderList
    body: Body

    @classmethod
    def parse(
        cls,
        stream: BinaryIO,
        decoders: Optional[Mapping[str, Decoder]] = None,
    ) -> "ResponseMessage":
        """
        Parse a response from the stream.

        Args:
            stream: Binary stream positioned at the status line.
            decoders: Content decoders; the zlib/brotli defaults if None.

        Raises:
            HTTPWireError: Any framing or decoding failure.
        """
        status_line = read_line(stream)
        logger.debug(f"Status line: {status_line}")

        headers = HeaderList.parse(stream)
        body = decode_body(headers, stream, decoders)
        logger.debug(f"Response body decoded: {len(body)} bytes")

        return cls(status_line, headers, body)

    @property
    def content_type(self) -> Optional[ContentType]:
        """
        Parsed Content-Type header, or None if absent.

        Raises:
            MissingSeparatorError: If the header value is malformed.
        """
        value = self.headers.get("Content-Type")
        return None if value is None else ContentType.parse(value)

    def text(self, default_charset: str = "utf-8") -> str:
        """Decode the body using its charset attribute, or `default_charset`."""
        content_type = self.content_type
        charset = content_type.charset if content_type is not None else None
        return self.body.data.decode(charset or default_charset)
