"""
=============================================================================
HTTP/1.1 MESSAGE FRAMING
=============================================================================

Byte-exact framing and decoding of a single HTTP/1.1 exchange over a
caller-supplied stream.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      Request-Response Exchange                       │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   RequestMessage ──serialize()──►  stream  ──parse()──► ResponseMessage
    │                                                                      │
    │      GET / HTTP/1.1                        200 OK                    │
    │      Host: example.com                     Content-Encoding: gzip    │
    │                                            Transfer-Encoding: chunked│
    │                                            <decoded Body>            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
MODULE COMPONENTS
=============================================================================

    stream.py        CRLF line reader, exact-length reads, text encoding
    headers.py       HeaderField, HeaderList
    body.py          Body (immutable bytes + hex dump)
    decoding.py      transfer decoding (identity/chunked) and content
                     decoding (identity/deflate/gzip/br)
    content_type.py  Content-Type media type and attributes
    request.py       RequestMessage
    response.py      ResponseMessage
    errors.py        HTTPWireError and its subclasses

=============================================================================
"""

from .body import Body
from .content_type import ContentType
from .decoding import (
    DEFAULT_DECODERS,
    Decoder,
    decode_body,
    decode_content,
    gunzip,
    inflate,
    unbrotli,
)
from .errors import (
    ChunkFramingError,
    ContentDecodingError,
    HTTPWireError,
    InvalidChunkLengthError,
    InvalidHeaderValueError,
    MalformedHeaderError,
    MissingHeaderError,
    MissingSeparatorError,
    TruncatedStreamError,
    UnencodableTextError,
    UnsupportedContentEncodingError,
    UnsupportedTransferEncodingError,
)
from .headers import HeaderField, HeaderList
from .request import RequestMessage
from .response import ResponseMessage
from .stream import read_exact, read_line


__all__ = [
    # Messages
    "RequestMessage",
    "ResponseMessage",
    "HeaderField",
    "HeaderList",
    "Body",
    "ContentType",
    # Decoding
    "DEFAULT_DECODERS",
    "Decoder",
    "decode_body",
    "decode_content",
    "inflate",
    "gunzip",
    "unbrotli",
    # Stream primitives
    "read_line",
    "read_exact",
    # Errors
    "HTTPWireError",
    "TruncatedStreamError",
    "MalformedHeaderError",
    "MissingHeaderError",
    "InvalidHeaderValueError",
    "InvalidChunkLengthError",
    "ChunkFramingError",
    "UnsupportedTransferEncodingError",
    "UnsupportedContentEncodingError",
    "ContentDecodingError",
    "MissingSeparatorError",
    "UnencodableTextError",
]
