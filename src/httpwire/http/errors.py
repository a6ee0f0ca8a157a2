"""
=============================================================================
HTTP FRAMING ERRORS
=============================================================================

Every failure the framing engine can report, as one exception hierarchy.

    HTTPWireError
    ├── TruncatedStreamError              stream ended too early
    ├── MalformedHeaderError              header line without ": "
    ├── MissingHeaderError                required header absent
    ├── InvalidHeaderValueError           header value is not an integer
    ├── InvalidChunkLengthError           chunk-size line is not hex
    ├── ChunkFramingError                 chunk data not followed by CRLF
    ├── UnsupportedTransferEncodingError  unknown Transfer-Encoding
    ├── UnsupportedContentEncodingError   unknown Content-Encoding
    ├── ContentDecodingError              codec rejected the body
    ├── MissingSeparatorError             Content-Type grammar violated
    └── UnencodableTextError              text not single-byte encodable

Errors are fatal to the current parse/serialize call. Nothing inside the
package catches them: they surface unchanged to whoever called
ResponseMessage.parse() or RequestMessage.serialize().

Each error keeps the offending input as attributes (line, name, value, ...)
so callers can log precise diagnostics without re-parsing the message.

=============================================================================
"""

from typing import Optional


class HTTPWireError(Exception):
    """Base class for all framing and decoding errors."""


class TruncatedStreamError(HTTPWireError):
    """
    The stream reached end-of-data before a delimiter or byte count
    was satisfied.

    Attributes:
        expected: Number of bytes that were required (None for line reads).
        received: Number of bytes actually read before the stream ended.
    """

    def __init__(self, message: str, expected: Optional[int] = None, received: int = 0):
        super().__init__(message)
        self.expected = expected
        self.received = received


class MalformedHeaderError(HTTPWireError):
    """A header line lacks the ": " separator."""

    def __init__(self, line: str):
        super().__init__(f"Malformed header line: {line!r}")
        self.line = line


class MissingHeaderError(HTTPWireError):
    """A required header is absent."""

    def __init__(self, name: str):
        super().__init__(f"Missing required header: {name}")
        self.name = name


class InvalidHeaderValueError(HTTPWireError, ValueError):
    """A header value expected to be an integer is not one."""

    def __init__(self, name: str, value: str):
        super().__init__(f"Invalid integer value for header {name}: {value!r}")
        self.name = name
        self.value = value


class InvalidChunkLengthError(HTTPWireError):
    """A chunk-size line is not a valid hexadecimal length."""

    def __init__(self, line: str):
        super().__init__(f"Invalid chunk length: {line!r}")
        self.line = line


class ChunkFramingError(HTTPWireError):
    """The line following a chunk's data is not empty."""

    def __init__(self, line: str):
        super().__init__(f"Chunk data not terminated by CRLF, found: {line!r}")
        self.line = line


class UnsupportedTransferEncodingError(HTTPWireError):
    """Transfer-Encoding names a coding we cannot frame."""

    def __init__(self, encoding: str):
        super().__init__(f"Unsupported transfer encoding: {encoding}")
        self.encoding = encoding


class UnsupportedContentEncodingError(HTTPWireError):
    """Content-Encoding names a coding we cannot decode."""

    def __init__(self, encoding: str):
        super().__init__(f"Unsupported content encoding: {encoding}")
        self.encoding = encoding


class ContentDecodingError(HTTPWireError):
    """A decompression capability rejected its input."""

    def __init__(self, encoding: str, reason: str):
        super().__init__(f"Cannot decode {encoding} content: {reason}")
        self.encoding = encoding


class MissingSeparatorError(HTTPWireError):
    """A Content-Type value lacks a required separator character."""

    def __init__(self, source: str, separator: str):
        super().__init__(f"Separator {separator!r} not found in {source!r}")
        self.source = source
        self.separator = separator


class UnencodableTextError(HTTPWireError, ValueError):
    """Text contains characters outside the single-byte range 0-255."""

    def __init__(self, text: str):
        super().__init__(f"Text is not single-byte encodable: {text!r}")
        self.text = text
