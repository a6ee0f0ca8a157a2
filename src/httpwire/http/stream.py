"""
=============================================================================
STREAM PRIMITIVES
=============================================================================

Low-level helpers shared by every parser in the package. They work on any
blocking binary file object:

    read(n)      → up to n bytes, b"" ONLY at end of stream
    write(data)  → write bytes

Sockets become such objects with socket.makefile("rwb"); tests use
io.BytesIO.

=============================================================================
LINE FRAMING
=============================================================================

HTTP/1.1 lines end with CRLF:

    "Content-Length: 5\r\n"
     ─────────┬───────  ┬─
              │         └── terminator (stripped)
              └──────────── returned text

Lines are read ONE byte at a time: nothing past the CRLF is consumed,
so the next step (headers, chunk data, body) starts at the right byte.
A lone CR or a lone LF inside a line is kept verbatim: only the exact
pair CR LF ends a line. Line length is not limited.

=============================================================================
TEXT ENCODING
=============================================================================

Header and request-line text is written one byte per character
(ISO-8859-1). Characters above U+00FF cannot be sent and are rejected
with UnencodableTextError instead of being silently converted to UTF-8,
which would change byte counts seen by the peer.

=============================================================================
"""

from typing import BinaryIO

from .errors import TruncatedStreamError, UnencodableTextError


CR = 0x0D
LF = 0x0A

# One byte per character, both directions
TEXT_ENCODING = "latin-1"


def read_line(stream: BinaryIO) -> str:
    """
    Read one CRLF-terminated line.

    Args:
        stream: Binary stream positioned at the start of a line.

    Returns:
        The line text without its CRLF terminator.

    Raises:
        TruncatedStreamError: If the stream ends before CRLF is seen.
    """
    buffer = bytearray()
    while True:
        byte = stream.read(1)
        if not byte:
            raise TruncatedStreamError(
                f"Stream ended before end of line ({len(buffer)} bytes buffered)",
                received=len(buffer),
            )
        if byte[0] == LF and buffer and buffer[-1] == CR:
            del buffer[-1]
            return buffer.decode(TEXT_ENCODING)
        buffer += byte


def read_exact(stream: BinaryIO, length: int) -> bytes:
    """
    Read exactly `length` bytes.

    A single read() may return fewer bytes than asked for (sockets
    deliver whatever has arrived), so we loop until the count is met.

    Raises:
        TruncatedStreamError: If the stream ends before `length` bytes.
    """
    if length == 0:
        return b""

    buffer = bytearray()
    while len(buffer) < length:
        chunk = stream.read(length - len(buffer))
        if not chunk:
            raise TruncatedStreamError(
                f"Stream ended after {len(buffer)} of {length} bytes",
                expected=length,
                received=len(buffer),
            )
        buffer += chunk
    return bytes(buffer)


def encode_text(text: str) -> bytes:
    """Encode text one byte per character, rejecting anything above U+00FF."""
    try:
        return text.encode(TEXT_ENCODING)
    except UnicodeEncodeError as e:
        raise UnencodableTextError(text) from e


def write_text(stream: BinaryIO, text: str) -> None:
    """Write text to the stream using the single-byte wire encoding."""
    stream.write(encode_text(text))
