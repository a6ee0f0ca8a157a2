"""
=============================================================================
BODY DECODING (TRANSFER + CONTENT)
=============================================================================

Pulls the body off the stream and undoes any compression, in two
independent passes:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      BODY DECODING PIPELINE                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   stream (after header block)                                       │
    │      │                                                               │
    │      ▼                                                               │
    │   ┌──────────────────────────────┐                                   │
    │   │ TRANSFER DECODING            │   How are the bytes FRAMED?      │
    │   │  identity → Content-Length   │                                   │
    │   │  chunked  → hex-sized chunks │                                   │
    │   └──────────────┬───────────────┘                                   │
    │                  ▼                                                   │
    │   ┌──────────────────────────────┐                                   │
    │   │ CONTENT DECODING             │   How are the bytes COMPRESSED?  │
    │   │  identity → unchanged        │                                   │
    │   │  deflate / gzip → zlib       │                                   │
    │   │  br → brotli                 │                                   │
    │   └──────────────┬───────────────┘                                   │
    │                  ▼                                                   │
    │                Body                                                  │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
CHUNKED FRAMING
=============================================================================

    4\r\n            ← chunk size in HEX
    Wiki\r\n         ← exactly 4 bytes, then an EMPTY line
    5\r\n
    pedia\r\n
    0\r\n            ← zero-size chunk ends the body
    \r\n             ← its (empty) data line; no trailer headers

Chunk extensions ("4;name=value") and trailer headers are not supported:
the former fail as an invalid chunk length, the latter as a framing error.

=============================================================================
HEADER COMBINATIONS
=============================================================================

    Transfer-Encoding   Content-Encoding   Result
    ─────────────────   ────────────────   ─────────────────────────────────
    present             present            transfer-decode, then decompress
    present             absent             transfer-decode only
    absent              present            Content-Length read, decompress
    absent              absent             Content-Length read only

Content-Length is REQUIRED whenever identity transfer decoding runs.
There is no read-until-close fallback.

=============================================================================
DECOMPRESSION CAPABILITIES
=============================================================================

Codecs are injected as a mapping of encoding name → callable(bytes) → bytes.
DEFAULT_DECODERS uses zlib and brotli; tests can pass their own mapping to
simulate codec failures. The legacy "compress" coding is not supported.

=============================================================================
"""

import gzip
import logging
import re
import zlib
from typing import BinaryIO, Callable, List, Mapping, Optional

import brotli

from .body import Body
from .errors import (
    ChunkFramingError,
    ContentDecodingError,
    InvalidChunkLengthError,
    InvalidHeaderValueError,
    UnsupportedContentEncodingError,
    UnsupportedTransferEncodingError,
)
from .headers import HeaderList
from .stream import read_exact, read_line


logger = logging.getLogger(__name__)


Decoder = Callable[[bytes], bytes]

TRANSFER_ENCODING = "Transfer-Encoding"
CONTENT_ENCODING = "Content-Encoding"
CONTENT_LENGTH = "Content-Length"

IDENTITY = "identity"
CHUNKED = "chunked"

# Chunk sizes must fit a signed 32-bit length
HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")
MAX_CHUNK_SIZE = 0x7FFFFFFF


# =============================================================================
# DECOMPRESSION CAPABILITIES
# =============================================================================

def _is_zlib_header(data: bytes) -> bool:
    """
    Check for an RFC 1950 zlib header.

    CMF byte: low nibble 8 (DEFLATE). CMF*256 + FLG must be divisible by 31.
    """
    if len(data) < 2:
        return False
    cmf, flg = data[0], data[1]
    return (cmf & 0x0F) == 8 and (cmf * 256 + flg) % 31 == 0


def inflate(data: bytes) -> bytes:
    """
    Decode "deflate" content.

    RFC 9110 says "deflate" means a zlib stream, but many servers send a
    bare DEFLATE stream. The two are told apart by the zlib header.

    Raises:
        ContentDecodingError: If the data is invalid, truncated, or has
                              trailing bytes after the compressed stream.
    """
    wbits = zlib.MAX_WBITS if _is_zlib_header(data) else -zlib.MAX_WBITS
    decompressor = zlib.decompressobj(wbits)
    try:
        result = decompressor.decompress(data) + decompressor.flush()
    except zlib.error as e:
        raise ContentDecodingError("deflate", str(e)) from e

    if not decompressor.eof:
        raise ContentDecodingError("deflate", "truncated stream")
    if decompressor.unused_data:
        raise ContentDecodingError(
            "deflate", f"{len(decompressor.unused_data)} trailing bytes"
        )
    return result


def gunzip(data: bytes) -> bytes:
    """Decode "gzip" content (RFC 1952)."""
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise ContentDecodingError("gzip", str(e)) from e


def unbrotli(data: bytes) -> bytes:
    """Decode "br" content (RFC 7932)."""
    try:
        return brotli.decompress(data)
    except brotli.error as e:
        raise ContentDecodingError("br", str(e)) from e


DEFAULT_DECODERS: Mapping[str, Decoder] = {
    "deflate": inflate,
    "gzip": gunzip,
    "br": unbrotli,
}


# =============================================================================
# TRANSFER DECODING
# =============================================================================

def read_identity(headers: HeaderList, stream: BinaryIO) -> bytes:
    """
    Read exactly Content-Length bytes.

    Raises:
        MissingHeaderError: If Content-Length is absent.
        InvalidHeaderValueError: If it is not a non-negative integer.
        TruncatedStreamError: If the stream ends early.
    """
    length = headers.require_int(CONTENT_LENGTH)
    if length < 0:
        raise InvalidHeaderValueError(CONTENT_LENGTH, headers.require(CONTENT_LENGTH))

    logger.debug(f"Reading identity body of {length} bytes")
    return read_exact(stream, length)


def parse_chunk_size(line: str) -> int:
    """Parse a chunk-size line as bare hexadecimal."""
    if not HEX_PATTERN.fullmatch(line):
        raise InvalidChunkLengthError(line)

    size = int(line, 16)
    if size > MAX_CHUNK_SIZE:
        raise InvalidChunkLengthError(line)
    return size


def read_chunked(stream: BinaryIO) -> bytes:
    """
    Read a chunked body up to and including its zero-size chunk.

    Raises:
        InvalidChunkLengthError: If a size line is not valid hex.
        ChunkFramingError: If chunk data is not followed by an empty line.
        TruncatedStreamError: If the stream ends early.
    """
    chunks: List[bytes] = []
    while True:
        size = parse_chunk_size(read_line(stream))
        data = read_exact(stream, size)

        suffix = read_line(stream)
        if suffix:
            raise ChunkFramingError(suffix)

        logger.debug(f"Read chunk of {size} bytes")
        if size == 0:
            return b"".join(chunks)
        chunks.append(data)


def decode_transfer(encoding: str, headers: HeaderList, stream: BinaryIO) -> bytes:
    """Dispatch on the Transfer-Encoding value."""
    if encoding == IDENTITY:
        return read_identity(headers, stream)
    if encoding == CHUNKED:
        return read_chunked(stream)
    raise UnsupportedTransferEncodingError(encoding)


# =============================================================================
# CONTENT DECODING
# =============================================================================

def decode_content(
    encoding: str,
    data: bytes,
    decoders: Optional[Mapping[str, Decoder]] = None,
) -> bytes:
    """
    Undo the Content-Encoding named by `encoding`.

    Args:
        encoding: Content-Encoding value ("identity", "deflate", "gzip", "br").
        data: Transfer-decoded bytes.
        decoders: Decompression capabilities; DEFAULT_DECODERS if None.

    Raises:
        UnsupportedContentEncodingError: If no decoder handles `encoding`.
        ContentDecodingError: If the decoder rejects the data.
    """
    if encoding == IDENTITY:
        return data

    if decoders is None:
        decoders = DEFAULT_DECODERS

    decoder = decoders.get(encoding)
    if decoder is None:
        raise UnsupportedContentEncodingError(encoding)

    result = decoder(data)
    logger.debug(f"Decoded {encoding} content: {len(data)} -> {len(result)} bytes")
    return result


def decode_body(
    headers: HeaderList,
    stream: BinaryIO,
    decoders: Optional[Mapping[str, Decoder]] = None,
) -> Body:
    """
    Read and decode the message body that follows `headers` on `stream`.

    =====================================================================
    ALGORITHM
    =====================================================================

    1. Transfer-Encoding present? Frame by its value (identity/chunked).
       Otherwise frame by Content-Length.
    2. Content-Encoding present? Decompress the framed bytes.
    3. Wrap as an immutable Body.

    =====================================================================
    """
    transfer = headers.get(TRANSFER_ENCODING)
    content = headers.get(CONTENT_ENCODING)
    logger.debug(f"Decoding body: transfer={transfer or IDENTITY}, content={content or IDENTITY}")

    data = decode_transfer(transfer if transfer is not None else IDENTITY, headers, stream)
    if content is not None:
        data = decode_content(content, data, decoders)

    return Body(data)
