"""
pytest configuration and fixtures.
"""

import io
from typing import Callable, List

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpwire.http import HeaderList


class TrickleStream(io.RawIOBase):
    """Binary stream that returns at most one byte per read() call."""

    def __init__(self, data: bytes):
        self._source = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if size == 0:
            return b""
        return self._source.read(1)


class RecordingDecoder:
    """Decoder stub that records its input and returns a fixed result."""

    def __init__(self, result: bytes = b"decoded"):
        self.result = result
        self.calls: List[bytes] = []

    def __call__(self, data: bytes) -> bytes:
        self.calls.append(data)
        return self.result


@pytest.fixture
def make_stream() -> Callable[[bytes], io.BytesIO]:
    """Factory for in-memory streams over raw bytes."""
    return io.BytesIO


@pytest.fixture
def trickle_stream() -> Callable[[bytes], TrickleStream]:
    """Factory for streams that deliver one byte per read()."""
    return TrickleStream


@pytest.fixture
def recording_decoder() -> RecordingDecoder:
    return RecordingDecoder()


@pytest.fixture
def sample_headers() -> HeaderList:
    """Header list with a duplicated name."""
    return HeaderList([
        ("Host", "localhost:8080"),
        ("Accept-Encoding", "gzip, deflate, br"),
        ("Set-Cookie", "a=1"),
        ("Set-Cookie", "b=2"),
    ])


@pytest.fixture
def sample_chunked_response() -> bytes:
    """Chunked response carrying "Wikipedia" in two chunks."""
    return (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: text/plain\r\n"
        b"Transfer-Encoding: chunked\r\n"
        b"\r\n"
        b"4\r\nWiki\r\n"
        b"5\r\npedia\r\n"
        b"0\r\n\r\n"
    )
