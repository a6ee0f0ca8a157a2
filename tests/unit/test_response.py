"""
Unit tests for HTTP response parsing.
"""

import gzip

import pytest

from httpwire.http.errors import (
    InvalidChunkLengthError,
    MalformedHeaderError,
    MissingSeparatorError,
    TruncatedStreamError,
    UnsupportedContentEncodingError,
)
from httpwire.http.headers import HeaderList
from httpwire.http.response import ResponseMessage


class TestResponseParse:
    """Tests for ResponseMessage.parse()."""

    def test_parse_simple(self, make_stream):
        response = ResponseMessage.parse(make_stream(b"200 OK\r\nContent-Length: 2\r\n\r\nhi"))

        assert response.status_line == "200 OK"
        assert response.headers == HeaderList([("Content-Length", "2")])
        assert str(response.headers) == "[Content-Length=2]"
        assert bytes(response.body) == b"hi"

    def test_status_line_is_opaque(self, make_stream):
        raw = b"HTTP/1.1 404 Not Found\r\nContent-Length: 0\r\n\r\n"
        response = ResponseMessage.parse(make_stream(raw))

        assert response.status_line == "HTTP/1.1 404 Not Found"
        assert len(response.body) == 0

    def test_parse_chunked(self, make_stream, sample_chunked_response):
        response = ResponseMessage.parse(make_stream(sample_chunked_response))

        assert response.headers.get("Transfer-Encoding") == "chunked"
        assert bytes(response.body) == b"Wikipedia"

    def test_parse_gzip(self, make_stream):
        payload = gzip.compress(b"<html>compressed</html>")
        raw = (
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Type: text/html; charset=UTF-8\r\n"
            b"Content-Encoding: gzip\r\n"
            + f"Content-Length: {len(payload)}\r\n".encode()
            + b"\r\n"
            + payload
        )
        response = ResponseMessage.parse(make_stream(raw))

        assert response.text() == "<html>compressed</html>"

    def test_injected_decoders(self, make_stream, recording_decoder):
        raw = b"200 OK\r\nContent-Encoding: br\r\nContent-Length: 3\r\n\r\nxyz"
        response = ResponseMessage.parse(make_stream(raw), {"br": recording_decoder})

        assert recording_decoder.calls == [b"xyz"]
        assert bytes(response.body) == b"decoded"

    def test_one_byte_reads(self, trickle_stream, sample_chunked_response):
        response = ResponseMessage.parse(trickle_stream(sample_chunked_response))
        assert bytes(response.body) == b"Wikipedia"


class TestResponseErrors:
    """Errors from each step propagate unchanged."""

    def test_empty_stream(self, make_stream):
        with pytest.raises(TruncatedStreamError):
            ResponseMessage.parse(make_stream(b""))

    def test_truncated_header_block(self, make_stream):
        with pytest.raises(TruncatedStreamError):
            ResponseMessage.parse(make_stream(b"200 OK\r\nContent-Length: 2\r\n"))

    def test_malformed_header(self, make_stream):
        with pytest.raises(MalformedHeaderError) as exc_info:
            ResponseMessage.parse(make_stream(b"200 OK\r\nX-Test\r\n\r\n"))

        assert exc_info.value.line == "X-Test"

    def test_truncated_body(self, make_stream):
        with pytest.raises(TruncatedStreamError):
            ResponseMessage.parse(make_stream(b"200 OK\r\nContent-Length: 5\r\n\r\nhell"))

    def test_bad_chunk(self, make_stream):
        raw = b"200 OK\r\nTransfer-Encoding: chunked\r\n\r\nG\r\n"

        with pytest.raises(InvalidChunkLengthError):
            ResponseMessage.parse(make_stream(raw))

    def test_unsupported_content_encoding(self, make_stream):
        raw = b"200 OK\r\nContent-Encoding: compress\r\nContent-Length: 1\r\n\r\nx"

        with pytest.raises(UnsupportedContentEncodingError):
            ResponseMessage.parse(make_stream(raw))


class TestResponseHelpers:
    """Tests for content_type and text()."""

    def _response(self, make_stream, content_type: bytes, body: bytes) -> ResponseMessage:
        raw = (
            b"200 OK\r\n"
            + (b"Content-Type: " + content_type + b"\r\n" if content_type else b"")
            + f"Content-Length: {len(body)}\r\n".encode()
            + b"\r\n"
            + body
        )
        return ResponseMessage.parse(make_stream(raw))

    def test_content_type(self, make_stream):
        response = self._response(make_stream, b"text/html; charset=UTF-8", b"")

        assert response.content_type.media_type == "text/html"
        assert response.content_type.charset == "UTF-8"

    def test_content_type_absent(self, make_stream):
        response = self._response(make_stream, b"", b"")
        assert response.content_type is None

    def test_content_type_malformed(self, make_stream):
        response = self._response(make_stream, b"html", b"")

        with pytest.raises(MissingSeparatorError):
            response.content_type

    def test_text_uses_charset(self, make_stream):
        response = self._response(make_stream, b"text/html; charset=ISO-8859-1", b"caf\xe9")
        assert response.text() == "café"

    def test_text_default_charset(self, make_stream):
        response = self._response(make_stream, b"text/html", "café".encode("utf-8"))
        assert response.text() == "café"
