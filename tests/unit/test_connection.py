"""
Unit tests for the client connection helpers.
"""

import io
import socket
import threading
from contextlib import contextmanager

import pytest

from httpwire.config import ClientConfig
from httpwire.core import connection
from httpwire.core.connection import Target, build_request, exchange, fetch
from httpwire.http.headers import HeaderList


class TestTarget:
    """Tests for Target."""

    def test_from_http_url(self):
        target = Target.from_url("http://localhost/")
        assert target == Target(False, "localhost", 80, "/")

    def test_from_https_url_with_port_and_query(self):
        target = Target.from_url("https://example.com:8443/a/b?c=1")
        assert target == Target(True, "example.com", 8443, "/a/b?c=1")

    def test_empty_path_defaults_to_root(self):
        assert Target.from_url("http://example.com").path == "/"

    def test_str(self):
        assert str(Target(True, "example.com", 443, "/x")) == "https://example.com:443/x"
        assert str(Target(False, "localhost", 80, "/")) == "http://localhost:80/"

    def test_host_header(self):
        assert Target(False, "localhost", 8080).host_header == "localhost:8080"

    def test_ipv6_host_is_bracketed(self):
        target = Target.from_url("http://[::1]:8080/")

        assert target.host == "::1"
        assert target.host_header == "[::1]:8080"
        assert str(target) == "http://[::1]:8080/"

    def test_ipv6_host_in_default_request(self):
        request = build_request(Target.from_url("https://[2001:db8::1]/"))

        assert b"Host: [2001:db8::1]:443\r\n" in request.to_bytes()

    @pytest.mark.parametrize("url", ["ftp://example.com/", "localhost/", "http:///path"])
    def test_invalid_urls(self, url):
        with pytest.raises(ValueError):
            Target.from_url(url)


class TestBuildRequest:
    """Tests for the default request."""

    def test_default_request(self):
        request = build_request(Target(False, "localhost", 80, "/index.html"))

        assert request.to_bytes() == (
            b"GET /index.html HTTP/1.1\r\n"
            b"Host: localhost:80\r\n"
            b"Accept-Encoding: gzip, deflate, br\r\n"
            b"\r\n"
        )

    def test_config_overrides(self):
        config = ClientConfig(accept_encoding="gzip", version="1.0")
        request = build_request(Target(False, "h", 81), config)

        assert request.request_line == "GET / HTTP/1.0"
        assert request.headers == HeaderList([("Host", "h:81"), ("Accept-Encoding", "gzip")])


class DuplexStream(io.BytesIO):
    """In-memory stream: reads canned response bytes, records writes."""

    def __init__(self, response: bytes):
        super().__init__(response)
        self.written = bytearray()

    def write(self, data) -> int:
        self.written += data
        return len(data)


class TestExchange:
    """Tests for exchange() and fetch()."""

    def test_exchange(self):
        stream = DuplexStream(b"200 OK\r\nContent-Length: 2\r\n\r\nhi")
        request = build_request(Target(False, "localhost", 80))

        response = exchange(stream, request)

        assert bytes(stream.written) == request.to_bytes()
        assert response.status_line == "200 OK"
        assert bytes(response.body) == b"hi"

    def test_fetch_over_socketpair(self, monkeypatch):
        client, server = socket.socketpair()
        received = bytearray()

        def serve():
            with server:
                while not received.endswith(b"\r\n\r\n"):
                    data = server.recv(1024)
                    if not data:
                        return
                    received.extend(data)
                server.sendall(
                    b"HTTP/1.1 200 OK\r\n"
                    b"Transfer-Encoding: chunked\r\n"
                    b"\r\n"
                    b"5\r\nhello\r\n0\r\n\r\n"
                )

        @contextmanager
        def fake_open_stream(target, timeout=None):
            with client, client.makefile("rwb") as stream:
                yield stream

        monkeypatch.setattr(connection, "open_stream", fake_open_stream)

        thread = threading.Thread(target=serve, daemon=True)
        thread.start()
        response = fetch(Target.from_url("http://localhost:8080/"))
        thread.join(timeout=5.0)

        assert received.startswith(b"GET / HTTP/1.1\r\nHost: localhost:8080\r\n")
        assert response.status_line == "HTTP/1.1 200 OK"
        assert bytes(response.body) == b"hello"

    def test_open_stream_closes_socket(self, monkeypatch):
        client, server = socket.socketpair()
        monkeypatch.setattr(connection.socket, "create_connection", lambda *args, **kwargs: client)

        with connection.open_stream(Target(False, "localhost", 80), timeout=1.0) as stream:
            stream.write(b"ping")
            stream.flush()

        assert server.recv(4) == b"ping"
        assert client.fileno() == -1
        server.close()
