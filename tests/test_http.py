import io

import pytest

from labworks.http import (
    REQUEST_MAX_SIZE,
    HttpParseError,
    HttpRequest,
    end_headers,
    mime_type,
    parse_request,
    response_message,
    send_data,
    send_header,
    send_string,
    start_response,
)


class _TrickleStream:
    """Raw-style stream that accepts at most a few bytes per write."""

    def __init__(self, limit):
        self.limit = limit
        self.received = bytearray()
        self.calls = 0

    def write(self, data):
        self.calls += 1
        chunk = bytes(data[: self.limit])
        self.received.extend(chunk)
        return len(chunk)


def test_parse_simple_request():
    request = parse_request(b"GET /index.html HTTP/1.0\r\nHost: example.com\r\n\r\n")
    assert request == HttpRequest("GET", "/index.html")


def test_parse_accepts_text():
    assert parse_request("POST /report HTTP/1.1\n").method == "POST"


def test_parse_path_without_version():
    assert parse_request(b"GET /files\n").path == "/files"


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"get /index.html HTTP/1.0\r\n",
        b"GET/index.html HTTP/1.0\r\n",
        b"GET  HTTP/1.0\r\n",
        b"GET /index.html HTTP/1.0",
        b"GET /index.html\0 HTTP/1.0\r\n",
    ],
)
def test_parse_errors(raw):
    with pytest.raises(HttpParseError):
        parse_request(raw)


def test_parse_ignores_bytes_beyond_limit():
    raw = b"GET /" + b"a" * REQUEST_MAX_SIZE + b"\n"
    with pytest.raises(HttpParseError):
        parse_request(raw)


def test_response_messages():
    assert response_message(200) == "200 OK"
    assert response_message(404) == "Error 404: Not Found"
    assert response_message(403) == "Error 403: Forbidden"
    assert response_message(418) == "Error 500: Internal Server Error"


def test_response_writing():
    stream = io.BytesIO()
    start_response(stream, 200)
    send_header(stream, "Content-Type", "text/html")
    end_headers(stream)
    send_string(stream, "<html></html>")
    assert stream.getvalue() == (
        b"HTTP/1.0 200 200 OK\r\nContent-Type: text/html\r\n\r\n<html></html>"
    )


def test_send_data_retries_partial_writes():
    stream = _TrickleStream(limit=3)
    payload = bytes(range(50))
    send_data(stream, payload)
    assert bytes(stream.received) == payload
    assert stream.calls > 1


@pytest.mark.parametrize(
    "name,expected",
    [
        ("index.html", "text/html"),
        ("page.htm", "text/html"),
        ("photo.jpg", "image/jpeg"),
        ("photo.jpeg", "image/jpeg"),
        ("/filter/cat.bmp", "image/bmp"),
        ("logo.png", "image/png"),
        ("style.css", "text/css"),
        ("app.js", "application/javascript"),
        ("paper.pdf", "application/pdf"),
        ("notes.txt", "text/plain"),
        ("README", "text/plain"),
        ("archive.tar.html", "text/html"),
    ],
)
def test_mime_type(name, expected):
    assert mime_type(name) == expected