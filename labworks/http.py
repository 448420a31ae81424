"""A minimal HTTP/1.0 request parser and response writer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

REQUEST_MAX_SIZE = 8192
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

_MESSAGES = {
    100: "100 Continue",
    200: "200 OK",
    301: "Redirection 301: Moved Permanently",
    400: "Error 400: Bad Request",
    401: "Error 401: Unauthorized",
    403: "Error 403: Forbidden",
    404: "Error 404: Not Found",
}
_DEFAULT_MESSAGE = "Error 500: Internal Server Error"

_MIME_TYPES = {
    ".html": "text/html",
    ".htm": "text/html",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".bmp": "image/bmp",
    ".png": "image/png",
    ".css": "text/css",
    ".js": "application/javascript",
    ".pdf": "application/pdf",
}


class HttpParseError(ValueError):
    """Raised when a request line cannot be parsed."""


@dataclass(frozen=True)
class HttpRequest:
    """The method and path of a request line."""

    method: str
    path: str


def parse_request(data: bytes | str) -> HttpRequest:
    """Parse the request line from the first ``REQUEST_MAX_SIZE`` bytes of ``data``."""
    if isinstance(data, str):
        data = data.encode(_ENCODING, _ERRORS)
    text = data[:REQUEST_MAX_SIZE].split(b"\0", 1)[0].decode(_ENCODING, _ERRORS)

    end = 0
    while end < len(text) and "A" <= text[end] <= "Z":
        end += 1
    if end == 0:
        raise HttpParseError("missing request method")
    method = text[:end]

    if end >= len(text) or text[end] != " ":
        raise HttpParseError("expected a space after the method")
    start = end = end + 1

    while end < len(text) and text[end] not in " \n":
        end += 1
    if end == start:
        raise HttpParseError("missing request path")
    path = text[start:end]

    if "\n" not in text[end:]:
        raise HttpParseError("request line is not terminated")
    return HttpRequest(method, path)


def response_message(status_code: int) -> str:
    """Return the status text sent for ``status_code``."""
    return _MESSAGES.get(status_code, _DEFAULT_MESSAGE)


def send_data(stream: BinaryIO, data: bytes) -> None:
    """Write all of ``data``, retrying after partial writes."""
    view = memoryview(data)
    while view:
        written = stream.write(view)
        if written is None:
            written = len(view)
        if written <= 0:
            return
        view = view[written:]


def send_string(stream: BinaryIO, data: str) -> None:
    """Write ``data`` as encoded text."""
    send_data(stream, data.encode(_ENCODING, _ERRORS))


def start_response(stream: BinaryIO, status_code: int) -> None:
    """Write the status line."""
    send_string(stream, f"HTTP/1.0 {status_code} {response_message(status_code)}\r\n")


def send_header(stream: BinaryIO, key: str, value: str) -> None:
    """Write one header line."""
    send_string(stream, f"{key}: {value}\r\n")


def end_headers(stream: BinaryIO) -> None:
    """Write the blank line that ends the headers."""
    send_string(stream, "\r\n")


def mime_type(file_name: str) -> str:
    """Return the Content-Type for ``file_name`` judged by its last extension."""
    dot = file_name.rfind(".")
    if dot < 0:
        return "text/plain"
    return _MIME_TYPES.get(file_name[dot:], "text/plain")