"""
Request and response values passed through the pipelines
"""

import io
from dataclasses import dataclass, field
from typing import Any

from httpcharsets.charsets import Charset
from httpcharsets.headers import CONTENT_TYPE, ContentType, Headers

__all__ = ["HttpRequestBuilder", "HttpRequestData", "HttpResponse", "HttpResponseContainer"]


@dataclass
class HttpRequestBuilder:
    """Mutable request under construction. ``body`` is replaced as the request pipeline runs."""

    method: str
    url: str
    headers: Headers = field(default_factory=Headers)
    body: Any = None


@dataclass(frozen=True)
class HttpRequestData:
    """A fully rendered request, ready for a transport."""

    method: str
    url: str
    headers: Headers
    body: bytes | None


@dataclass
class HttpResponse:
    status: int
    headers: Headers = field(default_factory=Headers)
    content: Any = b""
    request: HttpRequestData | None = None

    def content_type(self) -> ContentType | None:
        return ContentType.parse(self.headers.get(CONTENT_TYPE))

    def charset(self) -> Charset | None:
        """Charset declared by the Content-Type header, or None when missing or unparseable."""
        content_type = self.content_type()
        return content_type.charset() if content_type else None


@dataclass(frozen=True)
class HttpResponseContainer:
    """The response pipeline subject: the result type the caller asked for and the body so far."""

    expected_type: type
    body: Any


def is_byte_stream(body: Any) -> bool:
    return isinstance(body, (bytes, bytearray, memoryview)) or (
        isinstance(body, io.IOBase) and body.readable() and not isinstance(body, io.TextIOBase)
    )


def read_remaining(body: Any) -> bytes:
    """Drain a bytes-like value or readable binary stream into memory."""
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body)
    return body.read()
