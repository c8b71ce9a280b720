"""
Outgoing request bodies
"""

from httpcharsets.charsets import Charset, Charsets
from httpcharsets.headers import ContentType

__all__ = ["ByteArrayContent", "OutgoingContent", "TextContent"]


class OutgoingContent:
    """A request body that knows its own Content-Type."""

    content_type: ContentType | None = None

    def to_bytes(self) -> bytes:
        raise NotImplementedError


class TextContent(OutgoingContent):
    """
    Text encoded with ``charset``, or the charset of its content type (UTF-8 when
    neither is given).

    Encoding happens on construction so that unrepresentable characters fail
    before anything is sent.

    Raises:
        UnencodableText: If the charset cannot represent ``text``
    """

    def __init__(self, text: str, content_type: ContentType, charset: Charset | None = None):
        self.text = text
        self.charset = charset or content_type.charset() or Charsets.UTF_8
        self.content_type = content_type.with_charset(self.charset) if charset else content_type
        self._bytes = self.charset.encode(text)

    def to_bytes(self) -> bytes:
        return self._bytes

    def __repr__(self):
        return f"TextContent({self.text!r}, {str(self.content_type)!r})"


class ByteArrayContent(OutgoingContent):
    def __init__(self, data: bytes, content_type: ContentType | None = ContentType.OCTET_STREAM):
        self.data = bytes(data)
        self.content_type = content_type

    def to_bytes(self) -> bytes:
        return self.data

    def __repr__(self):
        return f"ByteArrayContent({len(self.data)} bytes, {str(self.content_type)!r})"
