"""
httpcharsets - Accept-Charset negotiation and plain text bodies for HTTP clients
"""

from httpcharsets.charsets import Charset, Charsets
from httpcharsets.client import HttpClient
from httpcharsets.content import ByteArrayContent, OutgoingContent, TextContent
from httpcharsets.errors import (
    CharsetError,
    DecodingError,
    InvalidQuality,
    NoTransformationFound,
    UnencodableText,
    UnsupportedCharset,
)
from httpcharsets.headers import ACCEPT_CHARSET, CONTENT_TYPE, ContentType, Headers
from httpcharsets.messages import HttpRequestBuilder, HttpRequestData, HttpResponse, HttpResponseContainer
from httpcharsets.pipeline import UNCHANGED, Pipeline, Replaced, RequestPipeline, ResponsePipeline, Unchanged
from httpcharsets.plaintext import HttpPlainText, HttpPlainTextConfig, build_accept_charset, format_quality
from httpcharsets.transport import MockTransport, RequestsTransport, Transport

__all__ = [
    "ACCEPT_CHARSET",
    "CONTENT_TYPE",
    "UNCHANGED",
    "ByteArrayContent",
    "Charset",
    "CharsetError",
    "Charsets",
    "ContentType",
    "DecodingError",
    "Headers",
    "HttpClient",
    "HttpPlainText",
    "HttpPlainTextConfig",
    "HttpRequestBuilder",
    "HttpRequestData",
    "HttpResponse",
    "HttpResponseContainer",
    "InvalidQuality",
    "MockTransport",
    "NoTransformationFound",
    "OutgoingContent",
    "Pipeline",
    "Replaced",
    "RequestPipeline",
    "RequestsTransport",
    "ResponsePipeline",
    "TextContent",
    "Transport",
    "Unchanged",
    "UnencodableText",
    "UnsupportedCharset",
    "build_accept_charset",
    "format_quality",
]
__version__ = "0.1.0"
