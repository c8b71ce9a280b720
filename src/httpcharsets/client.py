"""
A minimal HTTP client that runs the request and response pipelines around a transport
"""

import logging
from collections.abc import Mapping
from typing import Any

from httpcharsets.content import OutgoingContent
from httpcharsets.errors import NoTransformationFound
from httpcharsets.headers import CONTENT_TYPE, Headers
from httpcharsets.messages import (
    HttpRequestBuilder,
    HttpRequestData,
    HttpResponseContainer,
    is_byte_stream,
    read_remaining,
)
from httpcharsets.pipeline import RequestPipeline, ResponsePipeline
from httpcharsets.plaintext import HttpPlainText, HttpPlainTextConfig
from httpcharsets.transport import Transport

__all__ = ["HttpClient"]

logger = logging.getLogger(__name__)


class HttpClient:
    """
    HTTP client with plain text charset support.

    Args:
        transport: Where rendered requests are sent
        plain_text: Charset configuration. ``None`` installs the defaults
                    (accept only the fallback charset, send UTF-8); ``False``
                    leaves the plain text feature out.

    Examples:
        >>> config = HttpPlainTextConfig().register(Charsets.UTF_8).register(Charsets.ISO_8859_1, quality=0.1)
        >>> with HttpClient(RequestsTransport(), plain_text=config) as client:
        ...     text = client.get("https://example.com/", expect=str)
    """

    def __init__(self, transport: Transport, *, plain_text: HttpPlainTextConfig | None | bool = None):
        self.transport = transport
        self.request_pipeline = RequestPipeline()
        self.response_pipeline = ResponsePipeline()
        self.plain_text: HttpPlainText | None = None
        if plain_text is not False:
            config = plain_text if isinstance(plain_text, HttpPlainTextConfig) else None
            self.plain_text = HttpPlainText.prepare(config)
            self.plain_text.install(self)

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        expect: type = bytes,
    ) -> Any:
        """
        Run ``body`` through the request pipeline, send it, and turn the response into ``expect``.

        Raises:
            UnencodableText: If a text body cannot be encoded; nothing is sent
            DecodingError: If ``expect`` is str and the body is invalid in the response charset
            NoTransformationFound: If no interceptor produced an ``expect`` value
        """
        builder = HttpRequestBuilder(method.upper(), url, Headers(headers), body)
        builder.body = self.request_pipeline.execute(builder, builder.body)
        request = self._render(builder)

        response = self.transport.send(request)
        logger.debug("%s %s -> %s", request.method, request.url, response.status)

        container = self.response_pipeline.execute(response, HttpResponseContainer(expect, response.content))
        result = container.body
        if expect is bytes and is_byte_stream(result):
            result = read_remaining(result)
        if not isinstance(result, expect):
            raise NoTransformationFound(expect, result)
        return result

    def get(self, url: str, **kwargs) -> Any:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, body: Any = None, **kwargs) -> Any:
        return self.request("POST", url, body=body, **kwargs)

    def _render(self, builder: HttpRequestBuilder) -> HttpRequestData:
        body = builder.body
        if isinstance(body, OutgoingContent):
            if body.content_type is not None:
                builder.headers[CONTENT_TYPE] = str(body.content_type)
            payload = body.to_bytes()
        elif isinstance(body, (bytes, bytearray, memoryview)):
            payload = bytes(body)
        elif body is None:
            payload = None
        else:
            raise TypeError(f"Request body of type {type(body).__name__} was not rendered to bytes")
        return HttpRequestData(builder.method, builder.url, builder.headers, payload)

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
