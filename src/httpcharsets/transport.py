"""
Transports that deliver rendered requests
"""

import io
import logging
from collections.abc import Callable
from typing import Protocol

import requests

from httpcharsets.headers import Headers
from httpcharsets.messages import HttpRequestData, HttpResponse

__all__ = ["DEFAULT_TIMEOUT", "MockTransport", "RequestsTransport", "Transport"]

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 20


class Transport(Protocol):
    def send(self, request: HttpRequestData) -> HttpResponse: ...

    def close(self) -> None: ...


class MockTransport:
    """Answer every request with ``handler(request)``, without touching the network."""

    def __init__(self, handler: Callable[[HttpRequestData], HttpResponse]):
        self.handler = handler

    def send(self, request: HttpRequestData) -> HttpResponse:
        response = self.handler(request)
        if response.request is None:
            response.request = request
        return response

    def close(self):
        pass


class RequestsTransport:
    """
    Send requests with a ``requests.Session``.

    The body is read completely before the response is handed back, so
    response interceptors always see a fully received stream.
    """

    def __init__(self, session: requests.Session | None = None, timeout: float = DEFAULT_TIMEOUT):
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, request: HttpRequestData) -> HttpResponse:
        logger.debug("%s %s", request.method, request.url)
        response = self.session.request(
            method=request.method,
            url=request.url,
            headers=dict(request.headers.items()),
            data=request.body,
            timeout=self.timeout,
        )
        return HttpResponse(
            status=response.status_code,
            headers=Headers(response.headers),
            content=io.BytesIO(response.content),
            request=request,
        )

    def close(self):
        if self._owns_session:
            self.session.close()
