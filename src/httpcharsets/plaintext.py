"""
Plain text charset negotiation: Accept-Charset, request encoding and response decoding
"""

import logging
import math

from httpcharsets.charsets import Charset, Charsets
from httpcharsets.content import TextContent
from httpcharsets.errors import InvalidQuality
from httpcharsets.headers import ACCEPT_CHARSET, CONTENT_TYPE, ContentType
from httpcharsets.messages import HttpResponseContainer, is_byte_stream, read_remaining
from httpcharsets.pipeline import UNCHANGED, Replaced, RequestPipeline, ResponsePipeline

__all__ = [
    "HttpPlainText",
    "HttpPlainTextConfig",
    "build_accept_charset",
    "choose_send_charset",
    "format_quality",
]

logger = logging.getLogger(__name__)


def _as_charset(charset: Charset | str) -> Charset:
    return charset if isinstance(charset, Charset) else Charset.for_name(charset)


class HttpPlainTextConfig:
    """
    Charsets the client accepts, with optional quality weights.

    Examples:
        >>> config = HttpPlainTextConfig().register(Charsets.UTF_8).register("iso-8859-1", quality=0.1)
        >>> HttpPlainText.prepare(config).accept_charset_header
        'UTF-8,ISO-8859-1;q=0.10'
    """

    def __init__(self):
        self.accept_charsets: set[Charset] = set()
        self.charset_quality: dict[Charset, float] = {}
        self._send_charset: Charset | None = None
        self._response_charset_fallback: Charset = Charsets.UTF_8

    @property
    def send_charset(self) -> Charset | None:
        """Explicit charset for outgoing text. None picks one from the registered charsets."""
        return self._send_charset

    @send_charset.setter
    def send_charset(self, charset: Charset | str | None):
        self._send_charset = None if charset is None else _as_charset(charset)

    @property
    def response_charset_fallback(self) -> Charset:
        """Charset for responses that declare none."""
        return self._response_charset_fallback

    @response_charset_fallback.setter
    def response_charset_fallback(self, charset: Charset | str):
        self._response_charset_fallback = _as_charset(charset)

    def register(self, charset: Charset | str, quality: float | None = None) -> "HttpPlainTextConfig":
        """
        Accept ``charset``, optionally weighted by ``quality``.

        Registering again with ``quality=None`` drops any weight stored earlier.

        Raises:
            InvalidQuality: If ``quality`` is not within [0.0, 1.0]
            UnsupportedCharset: If ``charset`` is a name Python has no codec for
        """
        charset = _as_charset(charset)
        if quality is not None and not 0.0 <= quality <= 1.0:
            raise InvalidQuality(charset, quality)

        self.accept_charsets.add(charset)
        if quality is None:
            self.charset_quality.pop(charset, None)
        else:
            self.charset_quality[charset] = float(quality)
        return self


def format_quality(quality: float) -> str:
    """
    Render a quality with two fraction digits, rounding half up at the hundredths.

    Examples:
        >>> format_quality(0.555)
        '0.56'
        >>> format_quality(0.004)
        '0.00'
    """
    hundredths = math.floor(quality * 100 + 0.5)
    return f"{hundredths // 100}.{hundredths % 100:02d}"


def _split(accept, quality):
    unweighted = sorted((c for c in accept if c not in quality), key=lambda c: c.name)
    weighted = sorted(
        ((c, q) for c, q in quality.items() if c in accept),
        key=lambda item: (-item[1], item[0].name),
    )
    return unweighted, weighted


def build_accept_charset(accept, quality, fallback: Charset) -> str:
    """
    Build the Accept-Charset value: unweighted names alphabetically, then
    weighted ones by descending quality (name breaks ties). Weights for
    charsets that are not accepted are ignored.

    Returns:
        str: e.g. ``"UTF-8,ISO-8859-1;q=0.10"``, or the fallback name if nothing is accepted
    """
    unweighted, weighted = _split(accept, quality)
    entries = [c.name for c in unweighted]
    entries.extend(f"{c.name};q={format_quality(q)}" for c, q in weighted)
    if not entries:
        return fallback.name
    return ",".join(entries)


def choose_send_charset(accept, quality, send_charset: Charset | None = None) -> Charset:
    """
    Pick the charset for outgoing text.

    An explicit ``send_charset`` wins, then the first unweighted charset, then
    the best weighted one, then UTF-8. Unweighted charsets are preferred even
    over a weighted charset of quality 1.0.
    """
    if send_charset is not None:
        return send_charset
    unweighted, weighted = _split(accept, quality)
    if unweighted:
        return unweighted[0]
    if weighted:
        return weighted[0][0]
    return Charsets.UTF_8


class HttpPlainText:
    """
    Encodes ``str`` request bodies and decodes responses to ``str``.

    Instances are immutable and safe to share between concurrent requests.
    Build one from a config with ``prepare`` and attach it to a client with
    ``install``.
    """

    __slots__ = ("accept_charset_header", "request_charset", "response_charset_fallback")

    def __init__(self, accept_charsets, charset_quality, send_charset, response_charset_fallback):
        accept = frozenset(accept_charsets)
        quality = dict(charset_quality)
        for charset, value in quality.items():
            if not 0.0 <= value <= 1.0:
                raise InvalidQuality(charset, value)

        object.__setattr__(self, "response_charset_fallback", response_charset_fallback)
        object.__setattr__(
            self, "accept_charset_header", build_accept_charset(accept, quality, response_charset_fallback)
        )
        object.__setattr__(self, "request_charset", choose_send_charset(accept, quality, send_charset))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self):
        return (
            f"HttpPlainText(accept_charset_header={self.accept_charset_header!r}, "
            f"request_charset={self.request_charset}, "
            f"response_charset_fallback={self.response_charset_fallback})"
        )

    @classmethod
    def prepare(cls, config: HttpPlainTextConfig | None = None) -> "HttpPlainText":
        config = config or HttpPlainTextConfig()
        return cls(
            config.accept_charsets,
            config.charset_quality,
            config.send_charset,
            config.response_charset_fallback,
        )

    def install(self, client):
        client.request_pipeline.intercept(RequestPipeline.RENDER, self.render)
        client.response_pipeline.intercept(ResponsePipeline.PARSE, self.parse)
        logger.info("Installed plain text charsets: Accept-Charset=%s", self.accept_charset_header)

    def add_charset_headers(self, request):
        if request.headers.set_if_absent(ACCEPT_CHARSET, self.accept_charset_header):
            logger.debug("Added Accept-Charset: %s", self.accept_charset_header)

    def wrap_content(self, content: str, content_charset: Charset | None) -> TextContent:
        charset = content_charset or self.request_charset
        return TextContent(content, ContentType.TEXT_PLAIN, charset)

    def read(self, response, body) -> str:
        """
        Decode a fully received body with the response charset, or the fallback.

        Raises:
            DecodingError: If ``body`` is not valid in the resolved charset
        """
        actual_charset = response.charset() if response is not None else None
        if actual_charset is None:
            logger.debug("No usable response charset, falling back to %s", self.response_charset_fallback)
            actual_charset = self.response_charset_fallback
        return actual_charset.decode(read_remaining(body))

    def render(self, request, content):
        """Request pipeline interceptor for the render phase."""
        self.add_charset_headers(request)

        if not isinstance(content, str):
            return UNCHANGED

        declared = request.headers.get(CONTENT_TYPE)
        content_type = ContentType.parse(declared)
        if declared and content_type is None:
            return UNCHANGED
        if content_type is not None and not content_type.match(ContentType.TEXT_PLAIN):
            return UNCHANGED

        content_charset = content_type.charset() if content_type else None
        wrapped = self.wrap_content(content, content_charset)
        logger.debug("Encoded text body as %s", wrapped.charset)
        return Replaced(wrapped)

    def parse(self, response, container: HttpResponseContainer):
        """Response pipeline interceptor for the parse phase."""
        if container.expected_type is not str or not is_byte_stream(container.body):
            return UNCHANGED
        text = self.read(response, container.body)
        return Replaced(HttpResponseContainer(container.expected_type, text))
