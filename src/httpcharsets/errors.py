"""
Exceptions raised by httpcharsets
"""


class CharsetError(Exception):
    """Base class for every error raised by this package."""


class UnsupportedCharset(CharsetError, LookupError):
    """No Python codec exists for the requested charset name."""

    def __init__(self, name: str):
        super().__init__(f"Unsupported charset '{name}'")
        self.name = name


class InvalidQuality(CharsetError, ValueError):
    """A charset quality outside of [0.0, 1.0] was registered."""

    def __init__(self, charset, quality):
        super().__init__(f"Invalid quality {quality!r} for charset {charset}: must be in [0.0, 1.0]")
        self.charset = charset
        self.quality = quality


class UnencodableText(CharsetError, ValueError):
    """Outgoing text contains characters the target charset cannot represent."""

    def __init__(self, charset, reason: str):
        super().__init__(f"Text cannot be encoded as {charset}: {reason}")
        self.charset = charset
        self.reason = reason


class DecodingError(CharsetError, ValueError):
    """Incoming bytes are not valid for the resolved charset."""

    def __init__(self, charset, reason: str):
        super().__init__(f"Body cannot be decoded as {charset}: {reason}")
        self.charset = charset
        self.reason = reason


class NoTransformationFound(CharsetError, TypeError):
    def __init__(self, expected_type: type, actual):
        super().__init__(
            f"No transformation found: {type(actual).__name__} -> {expected_type.__name__}"
        )
        self.expected_type = expected_type
        self.actual = actual
