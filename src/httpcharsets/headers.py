"""
Header collection and Content-Type parsing
"""

from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field

from httpcharsets.charsets import Charset
from httpcharsets.errors import UnsupportedCharset

__all__ = ["ACCEPT_CHARSET", "CONTENT_TYPE", "ContentType", "Headers"]

ACCEPT_CHARSET = "Accept-Charset"
CONTENT_TYPE = "Content-Type"


class Headers(MutableMapping):
    """Case-insensitive header mapping that keeps the first-seen spelling of each name."""

    def __init__(self, values: Mapping[str, str] | None = None):
        self._store: dict[str, tuple[str, str]] = {}
        if values:
            for name, value in values.items():
                self[name] = value

    def __getitem__(self, name: str) -> str:
        return self._store[name.lower()][1]

    def __setitem__(self, name: str, value: str):
        key = name.lower()
        original = self._store[key][0] if key in self._store else name
        self._store[key] = (original, str(value))

    def __delitem__(self, name: str):
        del self._store[name.lower()]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def set_if_absent(self, name: str, value: str) -> bool:
        """Set ``name`` only when no value is present. Returns True if the value was written."""
        if name in self:
            return False
        self[name] = value
        return True

    def __repr__(self):
        return f"Headers({dict(self.items())!r})"


@dataclass(frozen=True)
class ContentType:
    """
    A parsed media type such as ``text/plain; charset=UTF-8``.

    ``content_type`` and ``subtype`` are lower-cased, parameter names are
    lower-cased, parameter values are kept as sent.
    """

    content_type: str
    subtype: str
    parameters: tuple[tuple[str, str], ...] = field(default=())

    @classmethod
    def parse(cls, value: str | None) -> "ContentType | None":
        """
        Parse a Content-Type value. Returns None if the value could not be parsed.

        Examples:
            >>> ContentType.parse("text/html; charset=UTF-8").parameter("charset")
            'UTF-8'
            >>> ContentType.parse("garbage") is None
            True
        """
        if not value:
            return None
        parts = value.split(";", 1)
        ts = parts[0].split("/", 1)
        if len(ts) != 2 or not ts[0].strip() or not ts[1].strip():
            return None
        params = []
        if len(parts) == 2:
            for clause in parts[1].split(";"):
                pair = clause.split("=", 1)
                if len(pair) == 2 and pair[0].strip():
                    params.append((pair[0].strip().lower(), pair[1].strip().strip('"')))
        return cls(ts[0].strip().lower(), ts[1].strip().lower(), tuple(params))

    def parameter(self, name: str) -> str | None:
        name = name.lower()
        for key, value in self.parameters:
            if key == name:
                return value
        return None

    def charset(self) -> Charset | None:
        """The charset parameter, or None when absent or not a known charset."""
        name = self.parameter("charset")
        if not name:
            return None
        try:
            return Charset.for_name(name)
        except UnsupportedCharset:
            return None

    def with_charset(self, charset: Charset) -> "ContentType":
        params = tuple((k, v) for k, v in self.parameters if k != "charset")
        return ContentType(self.content_type, self.subtype, params + (("charset", charset.name),))

    def match(self, other: "ContentType") -> bool:
        """Compare type and subtype, ignoring parameters."""
        return self.content_type == other.content_type and self.subtype == other.subtype

    def __str__(self):
        if not self.parameters:
            return f"{self.content_type}/{self.subtype}"
        params = "; ".join(f"{k}={v}" for k, v in self.parameters)
        return f"{self.content_type}/{self.subtype}; {params}"


ContentType.TEXT_PLAIN = ContentType("text", "plain")
ContentType.OCTET_STREAM = ContentType("application", "octet-stream")
