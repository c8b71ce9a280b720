"""
Charset values and name normalization
"""

import codecs
import re
from dataclasses import dataclass, field

from httpcharsets.errors import DecodingError, UnencodableText, UnsupportedCharset

__all__ = ["Charset", "Charsets"]

# Python codec name -> IANA charset name
_IANA_NAMES = {
    "utf-8": "UTF-8",
    "utf-16": "UTF-16",
    "utf-16-le": "UTF-16LE",
    "utf-16-be": "UTF-16BE",
    "utf-32": "UTF-32",
    "utf-32-le": "UTF-32LE",
    "utf-32-be": "UTF-32BE",
    "ascii": "US-ASCII",
    "cp1250": "windows-1250",
    "cp1251": "windows-1251",
    "cp1252": "windows-1252",
    "cp1253": "windows-1253",
    "cp1254": "windows-1254",
    "cp1255": "windows-1255",
    "cp1256": "windows-1256",
    "big5": "Big5",
    "gbk": "GBK",
    "gb2312": "GB2312",
    "gb18030": "GB18030",
    "shift_jis": "Shift_JIS",
    "euc_jp": "EUC-JP",
    "euc_kr": "EUC-KR",
    "iso2022_jp": "ISO-2022-JP",
    "koi8-r": "KOI8-R",
    "koi8-u": "KOI8-U",
    "mac-roman": "macintosh",
}

_ISO_8859 = re.compile(r"^iso8859-(\d+)$")


@dataclass(frozen=True)
class Charset:
    """A named text encoding.

    Two charsets are equal when their canonical ``name`` matches, whatever
    alias was used to look them up.
    """

    name: str
    codec: str = field(compare=False, repr=False)

    @classmethod
    def for_name(cls, name: str) -> "Charset":
        """
        Resolve a charset name or alias to a Charset.

        Examples:
            >>> Charset.for_name("utf8").name
            'UTF-8'
            >>> Charset.for_name("latin-1") == Charset.for_name("ISO-8859-1")
            True

        Raises:
            UnsupportedCharset: If Python has no text codec for ``name``
        """
        cleaned = name.strip().strip('"')
        try:
            info = codecs.lookup(cleaned)
        except LookupError as err:
            raise UnsupportedCharset(name) from err
        # bytes-to-bytes codecs such as base64 are not charsets
        if not getattr(info, "_is_text_encoding", True):
            raise UnsupportedCharset(name)
        return cls(name=_canonical_name(info.name), codec=info.name)

    def encode(self, text: str) -> bytes:
        try:
            return text.encode(self.codec)
        except UnicodeEncodeError as err:
            raise UnencodableText(self, str(err)) from err

    def decode(self, data: bytes) -> str:
        try:
            return bytes(data).decode(self.codec)
        except UnicodeDecodeError as err:
            raise DecodingError(self, str(err)) from err

    def __str__(self):
        return self.name


def _canonical_name(codec_name: str) -> str:
    if codec_name in _IANA_NAMES:
        return _IANA_NAMES[codec_name]
    match = _ISO_8859.match(codec_name)
    if match:
        return f"ISO-8859-{match.group(1)}"
    return codec_name.upper()


class Charsets:
    """Charsets every Python build supports."""

    UTF_8 = Charset.for_name("utf-8")
    UTF_16 = Charset.for_name("utf-16")
    ISO_8859_1 = Charset.for_name("iso-8859-1")
    US_ASCII = Charset.for_name("ascii")
