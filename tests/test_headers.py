"""
Tests for Headers and ContentType
"""

from httpcharsets import Charsets, ContentType, Headers


class TestHeaders:
    """Test the Headers mapping"""

    def test_case_insensitive_access(self):
        """Test that lookups ignore header name case"""
        headers = Headers({"Content-Type": "text/plain"})
        assert headers["content-type"] == "text/plain"
        assert "CONTENT-TYPE" in headers
        assert headers.get("accept-charset") is None

    def test_keeps_first_spelling(self):
        """Test that overwriting a value keeps the original name spelling"""
        headers = Headers({"X-Custom": "a"})
        headers["x-custom"] = "b"
        assert list(headers.items()) == [("X-Custom", "b")]

    def test_set_if_absent(self):
        """Test first-write-wins semantics"""
        headers = Headers()
        assert headers.set_if_absent("Accept-Charset", "UTF-8") is True
        assert headers.set_if_absent("accept-charset", "ISO-8859-1") is False
        assert headers["Accept-Charset"] == "UTF-8"

    def test_delete(self):
        """Test deleting a header by any case"""
        headers = Headers({"Accept": "*/*"})
        del headers["ACCEPT"]
        assert len(headers) == 0


class TestContentType:
    """Test ContentType parsing and rendering"""

    def test_parse_with_charset(self):
        """Test parsing type, subtype and charset parameter"""
        content_type = ContentType.parse("Text/Plain; charset=ISO-8859-1")
        assert content_type.content_type == "text"
        assert content_type.subtype == "plain"
        assert content_type.charset() == Charsets.ISO_8859_1
        assert content_type.match(ContentType.TEXT_PLAIN)

    def test_parse_without_spaces(self):
        """Test parsing a value with no whitespace around the separator"""
        assert ContentType.parse("text/plain;charset=utf-8").charset() == Charsets.UTF_8

    def test_parse_quoted_parameter(self):
        """Test that quotes around parameter values are dropped"""
        assert ContentType.parse('text/plain; charset="utf-16"').charset() == Charsets.UTF_16

    def test_unparseable(self):
        """Test that malformed values parse to None"""
        assert ContentType.parse("garbage") is None
        assert ContentType.parse("/plain") is None
        assert ContentType.parse("") is None
        assert ContentType.parse(None) is None

    def test_unknown_or_missing_charset(self):
        """Test that charset() is None for unknown or absent parameters"""
        assert ContentType.parse("text/plain; charset=bogus-xyz").charset() is None
        assert ContentType.parse("text/plain").charset() is None

    def test_with_charset_replaces_parameter(self):
        """Test that with_charset() replaces an existing charset"""
        content_type = ContentType.parse("text/plain; charset=utf-8; format=flowed")
        updated = content_type.with_charset(Charsets.ISO_8859_1)
        assert updated.parameter("charset") == "ISO-8859-1"
        assert updated.parameter("format") == "flowed"
        assert str(updated) == "text/plain; format=flowed; charset=ISO-8859-1"

    def test_match_ignores_parameters(self):
        """Test that match() only compares type and subtype"""
        assert ContentType.parse("text/plain; charset=utf-8").match(ContentType.TEXT_PLAIN)
        assert not ContentType.parse("text/html").match(ContentType.TEXT_PLAIN)

    def test_str(self):
        """Test rendering without parameters"""
        assert str(ContentType.TEXT_PLAIN) == "text/plain"
