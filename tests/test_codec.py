"""
Tests for boundary text encoding.
"""

import pytest

from textseal.crypto.errors import EncodingError
from textseal.utils.codec import (
    Base64Format,
    decode,
    decode_urlsafe,
    encode,
    encode_urlsafe,
)


class TestUrlSafe:
    """Test unpadded URL-safe base64."""

    def test_encode_uses_urlsafe_alphabet_without_padding(self):
        """Test encoding uses - and _ with no padding."""
        assert encode_urlsafe(b"\xfb\xff") == "-_8"
        assert encode_urlsafe(b"") == ""
        assert encode_urlsafe(b"hello world") == "aGVsbG8gd29ybGQ"

    def test_decode(self):
        """Test decoding URL-safe text."""
        assert decode_urlsafe("-_8") == b"\xfb\xff"
        assert decode_urlsafe(b"aGVsbG8gd29ybGQ") == b"hello world"
        assert decode_urlsafe("") == b""

    def test_decode_ignores_surrounding_whitespace(self):
        """Test surrounding whitespace is stripped."""
        assert decode_urlsafe("  -_8\n") == b"\xfb\xff"

    def test_rejects_padding(self):
        """Test padded input is rejected."""
        with pytest.raises(EncodingError):
            decode_urlsafe("aGVsbG8gd29ybGQ=")

    def test_rejects_standard_alphabet(self):
        """Test + and / are rejected."""
        with pytest.raises(EncodingError):
            decode_urlsafe("+/8")

    def test_rejects_impossible_length(self):
        """Test lengths that cannot be base64 are rejected."""
        with pytest.raises(EncodingError):
            decode_urlsafe("AAAAA")

    def test_rejects_non_canonical_trailing_bits(self):
        """Test non-zero trailing bits are rejected."""
        with pytest.raises(EncodingError):
            decode_urlsafe("-_9")

    def test_rejects_non_ascii(self):
        """Test non-ASCII input is rejected."""
        with pytest.raises(EncodingError):
            decode_urlsafe("héllo")

    def test_encoding_error_is_value_error(self):
        """Test EncodingError is a ValueError."""
        with pytest.raises(ValueError):
            decode_urlsafe("!!!!")


class TestBase64Formats:
    """Test the base64 command formats."""

    def test_standard_keeps_padding(self):
        """Test standard format output is padded."""
        assert encode(b"\xfb\xff", Base64Format.STANDARD) == "+/8="
        assert decode("+/8=", Base64Format.STANDARD) == b"\xfb\xff"

    def test_urlsafe_format(self):
        """Test urlsafe format output."""
        assert encode(b"\xfb\xff", Base64Format.URLSAFE) == "-_8"
        assert decode("-_8", Base64Format.URLSAFE) == b"\xfb\xff"

    def test_standard_rejects_missing_padding(self):
        """Test standard decode requires padding."""
        with pytest.raises(EncodingError):
            decode("+/8", Base64Format.STANDARD)

    def test_standard_rejects_urlsafe_characters(self):
        """Test standard decode rejects - and _."""
        with pytest.raises(EncodingError):
            decode("-_8=", Base64Format.STANDARD)

    def test_parse_format(self):
        """Test parsing base64 format names."""
        assert Base64Format.parse("UrlSafe") is Base64Format.URLSAFE
        with pytest.raises(ValueError):
            Base64Format.parse("base32")
