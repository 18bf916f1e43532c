"""
Tests for key material types.
"""

import pytest

from textseal.crypto.errors import KeyFormatError, UnsupportedOperation
from textseal.crypto.keys import AlgorithmTag, KEY_SIZE, PublicKey, SecretKey


class TestAlgorithmTag:
    """Test algorithm tag parsing."""

    def test_parse_names(self):
        """Test parsing algorithm names."""
        assert AlgorithmTag.parse("blake3") is AlgorithmTag.BLAKE3
        assert AlgorithmTag.parse("Ed25519") is AlgorithmTag.ED25519
        assert AlgorithmTag.parse(" chacha20 ") is AlgorithmTag.CHACHA20

    def test_parse_passes_tags_through(self):
        """Test parsing an existing tag."""
        assert AlgorithmTag.parse(AlgorithmTag.ED25519) is AlgorithmTag.ED25519

    def test_parse_unknown(self):
        """Test unknown names raise UnsupportedOperation."""
        with pytest.raises(UnsupportedOperation):
            AlgorithmTag.parse("rsa")

    def test_str(self):
        """Test tag string form."""
        assert str(AlgorithmTag.BLAKE3) == "blake3"


class TestSecretKey:
    """Test secret key handling."""

    def test_requires_exact_length(self):
        """Test secret keys must be 32 bytes."""
        with pytest.raises(KeyFormatError):
            SecretKey(AlgorithmTag.BLAKE3, bytes(31))
        with pytest.raises(KeyFormatError):
            SecretKey(AlgorithmTag.BLAKE3, bytes(33))

    def test_bytes_and_len(self):
        """Test bytes and length of a secret key."""
        key = SecretKey(AlgorithmTag.CHACHA20, b"\x01" * KEY_SIZE)
        assert bytes(key) == b"\x01" * KEY_SIZE
        assert len(key) == KEY_SIZE

    def test_repr_hides_material(self):
        """Test repr never shows key bytes."""
        key = SecretKey(AlgorithmTag.BLAKE3, b"A" * KEY_SIZE)
        assert "AAAA" not in repr(key)
        assert "redacted" in repr(key)

    def test_clear(self):
        """Test clear zeroes the key."""
        key = SecretKey(AlgorithmTag.BLAKE3, b"\x07" * KEY_SIZE)
        key.clear()
        assert key.cleared
        with pytest.raises(ValueError):
            bytes(key)

    def test_context_manager_clears(self):
        """Test leaving the with block zeroes the key."""
        with SecretKey(AlgorithmTag.ED25519, b"\x07" * KEY_SIZE) as key:
            assert not key.cleared
        assert key.cleared


class TestPublicKey:
    """Test public key validation."""

    def test_valid(self):
        """Test a valid public key."""
        key = PublicKey(AlgorithmTag.ED25519, bytes(32))
        assert bytes(key) == bytes(32)

    def test_wrong_length(self):
        """Test public keys must be 32 bytes."""
        with pytest.raises(KeyFormatError):
            PublicKey(AlgorithmTag.ED25519, bytes(16))

    def test_only_ed25519(self):
        """Test only Ed25519 has public keys."""
        with pytest.raises(UnsupportedOperation):
            PublicKey(AlgorithmTag.BLAKE3, bytes(32))
