"""
Key loaders.

One loader per algorithm: each takes raw key bytes (a whole key file or
stdin), validates the length, and builds the matching backend. Loaders use
the first 32 bytes and tolerate longer input unless strict=True.
"""

import logging
from typing import Optional

from ..utils.source import read_source
from .aead import ChaCha20Cipher
from .errors import KeyFormatError
from .keys import AlgorithmTag, KEY_SIZE, PublicKey, SecretKey
from .signing import Blake3Signer, Ed25519Signer, Ed25519Verifier
from .utils import RandomSource


logger = logging.getLogger(__name__)


def _key_prefix(data: bytes, algorithm: AlgorithmTag, strict: bool) -> bytes:
    """Return the first KEY_SIZE bytes, enforcing the length policy."""
    if len(data) < KEY_SIZE:
        raise KeyFormatError(
            f"{algorithm.value} key must be at least {KEY_SIZE} bytes, got {len(data)}"
        )
    if strict and len(data) != KEY_SIZE:
        raise KeyFormatError(
            f"{algorithm.value} key must be exactly {KEY_SIZE} bytes, got {len(data)}"
        )
    if len(data) > KEY_SIZE:
        logger.warning(
            f"{algorithm.value} key source has {len(data)} bytes; "
            f"using the first {KEY_SIZE}"
        )
    return bytes(data[:KEY_SIZE])


def load_key_file(name: str) -> bytes:
    """
    Read raw key bytes from a file path or "-" for stdin.

    Raises:
        SourceIOError: If the source cannot be read
    """
    return read_source(name)


def load_blake3_signer(data: bytes, strict: bool = False) -> Blake3Signer:
    """
    Load a BLAKE3 keyed-hash signer/verifier from key bytes.

    The signer keeps the key until it is closed.
    """
    material = _key_prefix(data, AlgorithmTag.BLAKE3, strict)
    return Blake3Signer(SecretKey(AlgorithmTag.BLAKE3, material))


def load_ed25519_signer(data: bytes, strict: bool = False) -> Ed25519Signer:
    """Load an Ed25519 signer from a 32-byte private seed."""
    material = _key_prefix(data, AlgorithmTag.ED25519, strict)
    with SecretKey(AlgorithmTag.ED25519, material) as secret:
        return Ed25519Signer(secret)


def load_ed25519_verifier(data: bytes, strict: bool = False) -> Ed25519Verifier:
    """
    Load an Ed25519 verifier from a 32-byte public key.

    Raises:
        KeyFormatError: If fewer than 32 bytes are given
        InvalidPublicKey: If the bytes are not a valid curve point
    """
    material = _key_prefix(data, AlgorithmTag.ED25519, strict)
    return Ed25519Verifier(PublicKey(AlgorithmTag.ED25519, material))


def load_chacha20_cipher(data: bytes, strict: bool = False,
                         rng: Optional[RandomSource] = None) -> ChaCha20Cipher:
    """Load a ChaCha20-Poly1305 cipher from a 32-byte key."""
    material = _key_prefix(data, AlgorithmTag.CHACHA20, strict)
    with SecretKey(AlgorithmTag.CHACHA20, material) as secret:
        return ChaCha20Cipher(secret, rng=rng)
