"""
Signer and verifier backends.

Two interchangeable implementations of {sign, verify}:
- BLAKE3 keyed hash (shared 32-byte key, 32-byte tag)
- Ed25519 (32-byte seed / 32-byte public key, 64-byte signature)

Inputs are read fully into memory before hashing or signing.
"""

import logging
from typing import BinaryIO, Union

import blake3
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from ..utils.source import BytesLike, read_all
from .errors import InvalidPublicKey, InvalidSignatureLength, KeyFormatError
from .keys import (
    AlgorithmTag,
    BLAKE3_SIGNATURE_SIZE,
    ED25519_SIGNATURE_SIZE,
    KEY_SIZE,
    PublicKey,
    SecretKey,
)
from .utils import constant_time_compare


logger = logging.getLogger(__name__)

Message = Union[BytesLike, BinaryIO]

# Curve25519 field prime and Edwards curve constant d = -121665/121666
_P = 2 ** 255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)


def is_valid_ed25519_point(encoded: bytes) -> bool:
    """
    Check that 32 bytes decode to a point on the Ed25519 curve.

    Follows the point decoding of RFC 8032 section 5.1.3: the y coordinate
    must be canonical, x^2 = (y^2 - 1) / (d*y^2 + 1) must have a square root,
    and x = 0 must not carry the sign bit.
    """
    if len(encoded) != KEY_SIZE:
        return False

    value = int.from_bytes(encoded, "little")
    sign = value >> 255
    y = value & ((1 << 255) - 1)
    if y >= _P:
        return False

    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    x2 = u * pow(v, _P - 2, _P) % _P
    if x2 == 0:
        return sign == 0

    x = pow(x2, (_P + 3) // 8, _P)
    if (x * x - x2) % _P != 0:
        x = x * _SQRT_M1 % _P
    return (x * x - x2) % _P == 0


class Blake3Signer:
    """
    Keyed-hash authenticator using BLAKE3 in keyed mode.

    The same key signs and verifies.
    """

    algorithm = AlgorithmTag.BLAKE3

    def __init__(self, key: SecretKey):
        """
        Initialize with a BLAKE3 secret key.

        Args:
            key: 32-byte SecretKey tagged BLAKE3
        """
        if key.algorithm is not AlgorithmTag.BLAKE3:
            raise KeyFormatError(f"Expected a blake3 key, got {key.algorithm.value}")
        self._key = key

    def sign(self, data: Message) -> bytes:
        """Return the 32-byte keyed BLAKE3 digest of the input."""
        message = read_all(data)
        hasher = blake3.blake3(message, key=bytes(self._key))
        return hasher.digest(length=BLAKE3_SIGNATURE_SIZE)

    def verify(self, data: Message, signature: bytes) -> bool:
        """
        Recompute the digest and compare it in constant time.

        Returns:
            True on match, False on mismatch (including wrong length)
        """
        expected = self.sign(data)
        return constant_time_compare(expected, bytes(signature))

    def close(self) -> None:
        """Zero the shared key. The signer cannot be used afterwards."""
        self._key.clear()


class Ed25519Signer:
    """Ed25519 signer built from a 32-byte private seed."""

    algorithm = AlgorithmTag.ED25519

    def __init__(self, key: SecretKey):
        """
        Initialize with an Ed25519 private seed.

        Args:
            key: 32-byte SecretKey tagged ED25519
        """
        if key.algorithm is not AlgorithmTag.ED25519:
            raise KeyFormatError(f"Expected an ed25519 key, got {key.algorithm.value}")
        self._key = Ed25519PrivateKey.from_private_bytes(bytes(key))

    def sign(self, data: Message) -> bytes:
        """Return the 64-byte Ed25519 signature of the input."""
        message = read_all(data)
        return self._key.sign(message)

    def verifying_key(self) -> PublicKey:
        """Derive the public key matching this signer."""
        raw = self._key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return PublicKey(AlgorithmTag.ED25519, raw)

    def verify(self, data: Message, signature: bytes) -> bool:
        """Verify a signature against this signer's own public key."""
        return Ed25519Verifier(self.verifying_key()).verify(data, signature)

    def close(self) -> None:
        # the seed was copied into the library key at construction
        pass


class Ed25519Verifier:
    """Ed25519 signature verifier for a single public key."""

    algorithm = AlgorithmTag.ED25519

    def __init__(self, key: PublicKey):
        """
        Initialize with a public key.

        Raises:
            InvalidPublicKey: If the key is not a valid curve point
        """
        if not is_valid_ed25519_point(key.material):
            raise InvalidPublicKey("Public key is not a valid Ed25519 point")
        try:
            self._key = Ed25519PublicKey.from_public_bytes(key.material)
        except ValueError as e:
            raise InvalidPublicKey(f"Invalid Ed25519 public key: {e}") from e
        self.public_key = key

    def verify(self, data: Message, signature: bytes) -> bool:
        """
        Check an Ed25519 signature.

        Returns:
            True if valid, False if the signature does not verify

        Raises:
            InvalidSignatureLength: If the signature is not 64 bytes
        """
        if len(signature) != ED25519_SIGNATURE_SIZE:
            raise InvalidSignatureLength(
                f"Ed25519 signature must be {ED25519_SIGNATURE_SIZE} bytes, "
                f"got {len(signature)}"
            )

        message = read_all(data)
        try:
            self._key.verify(bytes(signature), message)
            return True
        except InvalidSignature:
            logger.debug("Ed25519 signature did not verify")
            return False

    def close(self) -> None:
        """Public keys hold nothing to release."""
