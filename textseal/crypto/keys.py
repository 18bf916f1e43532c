"""
Key material for textseal.

Every algorithm uses 32-byte secret keys: the BLAKE3 key, the Ed25519 private
seed and the ChaCha20-Poly1305 key. Ed25519 additionally has a 32-byte public
verification key.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import KeyFormatError, UnsupportedOperation
from .utils import secure_zero


KEY_SIZE = 32
BLAKE3_SIGNATURE_SIZE = 32
ED25519_SIGNATURE_SIZE = 64
NONCE_SIZE = 12
TAG_SIZE = 16


class AlgorithmTag(Enum):
    """Closed set of algorithms textseal knows how to drive."""

    BLAKE3 = "blake3"
    ED25519 = "ed25519"
    CHACHA20 = "chacha20"

    @classmethod
    def parse(cls, value: str) -> 'AlgorithmTag':
        """
        Parse a format name such as "blake3".

        Raises:
            UnsupportedOperation: If the name is not a known algorithm
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError):
            raise UnsupportedOperation(f"Invalid format: {value}") from None

    def __str__(self) -> str:
        return self.value


class SecretKey:
    """
    A 32-byte secret bound to one algorithm.

    The bytes live in a bytearray so they can be zeroed with clear() or by
    using the key as a context manager. The repr never shows them.
    """

    def __init__(self, algorithm: AlgorithmTag, material: bytes):
        if len(material) != KEY_SIZE:
            raise KeyFormatError(
                f"{algorithm.value} key must be {KEY_SIZE} bytes, got {len(material)}"
            )
        self.algorithm = algorithm
        self._data = bytearray(material)
        self._cleared = False

    def __bytes__(self) -> bytes:
        if self._cleared:
            raise ValueError("SecretKey has been cleared")
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SecretKey(algorithm={self.algorithm.value}, <redacted>)"

    def clear(self) -> None:
        """Zero the key material."""
        if not self._cleared:
            secure_zero(self._data)
            self._cleared = True

    @property
    def cleared(self) -> bool:
        return self._cleared

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.clear()


@dataclass(frozen=True)
class PublicKey:
    """
    Ed25519 verification key.

    Fields:
        algorithm: Always AlgorithmTag.ED25519
        material: 32-byte compressed Edwards point
    """
    algorithm: AlgorithmTag
    material: bytes

    def __post_init__(self):
        """Validate key shape."""
        if self.algorithm is not AlgorithmTag.ED25519:
            raise UnsupportedOperation(
                f"{self.algorithm.value} has no public key"
            )
        if len(self.material) != KEY_SIZE:
            raise KeyFormatError(
                f"Public key must be {KEY_SIZE} bytes, got {len(self.material)}"
            )

    def __bytes__(self) -> bytes:
        return self.material
