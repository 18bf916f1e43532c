"""
Authenticated encryption backend.

ChaCha20-Poly1305 with a fresh random 96-bit nonce per message. The envelope
exchanged with callers is:

    envelope = nonce (12B) || ciphertext || tag (16B)

encrypt()/decrypt() additionally apply the URL-safe unpadded base64 boundary
encoding so envelopes can travel as text.
"""

import logging
from typing import BinaryIO, Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from ..utils.codec import decode_urlsafe, encode_urlsafe
from ..utils.source import BytesLike, read_all
from .errors import AuthenticationFailed, KeyFormatError, MalformedEnvelope
from .keys import AlgorithmTag, NONCE_SIZE, SecretKey, TAG_SIZE
from .utils import RandomSource, generate_random_bytes


logger = logging.getLogger(__name__)


class ChaCha20Cipher:
    """
    ChaCha20-Poly1305 cipher bound to one key.

    Nonces are always generated inside seal(); callers cannot supply one.
    """

    algorithm = AlgorithmTag.CHACHA20

    def __init__(self, key: SecretKey, rng: Optional[RandomSource] = None):
        """
        Initialize cipher.

        Args:
            key: 32-byte SecretKey tagged CHACHA20
            rng: Random source for nonces (defaults to the OS source)
        """
        if key.algorithm is not AlgorithmTag.CHACHA20:
            raise KeyFormatError(f"Expected a chacha20 key, got {key.algorithm.value}")
        self._aead = ChaCha20Poly1305(bytes(key))
        self._rng = rng

    def seal(self, data: Union[BytesLike, BinaryIO]) -> bytes:
        """
        Encrypt and authenticate plaintext.

        Args:
            data: Plaintext bytes or binary stream

        Returns:
            nonce || ciphertext || tag
        """
        plaintext = read_all(data)
        nonce = generate_random_bytes(NONCE_SIZE, self._rng)
        ciphertext_with_tag = self._aead.encrypt(nonce, plaintext, None)
        return nonce + ciphertext_with_tag

    def open(self, envelope: bytes) -> bytes:
        """
        Verify and decrypt an envelope.

        Args:
            envelope: nonce || ciphertext || tag

        Returns:
            Decrypted plaintext

        Raises:
            MalformedEnvelope: If the envelope cannot hold a nonce and tag
            AuthenticationFailed: If the tag does not verify
        """
        if len(envelope) < NONCE_SIZE + TAG_SIZE:
            raise MalformedEnvelope(
                f"Envelope must be at least {NONCE_SIZE + TAG_SIZE} bytes, "
                f"got {len(envelope)}"
            )

        nonce = envelope[:NONCE_SIZE]
        ciphertext_with_tag = envelope[NONCE_SIZE:]
        try:
            return self._aead.decrypt(nonce, ciphertext_with_tag, None)
        except InvalidTag as e:
            raise AuthenticationFailed(
                "Authentication verification failed - data tampered or wrong key"
            ) from e

    def encrypt(self, data: Union[BytesLike, BinaryIO]) -> str:
        """Seal plaintext and return the envelope as boundary text."""
        envelope = self.seal(data)
        logger.debug(f"Sealed {len(envelope) - NONCE_SIZE - TAG_SIZE} bytes")
        return encode_urlsafe(envelope)

    def decrypt(self, data: Union[str, BytesLike, BinaryIO]) -> bytes:
        """
        Decode boundary text and open the envelope.

        Raises:
            EncodingError: If the text is not valid URL-safe base64
            MalformedEnvelope: If the decoded envelope is too short
            AuthenticationFailed: If the tag does not verify
        """
        text = data if isinstance(data, str) else read_all(data)
        return self.open(decode_urlsafe(text))

    def close(self) -> None:
        # the key was copied into the library cipher at construction
        pass
