"""
Exception taxonomy for textseal.

Every failure raised by the library derives from TextSealError so callers can
catch the whole family at once, while each subclass still names a distinct
cause. A failed signature check is not an error: verify() returns False.
"""


class TextSealError(Exception):
    """Base class for all textseal errors."""
    pass


class KeyFormatError(TextSealError):
    """Raised when key bytes are too short or otherwise malformed."""
    pass


class InvalidPublicKey(TextSealError):
    """Raised when public key bytes do not decode to a valid curve point."""
    pass


class InvalidSignatureLength(TextSealError):
    """Raised when a signature does not have the length the scheme requires."""
    pass


class EntropySourceError(TextSealError):
    """Raised when the secure random source cannot provide bytes."""
    pass


class MalformedEnvelope(TextSealError):
    """Raised when a ciphertext envelope is too short to be valid."""
    pass


class AuthenticationFailed(TextSealError):
    """Raised when an AEAD tag does not verify (tampered data or wrong key)."""
    pass


class NonUtf8Plaintext(TextSealError):
    """Raised when a text result is required but the bytes are not UTF-8."""
    pass


class UnsupportedOperation(TextSealError):
    """Raised when an algorithm does not implement the requested operation."""
    pass


class SourceIOError(TextSealError, OSError):
    """Raised when an input or key source cannot be opened or read."""
    pass


class EncodingError(TextSealError, ValueError):
    """Raised when boundary text is not valid unpadded URL-safe base64."""
    pass
