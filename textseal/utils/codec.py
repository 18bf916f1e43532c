"""
Boundary text encoding for textseal.

Signatures and ciphertext envelopes cross the text boundary as URL-safe
base64 without padding. Decoding is strict: anything that a canonical encoder
would not have produced is rejected.
"""

import base64
import binascii
import re
from enum import Enum
from typing import Union

from ..crypto.errors import EncodingError


_URLSAFE_NO_PAD = re.compile(rb"[A-Za-z0-9_-]*")
_STANDARD_PADDED = re.compile(rb"[A-Za-z0-9+/]*={0,2}")


class Base64Format(Enum):
    """Alphabets supported by the base64 command."""

    STANDARD = "standard"
    URLSAFE = "urlsafe"

    @classmethod
    def parse(cls, value: str) -> 'Base64Format':
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError):
            raise ValueError(f"Invalid base64 format: {value}") from None

    def __str__(self) -> str:
        return self.value


def _as_ascii(text: Union[str, bytes]) -> bytes:
    if isinstance(text, str):
        try:
            text = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise EncodingError("Base64 text contains non-ASCII characters") from e
    return bytes(text).strip()


def encode_urlsafe(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode_urlsafe(text: Union[str, bytes]) -> bytes:
    """
    Decode unpadded URL-safe base64.
    
    Args:
        text: Encoded text; surrounding whitespace is ignored
        
    Returns:
        Decoded bytes
        
    Raises:
        EncodingError: On invalid characters, padding, length or trailing bits
    """
    raw = _as_ascii(text)
    if not _URLSAFE_NO_PAD.fullmatch(raw):
        raise EncodingError("Invalid character in URL-safe base64 text")
    if len(raw) % 4 == 1:
        raise EncodingError("Invalid URL-safe base64 length")
    
    padded = raw + b"=" * (-len(raw) % 4)
    try:
        decoded = base64.urlsafe_b64decode(padded)
    except binascii.Error as e:
        raise EncodingError(f"Invalid URL-safe base64 text: {e}") from e
    
    # Reject encodings whose unused trailing bits are not zero
    if base64.urlsafe_b64encode(decoded).rstrip(b"=") != raw:
        raise EncodingError("Non-canonical URL-safe base64 text")
    return decoded


def encode(data: bytes, fmt: Base64Format = Base64Format.STANDARD) -> str:
    """Encode bytes in the given base64 format."""
    if fmt is Base64Format.URLSAFE:
        return encode_urlsafe(data)
    return base64.b64encode(data).decode("ascii")


def decode(text: Union[str, bytes], fmt: Base64Format = Base64Format.STANDARD) -> bytes:
    """
    Decode base64 text in the given format.
    
    Raises:
        EncodingError: If the text is not valid for the format
    """
    if fmt is Base64Format.URLSAFE:
        return decode_urlsafe(text)
    
    raw = _as_ascii(text)
    if not _STANDARD_PADDED.fullmatch(raw) or len(raw) % 4 != 0:
        raise EncodingError("Invalid standard base64 text")
    try:
        return base64.b64decode(raw, validate=True)
    except binascii.Error as e:
        raise EncodingError(f"Invalid standard base64 text: {e}") from e
