"""
Cryptographic primitives for textseal.

This module provides:
- Key material types and algorithm tags
- Signer/verifier backends (BLAKE3 keyed hash, Ed25519)
- Authenticated encryption (ChaCha20-Poly1305)
- Key loading and generation
"""

from .errors import (
    TextSealError,
    KeyFormatError,
    InvalidPublicKey,
    InvalidSignatureLength,
    EntropySourceError,
    MalformedEnvelope,
    AuthenticationFailed,
    NonUtf8Plaintext,
    UnsupportedOperation,
    SourceIOError,
    EncodingError,
)
from .utils import RandomSource, generate_random_bytes, constant_time_compare
from .keys import AlgorithmTag, SecretKey, PublicKey, KEY_SIZE, NONCE_SIZE, TAG_SIZE
from .signing import Blake3Signer, Ed25519Signer, Ed25519Verifier
from .aead import ChaCha20Cipher
from .loader import (
    load_key_file,
    load_blake3_signer,
    load_ed25519_signer,
    load_ed25519_verifier,
    load_chacha20_cipher,
)
from .keygen import generate_keys

__all__ = [
    'TextSealError',
    'KeyFormatError',
    'InvalidPublicKey',
    'InvalidSignatureLength',
    'EntropySourceError',
    'MalformedEnvelope',
    'AuthenticationFailed',
    'NonUtf8Plaintext',
    'UnsupportedOperation',
    'SourceIOError',
    'EncodingError',
    'RandomSource',
    'generate_random_bytes',
    'constant_time_compare',
    'AlgorithmTag',
    'SecretKey',
    'PublicKey',
    'KEY_SIZE',
    'NONCE_SIZE',
    'TAG_SIZE',
    'Blake3Signer',
    'Ed25519Signer',
    'Ed25519Verifier',
    'ChaCha20Cipher',
    'load_key_file',
    'load_blake3_signer',
    'load_ed25519_signer',
    'load_ed25519_verifier',
    'load_chacha20_cipher',
    'generate_keys',
]
