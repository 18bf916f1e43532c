"""
textseal: text signing and encryption toolkit.

Sign, verify, encrypt and decrypt text with a uniform interface over three
algorithms, plus key generation and loading.

Supported algorithms:
- BLAKE3 keyed hash (shared-key integrity)
- Ed25519 (public-key signatures)
- ChaCha20-Poly1305 (authenticated encryption)

Basic Usage:
    >>> from textseal import process_text_key_generate, write_generated_keys
    >>> from textseal import process_text_sign, process_text_verify
    >>>
    >>> # Generate an Ed25519 key pair into ./keys
    >>> keys = process_text_key_generate("ed25519")
    >>> write_generated_keys(keys, "keys")
    >>>
    >>> # Sign a file and verify it with the public key
    >>> sig = process_text_sign("message.txt", "keys/ed25519.sk", "ed25519")
    >>> process_text_verify("message.txt", "keys/ed25519.pk", "ed25519", sig)
    True
"""

__version__ = "0.1.0"

# Cryptographic primitives
from .crypto import (
    AlgorithmTag,
    SecretKey,
    PublicKey,
    Blake3Signer,
    Ed25519Signer,
    Ed25519Verifier,
    ChaCha20Cipher,
    generate_keys,
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

# Operations
from .process import (
    GeneratedKey,
    process_text_sign,
    process_text_verify,
    process_text_key_generate,
    process_text_encrypt,
    process_text_decrypt,
    write_generated_keys,
    process_encode,
    process_decode,
)

from .config import TextSealConfig, ConfigError

__all__ = [
    '__version__',

    # Key material and backends
    'AlgorithmTag',
    'SecretKey',
    'PublicKey',
    'Blake3Signer',
    'Ed25519Signer',
    'Ed25519Verifier',
    'ChaCha20Cipher',
    'generate_keys',

    # Operations
    'GeneratedKey',
    'process_text_sign',
    'process_text_verify',
    'process_text_key_generate',
    'process_text_encrypt',
    'process_text_decrypt',
    'write_generated_keys',
    'process_encode',
    'process_decode',

    # Configuration
    'TextSealConfig',
    'ConfigError',

    # Errors
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
]
