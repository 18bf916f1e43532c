"""
Text sign/verify/encrypt/decrypt dispatch.

This is the single place that maps an algorithm tag to a backend and the
single place that applies the boundary text encoding. Every call runs one
linear pipeline:

1. Load key bytes and build the backend
2. Read the input source
3. Run the backend operation
4. Encode or decode the result
"""

import contextlib
import logging
import os
import tempfile
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple, Union

from ..crypto.errors import NonUtf8Plaintext, SourceIOError, UnsupportedOperation
from ..crypto.keygen import generate_keys
from ..crypto.keys import AlgorithmTag
from ..crypto.loader import (
    load_blake3_signer,
    load_chacha20_cipher,
    load_ed25519_signer,
    load_ed25519_verifier,
    load_key_file,
)
from ..crypto.utils import RandomSource
from ..utils.codec import decode_urlsafe, encode_urlsafe
from ..utils.source import open_source, read_all


logger = logging.getLogger(__name__)

Format = Union[AlgorithmTag, str]

SIGN = "sign"
VERIFY = "verify"
ENCRYPT = "encrypt"
DECRYPT = "decrypt"

# (algorithm, operation) -> loader building the backend for that operation
_OPERATIONS: Dict[Tuple[AlgorithmTag, str], Callable] = {
    (AlgorithmTag.BLAKE3, SIGN): load_blake3_signer,
    (AlgorithmTag.BLAKE3, VERIFY): load_blake3_signer,
    (AlgorithmTag.ED25519, SIGN): load_ed25519_signer,
    (AlgorithmTag.ED25519, VERIFY): load_ed25519_verifier,
    (AlgorithmTag.CHACHA20, ENCRYPT): load_chacha20_cipher,
    (AlgorithmTag.CHACHA20, DECRYPT): load_chacha20_cipher,
}

KEY_FILE_NAMES: Dict[AlgorithmTag, Tuple[str, ...]] = {
    AlgorithmTag.BLAKE3: ("blake3.txt",),
    AlgorithmTag.ED25519: ("ed25519.sk", "ed25519.pk"),
    AlgorithmTag.CHACHA20: ("chacha20.key",),
}


class GeneratedKey(NamedTuple):
    """A generated key buffer and the file name it is written under."""
    name: str
    data: bytes


def _load_backend(fmt: Format, operation: str, key: str, **kwargs):
    """
    Resolve the backend for an operation and load its key.

    Callers close the backend once the operation is done.

    Raises:
        UnsupportedOperation: If the algorithm does not implement the operation
    """
    algorithm = AlgorithmTag.parse(fmt)
    loader = _OPERATIONS.get((algorithm, operation))
    if loader is None:
        raise UnsupportedOperation(
            f"{algorithm.value} does not support {operation}"
        )
    
    backend = loader(load_key_file(key), **kwargs)
    logger.debug(f"Loaded {algorithm.value} key for {operation}")
    return backend


def process_text_sign(input: str, key: str, format: Format,
                      strict: bool = False) -> str:
    """
    Sign an input source.
    
    Args:
        input: Input path or "-" for stdin
        key: Key file path
        format: Algorithm tag or name (blake3 or ed25519)
        strict: Require key files of exactly 32 bytes
        
    Returns:
        Signature as URL-safe unpadded base64
    """
    with contextlib.closing(_load_backend(format, SIGN, key, strict=strict)) as signer, \
            open_source(input) as reader:
        signature = signer.sign(reader)
    return encode_urlsafe(signature)


def process_text_verify(input: str, key: str, format: Format, signature: str,
                        strict: bool = False) -> bool:
    """
    Verify a signature over an input source.
    
    Args:
        input: Input path or "-" for stdin
        key: Key file path (shared key for blake3, public key for ed25519)
        format: Algorithm tag or name
        signature: Signature as URL-safe unpadded base64
        strict: Require key files of exactly 32 bytes
        
    Returns:
        True if the signature is valid, False otherwise
        
    Raises:
        EncodingError: If the signature text is not valid base64
        InvalidSignatureLength: If an ed25519 signature is not 64 bytes
    """
    with contextlib.closing(_load_backend(format, VERIFY, key, strict=strict)) as verifier:
        signature_bytes = decode_urlsafe(signature)
        with open_source(input) as reader:
            verified = verifier.verify(reader, signature_bytes)
    
    logger.info(f"Signature {'verified' if verified else 'did not verify'}")
    return verified


def process_text_key_generate(format: Format,
                              rng: Optional[RandomSource] = None) -> List[GeneratedKey]:
    """
    Generate key material for an algorithm.
    
    Returns:
        Named key buffers; for ed25519 the private key comes first
    """
    algorithm = AlgorithmTag.parse(format)
    buffers = generate_keys(algorithm, rng)
    return [GeneratedKey(name, data)
            for name, data in zip(KEY_FILE_NAMES[algorithm], buffers)]


def write_generated_keys(keys: List[GeneratedKey], directory: str) -> List[str]:
    """
    Write generated keys into a directory.
    
    The whole set is staged under temporary names first and only then renamed
    into place. If any step fails, every temporary file and every file already
    renamed by this call is removed, so a keypair is never left half written.
    
    Returns:
        Paths of the written files
        
    Raises:
        SourceIOError: If a file cannot be written
    """
    staged: List[Tuple[str, str]] = []
    paths: List[str] = []
    try:
        for key in keys:
            path = os.path.join(directory, key.name)
            try:
                fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{key.name}.")
                staged.append((tmp_path, path))
                with os.fdopen(fd, "wb") as f:
                    f.write(key.data)
                os.chmod(tmp_path, 0o600)
            except OSError as e:
                raise SourceIOError(f"Cannot write {path}: {e}") from e
        
        for tmp_path, path in staged:
            try:
                os.replace(tmp_path, path)
            except OSError as e:
                raise SourceIOError(f"Cannot write {path}: {e}") from e
            paths.append(path)
    except BaseException:
        for tmp_path, _ in staged:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_path)
        for path in paths:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(path)
        raise
    
    for key, path in zip(keys, paths):
        logger.info(f"Wrote {len(key.data)}-byte key to {path}")
    return paths


def process_text_encrypt(input: str, key: str,
                         format: Format = AlgorithmTag.CHACHA20,
                         strict: bool = False,
                         rng: Optional[RandomSource] = None) -> str:
    """
    Encrypt an input source.
    
    Returns:
        Envelope (nonce || ciphertext || tag) as URL-safe unpadded base64
    """
    with contextlib.closing(_load_backend(format, ENCRYPT, key, strict=strict, rng=rng)) as cipher, \
            open_source(input) as reader:
        envelope = cipher.seal(reader)
    return encode_urlsafe(envelope)


def process_text_decrypt(input: str, key: str,
                         format: Format = AlgorithmTag.CHACHA20,
                         strict: bool = False) -> str:
    """
    Decrypt an encoded envelope read from an input source.
    
    Returns:
        Plaintext as text
        
    Raises:
        EncodingError: If the input is not valid URL-safe base64
        MalformedEnvelope: If the envelope is too short
        AuthenticationFailed: If the tag does not verify
        NonUtf8Plaintext: If the plaintext is not valid UTF-8
    """
    with contextlib.closing(_load_backend(format, DECRYPT, key, strict=strict)) as cipher:
        with open_source(input) as reader:
            envelope = decode_urlsafe(read_all(reader))
        plaintext = cipher.open(envelope)
    
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise NonUtf8Plaintext("Decrypted data is not valid UTF-8") from e
