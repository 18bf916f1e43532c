"""
Key generation.

Generators return raw key buffers ready to be written to disk, not backend
objects. All randomness comes from the injected random source, which defaults
to the operating system CSPRNG.
"""

from typing import Callable, Dict, List, Optional

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from ..utils.genpass import generate_password
from .keys import AlgorithmTag, KEY_SIZE
from .utils import RandomSource, generate_random_bytes


def generate_blake3_key(rng: Optional[RandomSource] = None) -> List[bytes]:
    """
    Generate a BLAKE3 key as 32 random printable characters.

    Returns:
        [key]
    """
    password = generate_password(KEY_SIZE, True, True, True, True, rng=rng)
    return [password.encode("ascii")]


def generate_ed25519_keypair(rng: Optional[RandomSource] = None) -> List[bytes]:
    """
    Generate an Ed25519 key pair.

    Returns:
        [private_seed, public_key], always in that order
    """
    seed = generate_random_bytes(KEY_SIZE, rng)
    private_key = Ed25519PrivateKey.from_private_bytes(seed)
    public = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return [seed, public]


def generate_chacha20_key(rng: Optional[RandomSource] = None) -> List[bytes]:
    """
    Generate a ChaCha20-Poly1305 key.

    Returns:
        [key]
    """
    return [generate_random_bytes(KEY_SIZE, rng)]


GENERATORS: Dict[AlgorithmTag, Callable[[Optional[RandomSource]], List[bytes]]] = {
    AlgorithmTag.BLAKE3: generate_blake3_key,
    AlgorithmTag.ED25519: generate_ed25519_keypair,
    AlgorithmTag.CHACHA20: generate_chacha20_key,
}


def generate_keys(algorithm: AlgorithmTag,
                  rng: Optional[RandomSource] = None) -> List[bytes]:
    """
    Generate raw key buffers for an algorithm.

    Raises:
        EntropySourceError: If the random source fails
    """
    return GENERATORS[AlgorithmTag.parse(algorithm)](rng)
