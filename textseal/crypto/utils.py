"""
Cryptographic utilities for random number generation and byte comparison.

The secure random source is passed around as a plain callable taking a length
and returning that many bytes. Production code uses the operating system
source; tests inject deterministic substitutes.
"""

import os
import secrets
from typing import Callable, Optional, Union

from .errors import EntropySourceError


RandomSource = Callable[[int], bytes]


def system_random(length: int) -> bytes:
    """Read bytes from the operating system CSPRNG."""
    return os.urandom(length)


def generate_random_bytes(length: int, rng: Optional[RandomSource] = None) -> bytes:
    """
    Generate cryptographically secure random bytes.
    
    Args:
        length: Number of random bytes to generate
        rng: Random source to draw from (defaults to the OS source)
        
    Returns:
        Random bytes of the requested length
        
    Raises:
        EntropySourceError: If the source fails or returns a short read
    """
    source = rng or system_random
    try:
        data = source(length)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceError(f"Random source unavailable: {e}") from e
    
    if len(data) != length:
        raise EntropySourceError(
            f"Random source returned {len(data)} bytes, expected {length}"
        )
    return bytes(data)


def random_below(upper: int, rng: Optional[RandomSource] = None) -> int:
    """
    Draw a uniform integer in [0, upper) by rejection sampling.
    
    Args:
        upper: Exclusive upper bound (1..256)
        rng: Random source to draw from
        
    Returns:
        Uniformly distributed integer
    """
    if not 0 < upper <= 256:
        raise ValueError("Upper bound must be between 1 and 256")
    
    # Largest multiple of upper that fits in one byte
    limit = 256 - (256 % upper)
    while True:
        value = generate_random_bytes(1, rng)[0]
        if value < limit:
            return value % upper


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Compare two byte sequences in constant time.
    
    Sequences of different length compare unequal.
    """
    return secrets.compare_digest(a, b)


def secure_zero(data: Union[bytearray, memoryview]) -> None:
    """
    Overwrite a mutable buffer with zeros.
    
    Args:
        data: Bytearray or memoryview to zero out
    """
    if not isinstance(data, (bytearray, memoryview)):
        raise TypeError("Data must be bytearray or memoryview")
    for i in range(len(data)):
        data[i] = 0
