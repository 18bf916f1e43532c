"""
Random password generation.

Characters that are easy to confuse when read aloud or copied by hand
(0/O, 1/l/I) are left out of the alphabets.
"""

from typing import List, Optional

from ..crypto.utils import RandomSource, random_below


UPPER = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWER = "abcdefghijkmnopqrstuvwxyz"
NUMBER = "123456789"
SYMBOL = "!@#$%^&*_"


def _choice(alphabet: str, rng: Optional[RandomSource]) -> str:
    return alphabet[random_below(len(alphabet), rng)]


def _shuffle(chars: List[str], rng: Optional[RandomSource]) -> None:
    # Fisher-Yates
    for i in range(len(chars) - 1, 0, -1):
        j = random_below(i + 1, rng)
        chars[i], chars[j] = chars[j], chars[i]


def generate_password(length: int = 16, uppercase: bool = True,
                      lowercase: bool = True, number: bool = True,
                      symbol: bool = True,
                      rng: Optional[RandomSource] = None) -> str:
    """
    Generate a random password.
    
    At least one character of every enabled class is included.
    
    Args:
        length: Password length
        uppercase: Include upper-case letters
        lowercase: Include lower-case letters
        number: Include digits
        symbol: Include symbols
        rng: Random source (defaults to the OS source)
        
    Returns:
        Password string of the requested length
        
    Raises:
        ValueError: If no class is enabled or length is too small
        EntropySourceError: If the random source fails
    """
    classes = [alphabet for enabled, alphabet in (
        (uppercase, UPPER), (lowercase, LOWER), (number, NUMBER), (symbol, SYMBOL)
    ) if enabled]
    
    if not classes:
        raise ValueError("At least one character class must be enabled")
    if length < len(classes):
        raise ValueError(
            f"Password length must be at least {len(classes)} for the selected classes"
        )
    
    chars = [_choice(alphabet, rng) for alphabet in classes]
    pool = "".join(classes)
    chars.extend(_choice(pool, rng) for _ in range(length - len(chars)))
    _shuffle(chars, rng)
    
    return "".join(chars)
