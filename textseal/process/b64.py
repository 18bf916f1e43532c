"""
Base64 encode/decode over byte sources.
"""

from typing import Union

from ..utils.codec import Base64Format, decode, encode
from ..utils.source import read_source


def process_encode(input: str, format: Union[Base64Format, str] = Base64Format.STANDARD) -> str:
    """Base64-encode the contents of an input source."""
    if not isinstance(format, Base64Format):
        format = Base64Format.parse(format)
    return encode(read_source(input), format)


def process_decode(input: str, format: Union[Base64Format, str] = Base64Format.STANDARD) -> bytes:
    """
    Decode base64 text read from an input source.
    
    Raises:
        EncodingError: If the text is not valid for the format
    """
    if not isinstance(format, Base64Format):
        format = Base64Format.parse(format)
    return decode(read_source(input), format)
