"""
Utility collaborators for textseal.

Byte sources, boundary text encoding and password generation.
"""

from .codec import Base64Format, encode_urlsafe, decode_urlsafe
from .source import STDIN_MARKER, open_source, read_source, read_all
from .genpass import generate_password

__all__ = [
    'Base64Format',
    'encode_urlsafe',
    'decode_urlsafe',
    'STDIN_MARKER',
    'open_source',
    'read_source',
    'read_all',
    'generate_password',
]
