"""
Operation layer for textseal.

Entry points called by the command line: text sign/verify/generate/
encrypt/decrypt and base64 encode/decode.
"""

from .text import (
    GeneratedKey,
    process_text_sign,
    process_text_verify,
    process_text_key_generate,
    process_text_encrypt,
    process_text_decrypt,
    write_generated_keys,
)
from .b64 import process_encode, process_decode

__all__ = [
    'GeneratedKey',
    'process_text_sign',
    'process_text_verify',
    'process_text_key_generate',
    'process_text_encrypt',
    'process_text_decrypt',
    'write_generated_keys',
    'process_encode',
    'process_decode',
]
