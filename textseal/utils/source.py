"""
Byte sources for textseal operations.

An input is named either by a filesystem path or by "-" for standard input.
Inputs are always read whole into memory; there is no streaming.
"""

import logging
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Union

from ..crypto.errors import SourceIOError


STDIN_MARKER = "-"

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


@contextmanager
def open_source(name: str) -> Iterator[BinaryIO]:
    """
    Open a byte source for reading.
    
    Args:
        name: File path, or "-" for standard input
        
    Yields:
        Binary stream; stdin is left open on exit
        
    Raises:
        SourceIOError: If the file does not exist or cannot be opened
    """
    if name == STDIN_MARKER:
        yield sys.stdin.buffer
        return
    
    try:
        stream = open(name, "rb")
    except OSError as e:
        raise SourceIOError(f"Cannot open {name}: {e.strerror or e}") from e
    
    with stream:
        yield stream


def read_all(data: Union[BytesLike, BinaryIO]) -> bytes:
    """
    Return the full contents of a bytes-like object or binary stream.
    
    Raises:
        SourceIOError: If reading the stream fails
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    
    try:
        content = data.read()
    except OSError as e:
        raise SourceIOError(f"Read failed: {e}") from e
    
    if isinstance(content, str):
        raise SourceIOError("Source must be opened in binary mode")
    return content


def read_source(name: str) -> bytes:
    """
    Read a named byte source completely.
    
    Args:
        name: File path, or "-" for standard input
        
    Returns:
        Source contents
    """
    with open_source(name) as stream:
        content = read_all(stream)
    
    label = "stdin" if name == STDIN_MARKER else name
    logger.debug(f"Read {len(content)} bytes from {label}")
    return content
