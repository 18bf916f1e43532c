"""
Shared fixtures for textseal tests.
"""

import pytest


class CountingRandom:
    """Deterministic stand-in for the OS random source."""

    def __init__(self, start: int = 0):
        self.position = start
        self.calls = 0

    def __call__(self, length: int) -> bytes:
        out = bytes((self.position + i) % 256 for i in range(length))
        self.position += length
        self.calls += 1
        return out


def failing_random(length: int) -> bytes:
    raise OSError("entropy pool unavailable")


@pytest.fixture
def counting_rng():
    return CountingRandom()


@pytest.fixture
def zero_key_file(tmp_path):
    path = tmp_path / "zero.key"
    path.write_bytes(bytes(32))
    return str(path)


@pytest.fixture
def hello_file(tmp_path):
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello world")
    return str(path)
