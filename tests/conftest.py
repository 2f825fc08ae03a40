"""Pytest fixtures for b64url tests."""
import pytest


# (raw, encoded) pairs; every encoded value is unpadded base64url
VECTORS = [
    (b"hello", b"aGVsbG8"),
    (b"hello\n", b"aGVsbG8K"),
    (b"John Doe", b"Sm9obiBEb2U"),
    (b"John Doe\n", b"Sm9obiBEb2UK"),
    (b"\xF0\x9F\x8D\xA3", b"8J-Now"),
    (b"\xF0\x9F\x8D\xA3\n", b"8J-Nowo"),
    (
        b"\xde\x9a\x4c\x32\x9e\x0d\x5b\xa8\x39\xed\x33\x5b\xe1\x9c\x01\xd9",
        b"3ppMMp4NW6g57TNb4ZwB2Q",
    ),
    (
        b"\xde\x9a\x4c\x32\x9e\x0d\x5b\xa8\x39\xed\x33\x5b\xe1\x9c\x01\xd9\n",
        b"3ppMMp4NW6g57TNb4ZwB2Qo",
    ),
]

TRAILING_WHITESPACE = [b"", b" ", b"  ", b"   ", b"\n", b"\n\n", b"\n\n\n", b"\r\n", b"\t \n"]


@pytest.fixture
def vectors():
    """Returns (raw, encoded) byte pairs."""
    return list(VECTORS)


@pytest.fixture
def trailing_whitespace():
    """Returns whitespace suffixes a decoder run should ignore."""
    return list(TRAILING_WHITESPACE)


@pytest.fixture
def binary_data():
    """Returns every byte value followed by a non-multiple-of-3 tail."""
    return bytes(range(256)) + b"\x00\xff"


@pytest.fixture
def write_file(tmp_path):
    """Returns a helper that writes bytes to a temporary file and returns its path."""
    def _write(data: bytes, name: str = "input.bin") -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)
    return _write
