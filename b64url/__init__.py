"""
b64url - streaming base64url (RFC 4648 section 5, unpadded) encoder and decoder.

Usage:
    >>> from b64url import encode, decode
    >>> encode(b"hello")
    'aGVsbG8'
    >>> decode("aGVsbG8")
    b'hello'
"""
__version__ = "0.1.0"

from .core import (
    ALPHABET,
    Base64UrlError,
    CodecConfig,
    DecodeError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidSymbolError,
    StreamDecoder,
    StreamEncoder,
    decode,
    encode,
    iter_decode,
    iter_encode,
)

__all__ = [
    'ALPHABET',
    'Base64UrlError',
    'CodecConfig',
    'DecodeError',
    'InvalidLastSymbolError',
    'InvalidLengthError',
    'InvalidSymbolError',
    'StreamDecoder',
    'StreamEncoder',
    'decode',
    'encode',
    'iter_decode',
    'iter_encode',
]
