"""Core codec: alphabet tables, streaming encoder/decoder and the stream driver."""
from .alphabet import ALPHABET, REVERSE
from .config import CodecConfig
from .decoder import StreamDecoder, decode, iter_decode
from .encoder import StreamEncoder, encode, encoded_length, iter_encode
from .exceptions import (
    Base64UrlError,
    DecodeError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidSymbolError,
)

__all__ = [
    'ALPHABET',
    'REVERSE',
    'CodecConfig',
    'StreamDecoder',
    'StreamEncoder',
    'decode',
    'encode',
    'encoded_length',
    'iter_decode',
    'iter_encode',
    'Base64UrlError',
    'DecodeError',
    'InvalidLastSymbolError',
    'InvalidLengthError',
    'InvalidSymbolError',
]
