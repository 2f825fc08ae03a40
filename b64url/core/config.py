"""
Codec configuration module.

Collects the knobs the stream driver and the CLI share.
"""
from dataclasses import dataclass


DEFAULT_CHUNK_SIZE = 64 * 1024  # 64 KiB


@dataclass
class CodecConfig:
    """
    Configuration for a single encode or decode run.

    Attributes:
        decode: Decode instead of encode
        strict: Reject non-zero unused bits in the final decode group
        trailing_newline: Append ``\\n`` after encoded output
        strip_trailing_whitespace: Ignore whitespace at the very end of
            decode input
        chunk_size: Bytes read from the source per step
    """
    decode: bool = False
    strict: bool = False
    trailing_newline: bool = False
    strip_trailing_whitespace: bool = True
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
