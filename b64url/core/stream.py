"""
Stream driver.

Selects the input source and pumps fixed-size chunks from a binary reader
through the encoder or decoder into a binary writer. Only one chunk plus
the codec's pending group is held in memory at any time.
"""
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional

from .config import CodecConfig
from .decoder import StreamDecoder
from .encoder import StreamEncoder
from .logging import get_logger

logger = get_logger("stream")

STDIN_MARKER = "-"
# ASCII whitespace only; multi-byte Unicode spaces such as NBSP stay symbols
WHITESPACE = b" \t\r\n\x0b\x0c"


@contextmanager
def open_source(path: Optional[str], stdin: Optional[BinaryIO] = None) -> Iterator[BinaryIO]:
    """
    Open the input named on the command line.

    Args:
        path: File path, or ``None``/``"-"`` for standard input
        stdin: Binary standard input, ``sys.stdin.buffer`` by default

    Yields:
        A binary reader. Standard input is not closed on exit.

    Raises:
        OSError: If the file cannot be opened
    """
    if path is None or path == STDIN_MARKER:
        logger.debug("Reading standard input")
        yield stdin if stdin is not None else sys.stdin.buffer
        return

    logger.debug("Reading %s", path)
    with open(path, "rb") as f:
        yield f


class TrailingWhitespaceFilter:
    """
    Drops whitespace at the very end of a stream.

    A whitespace run is held back until either more data arrives (the run
    was not trailing, so its first byte is released for the decoder to
    reject) or the stream ends. Only the first byte of a run is kept, so
    memory stays constant however long the run is.

    Only the ASCII bytes in WHITESPACE count. Encoded Unicode spaces
    (NBSP is C2 A0 in UTF-8) are left in place and rejected by the decoder.
    """

    def __init__(self) -> None:
        self._held = b""
        self._held_count = 0

    def feed(self, data: bytes) -> bytes:
        stripped = data.rstrip(WHITESPACE)
        if not stripped:
            if not self._held:
                self._held = data[:1]
            self._held_count += len(data)
            return b""

        out = self._held + stripped
        self._held = data[len(stripped):len(stripped) + 1]
        self._held_count = len(data) - len(stripped)
        return out

    def finalize(self) -> int:
        """Reset and return the number of whitespace bytes dropped."""
        dropped = self._held_count
        self._held = b""
        self._held_count = 0
        return dropped


def encode_stream(source: BinaryIO, sink: BinaryIO, config: CodecConfig) -> int:
    """
    Read raw bytes from ``source`` and write base64url text to ``sink``.

    Returns:
        Number of bytes written
    """
    encoder = StreamEncoder()
    read = written = 0

    while True:
        chunk = source.read(config.chunk_size)
        if not chunk:
            break
        read += len(chunk)
        out = encoder.update(chunk)
        if out:
            sink.write(out)
            written += len(out)

    tail = encoder.finalize()
    if config.trailing_newline:
        tail += b"\n"
    if tail:
        sink.write(tail)
        written += len(tail)
    sink.flush()

    logger.debug("Encoded %d bytes into %d", read, written)
    return written


def decode_stream(source: BinaryIO, sink: BinaryIO, config: CodecConfig) -> int:
    """
    Read base64url text from ``source`` and write raw bytes to ``sink``.

    Bytes decoded before an error have already been written when the
    error propagates.

    Returns:
        Number of bytes written

    Raises:
        DecodeError: On the first invalid symbol, invalid length or, in
            strict mode, non-zero trailing bits
    """
    decoder = StreamDecoder(strict=config.strict)
    whitespace = TrailingWhitespaceFilter() if config.strip_trailing_whitespace else None
    written = 0

    while True:
        chunk = source.read(config.chunk_size)
        if not chunk:
            break
        if whitespace is not None:
            chunk = whitespace.feed(chunk)
        out = decoder.update(chunk)
        if out:
            sink.write(out)
            written += len(out)

    if whitespace is not None:
        dropped = whitespace.finalize()
        if dropped:
            logger.debug("Ignored %d trailing whitespace bytes", dropped)

    consumed = decoder.consumed
    tail = decoder.finalize()
    if tail:
        sink.write(tail)
        written += len(tail)
    sink.flush()

    logger.debug("Decoded %d symbols into %d bytes", consumed, written)
    return written


def execute(
    config: CodecConfig,
    path: Optional[str] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    """
    Run one encode or decode over the selected input.

    Args:
        config: Run configuration
        path: Input file, or ``None``/``"-"`` for standard input
        stdin: Binary standard input override
        stdout: Binary output, ``sys.stdout.buffer`` by default

    Returns:
        Number of bytes written
    """
    sink = stdout if stdout is not None else sys.stdout.buffer
    with open_source(path, stdin) as source:
        if config.decode:
            return decode_stream(source, sink, config)
        return encode_stream(source, sink, config)
