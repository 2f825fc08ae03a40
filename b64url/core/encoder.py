"""
Streaming base64url encoder.

Bytes are consumed in groups of 3 and emitted as 4 symbols. A trailing
group of 1 or 2 bytes becomes 2 or 3 symbols; no ``=`` padding is ever
produced.
"""
import base64
from typing import Iterable, Iterator


class StreamEncoder:
    """
    Incremental encoder holding at most 2 pending bytes between calls.

    Example:
        >>> encoder = StreamEncoder()
        >>> encoder.update(b"hel") + encoder.update(b"lo") + encoder.finalize()
        b'aGVsbG8'
    """

    def __init__(self) -> None:
        self._pending = b""

    def reset(self) -> None:
        """Discard any pending input."""
        self._pending = b""

    def update(self, data: bytes) -> bytes:
        """
        Encode every complete 3-byte group available so far.

        Args:
            data: Next chunk of raw input (may be empty)

        Returns:
            Symbols for the complete groups, 4 per group
        """
        if self._pending:
            data = self._pending + bytes(data)
        usable = len(data) - len(data) % 3
        self._pending = bytes(data[usable:])

        # A multiple of 3 bytes never produces padding
        return base64.urlsafe_b64encode(data[:usable])

    def finalize(self) -> bytes:
        """
        Flush the final partial group and reset the encoder.

        Returns:
            2 symbols for one pending byte, 3 for two, nothing otherwise
        """
        pending = self._pending
        self.reset()

        return base64.urlsafe_b64encode(pending).rstrip(b"=")


def iter_encode(chunks: Iterable[bytes]) -> Iterator[bytes]:
    """Lazily encode an iterable of byte chunks, yielding non-empty symbol chunks."""
    encoder = StreamEncoder()
    for chunk in chunks:
        out = encoder.update(chunk)
        if out:
            yield out
    tail = encoder.finalize()
    if tail:
        yield tail


def encode(data: bytes) -> str:
    """Encodes bytes to Base64 URL-safe without padding."""
    encoder = StreamEncoder()
    return (encoder.update(data) + encoder.finalize()).decode("ascii")


def encoded_length(size: int) -> int:
    """Number of symbols produced for ``size`` input bytes: ceil(size * 4 / 3)."""
    return (size * 4 + 2) // 3
