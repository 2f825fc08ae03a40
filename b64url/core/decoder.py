"""
Streaming base64url decoder.

Symbols are consumed in groups of 4 and emitted as 3 bytes. A trailing
group of 2 or 3 symbols becomes 1 or 2 bytes; a trailing group of a single
symbol is an error.

Trailing-bits policy:
    The last symbol of a 2- or 3-symbol group carries 4 or 2 bits that do
    not reach the output. By default they are ignored (lenient). With
    ``strict=True`` they must be zero, otherwise
    :class:`InvalidLastSymbolError` is raised.

Partial output:
    Output is returned per :meth:`StreamDecoder.update` call. A chunk
    containing an invalid symbol returns nothing; output returned for
    earlier chunks has already been handed to the caller.
"""
import base64
from typing import Iterable, Iterator, Union

from .alphabet import ALPHABET, REVERSE
from .exceptions import InvalidLastSymbolError, InvalidLengthError, InvalidSymbolError


class StreamDecoder:
    """
    Incremental decoder holding at most 3 pending symbols between calls.

    Attributes:
        strict: Reject non-zero unused bits in the final partial group
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self._pending = b""
        self._offset = 0

    @property
    def consumed(self) -> int:
        """Number of symbols accepted since the last reset."""
        return self._offset

    def reset(self) -> None:
        """Discard pending symbols and restart offsets at zero."""
        self._pending = b""
        self._offset = 0

    def update(self, data: bytes) -> bytes:
        """
        Validate a chunk of symbols and decode every complete 4-symbol group.

        Args:
            data: Next chunk of base64url symbols (may be empty)

        Returns:
            Decoded bytes, 3 per complete group

        Raises:
            InvalidSymbolError: If the chunk holds a byte outside the alphabet
        """
        data = bytes(data)
        rejected = data.translate(None, ALPHABET)
        if rejected:
            index = data.index(rejected[0])
            raise InvalidSymbolError(self._offset + index, rejected[0])

        buffered = self._pending + data
        usable = len(buffered) - len(buffered) % 4
        self._pending = buffered[usable:]
        self._offset += len(data)

        # Already validated, so the aligned prefix needs no further checks
        return base64.urlsafe_b64decode(buffered[:usable])

    def finalize(self) -> bytes:
        """
        Decode the final partial group and reset the decoder.

        Returns:
            1 byte for 2 pending symbols, 2 bytes for 3, nothing otherwise

        Raises:
            InvalidLengthError: If exactly one symbol is pending
            InvalidLastSymbolError: In strict mode, if unused bits are set
        """
        pending = self._pending
        length = self._offset
        self.reset()

        if not pending:
            return b""
        if len(pending) == 1:
            raise InvalidLengthError(length)

        group = 0
        for symbol in pending:
            group = (group << 6) | REVERSE[symbol]

        if len(pending) == 2:
            unused, out = group & 0xF, bytes((group >> 4,))
        else:
            unused, out = group & 0x3, (group >> 2).to_bytes(2, "big")

        if unused and self.strict:
            raise InvalidLastSymbolError(length - 1, pending[-1])
        return out


def iter_decode(chunks: Iterable[bytes], strict: bool = False) -> Iterator[bytes]:
    """Lazily decode an iterable of symbol chunks, yielding non-empty byte chunks."""
    decoder = StreamDecoder(strict=strict)
    for chunk in chunks:
        out = decoder.update(chunk)
        if out:
            yield out
    tail = decoder.finalize()
    if tail:
        yield tail


def decode(data: Union[str, bytes], strict: bool = False) -> bytes:
    """
    Decodes Base64 URL-safe without padding.

    Args:
        data: Encoded text; ``str`` input must be ASCII
        strict: Reject non-zero unused bits in the final group

    Returns:
        Decoded bytes

    Raises:
        InvalidSymbolError: For ``=``, ``+``, ``/``, whitespace or any other
            character outside the alphabet
        InvalidLengthError: If the input length modulo 4 is 1
    """
    decoder = StreamDecoder(strict=strict)

    if isinstance(data, str):
        try:
            data = data.encode("ascii")
        except UnicodeEncodeError as exc:
            # An earlier ASCII symbol may already be invalid
            decoder.update(data[:exc.start].encode("ascii"))
            raise InvalidSymbolError(exc.start, ord(data[exc.start])) from None

    return decoder.update(data) + decoder.finalize()
