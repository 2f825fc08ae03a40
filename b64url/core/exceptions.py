"""
Custom exceptions for base64url coding.

This module defines the error taxonomy raised by the decoder. Encoding
never fails, and I/O errors are not wrapped: ``OSError`` reaches the
caller unchanged.
"""
from typing import Optional


class Base64UrlError(Exception):
    """Base exception for all b64url errors."""

    kind = "error"

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class DecodeError(Base64UrlError):
    """Exception raised when base64url input cannot be decoded."""
    pass


class InvalidSymbolError(DecodeError):
    """Exception raised for a byte outside the base64url alphabet."""

    kind = "invalid symbol"

    def __init__(
        self,
        offset: int,
        symbol: int,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            offset: Zero-based position of the symbol in the whole input
            symbol: Offending byte value (code point for str input)
            error_code: Numeric error code (if available)
        """
        self.offset = offset
        self.symbol = symbol
        super().__init__(
            f"{self.kind} {_describe(symbol)} at offset {offset}",
            error_code
        )


class InvalidLengthError(DecodeError):
    """Exception raised when the symbol count leaves a single dangling symbol."""

    kind = "invalid length"

    def __init__(self, length: int, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            length: Total number of symbols consumed
            error_code: Numeric error code (if available)
        """
        self.length = length
        super().__init__(
            f"{self.kind} {length}: a final group of one symbol cannot be decoded",
            error_code
        )


class InvalidLastSymbolError(DecodeError):
    """Exception raised in strict mode when the final symbol carries non-zero unused bits."""

    kind = "invalid last symbol"

    def __init__(
        self,
        offset: int,
        symbol: int,
        error_code: Optional[int] = None
    ) -> None:
        self.offset = offset
        self.symbol = symbol
        super().__init__(
            f"{self.kind} {_describe(symbol)} at offset {offset}: "
            f"unused low bits must be zero",
            error_code
        )


def _describe(symbol: int) -> str:
    if 0x21 <= symbol <= 0x7E:
        return f"0x{symbol:02x} ({chr(symbol)!r})"
    if symbol > 0xFF:
        return f"U+{symbol:04X}"
    return f"0x{symbol:02x}"
