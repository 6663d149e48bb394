"""Exception classes for b64codec.

This module defines the error taxonomy raised when decoding malformed Base64 text.
Encoding never raises any of these.
"""

from __future__ import annotations


class Base64Error(ValueError):
    """Base exception class for all Base64 decoding errors."""

    pass


class InvalidCharacterError(Base64Error):
    """Exception raised when a character outside the alphabet appears.

    Attributes:
        character: The offending character.
        position: Index of the character in the decoded text.
    """

    reason = "invalid character"

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"{self.reason} {character!r} at position {position}")
        self.character = character
        self.position = position


class InvalidLastSymbolError(InvalidCharacterError):
    """Exception raised when the final symbol carries non-zero trailing bits.

    Such text is not the encoding of any byte buffer.
    """

    reason = "invalid last symbol"


class InvalidLengthError(Base64Error):
    """Exception raised when the text length cannot frame whole Base64 groups.

    Attributes:
        length: Length of the rejected text.
    """

    def __init__(self, length: int) -> None:
        super().__init__(f"invalid length {length}")
        self.length = length


class InvalidPaddingError(Base64Error):
    """Exception raised for misplaced or excess padding.

    Attributes:
        position: Index of the first offending padding character.
    """

    def __init__(self, position: int, reason: str = "misplaced padding") -> None:
        super().__init__(f"{reason} at position {position}")
        self.position = position
