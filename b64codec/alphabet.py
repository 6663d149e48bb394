"""Base64 alphabets.

This module provides the Alphabet value type mapping 6-bit values to printable
symbols, and the two alphabets defined by RFC 4648: the standard one and the
URL/filename-safe one.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Dict, Optional

ALPHABET_SIZE = 64
DEFAULT_PADDING = "="

_PRINTABLE = frozenset(string.ascii_letters + string.digits + string.punctuation)


@dataclass(frozen=True)
class Alphabet:
    """An ordered set of 64 symbols plus a padding character.

    The reverse table is built once at construction, so lookups in both
    directions are constant time and the instance can be shared freely
    between threads.

    Attributes:
        name: Human readable name used in reprs and error messages.
        symbols: 64 characters; the character at index i encodes the value i.
        padding: The padding character appended to short final groups.
    """

    name: str
    symbols: str
    padding: str = DEFAULT_PADDING
    _indices: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.symbols) != ALPHABET_SIZE:
            raise ValueError(
                f"alphabet {self.name!r} must have {ALPHABET_SIZE} symbols, "
                f"got {len(self.symbols)}"
            )
        if len(set(self.symbols)) != ALPHABET_SIZE:
            raise ValueError(f"alphabet {self.name!r} has duplicate symbols")
        if len(self.padding) != 1:
            raise ValueError("padding must be a single character")
        if self.padding in self.symbols:
            raise ValueError(
                f"padding {self.padding!r} collides with a symbol of {self.name!r}"
            )
        if not set(self.symbols + self.padding) <= _PRINTABLE:
            raise ValueError(f"alphabet {self.name!r} must be printable ASCII")

        object.__setattr__(
            self, "_indices", {char: index for index, char in enumerate(self.symbols)}
        )

    def symbol(self, index: int) -> str:
        """Return the symbol encoding the 6-bit value ``index``."""
        return self.symbols[index]

    def index_of(self, char: str) -> Optional[int]:
        """Return the 6-bit value of ``char``, or None if it is not a symbol.

        The padding character is not a symbol and yields None.
        """
        return self._indices.get(char)

    def __contains__(self, char: object) -> bool:
        """Return True if ``char`` is one of the 64 symbols; padding is not."""
        return isinstance(char, str) and char in self._indices


_BASE_SYMBOLS = string.ascii_uppercase + string.ascii_lowercase + string.digits

STANDARD = Alphabet(name="standard", symbols=_BASE_SYMBOLS + "+/")
URL_SAFE = Alphabet(name="url-safe", symbols=_BASE_SYMBOLS + "-_")
