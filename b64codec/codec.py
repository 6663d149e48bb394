"""Base64 codec.

This module provides one encode/decode algorithm parameterized by an Alphabet,
and the four public operations over the standard and URL-safe alphabets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from b64codec.alphabet import STANDARD, URL_SAFE, Alphabet
from b64codec.exceptions import (
    InvalidCharacterError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
)
from b64codec.interfaces.encoding import IBinaryTextCodec

BytesLike = Union[bytes, bytearray, memoryview]

# Bits left unused by the last symbol of a short tail, keyed by tail length.
_TAIL_SLACK_MASKS = {2: 0x0F, 3: 0x03}


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for a Codec.

    Attributes:
        alphabet: Alphabet used for both directions.
        allow_unpadded: Accept decode input without padding whose length
            modulo 4 is 2 or 3. Encoding always pads.
    """

    alphabet: Alphabet = STANDARD
    allow_unpadded: bool = False


class Codec(IBinaryTextCodec):
    """Base64 encoder/decoder over a single alphabet.

    Instances hold only immutable configuration and may be shared between
    threads. Every call works on a private copy of its input.

    Attributes:
        config: The codec configuration.
    """

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        """Initialize the codec.

        Args:
            config: Codec configuration. Defaults to the standard alphabet with
                padding required.
        """
        self.config = config if config is not None else CodecConfig()

    @property
    def alphabet(self) -> Alphabet:
        """The alphabet this codec encodes and decodes with."""
        return self.config.alphabet

    def __repr__(self) -> str:
        return (
            f"Codec(alphabet={self.alphabet.name!r}, "
            f"allow_unpadded={self.config.allow_unpadded})"
        )

    def encode(self, data: BytesLike) -> str:
        """Encode bytes as padded Base64 text.

        Each 3-byte group becomes 4 symbols, most significant bits first. A
        trailing single byte becomes 2 symbols and two padding characters; a
        trailing pair becomes 3 symbols and one padding character.

        Args:
            data: Any bytes-like object.

        Returns:
            Text of length ``4 * ceil(len(data) / 3)``; empty for empty input.

        Raises:
            TypeError: If data is not bytes-like.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
        buffer = bytes(data)

        symbols = self.alphabet.symbols
        padding = self.alphabet.padding
        chunks: List[str] = []

        remainder = len(buffer) % 3
        whole = len(buffer) - remainder
        for offset in range(0, whole, 3):
            group = buffer[offset] << 16 | buffer[offset + 1] << 8 | buffer[offset + 2]
            chunks.append(
                symbols[group >> 18]
                + symbols[group >> 12 & 0x3F]
                + symbols[group >> 6 & 0x3F]
                + symbols[group & 0x3F]
            )

        if remainder == 1:
            group = buffer[whole] << 16
            chunks.append(
                symbols[group >> 18] + symbols[group >> 12 & 0x3F] + padding * 2
            )
        elif remainder == 2:
            group = buffer[whole] << 16 | buffer[whole + 1] << 8
            chunks.append(
                symbols[group >> 18]
                + symbols[group >> 12 & 0x3F]
                + symbols[group >> 6 & 0x3F]
                + padding
            )

        return "".join(chunks)

    def decode(self, text: str) -> bytes:
        """Decode Base64 text back into bytes.

        Validation happens before any output is produced: padding structure,
        then framing length, then symbol membership, then the trailing bits of
        a short final group. Only text that ``encode`` could have produced is
        accepted (modulo missing padding when ``allow_unpadded`` is set).

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            TypeError: If text is not a str.
            InvalidPaddingError: If padding is not a suffix of at most 2.
            InvalidLengthError: If the length cannot frame whole groups.
            InvalidCharacterError: If a symbol is outside the alphabet.
            InvalidLastSymbolError: If the last symbol has stray low bits.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        padding = self.alphabet.padding
        data = text.rstrip(padding)
        pad_count = len(text) - len(data)

        misplaced = data.find(padding)
        if misplaced != -1:
            raise InvalidPaddingError(misplaced)
        if pad_count > 2:
            raise InvalidPaddingError(len(data), reason=f"{pad_count} padding characters")

        if len(text) % 4 != 0:
            if pad_count or not self.config.allow_unpadded or len(text) % 4 == 1:
                raise InvalidLengthError(len(text))

        indices: List[int] = []
        for position, char in enumerate(data):
            index = self.alphabet.index_of(char)
            if index is None:
                raise InvalidCharacterError(char, position)
            indices.append(index)

        tail = len(indices) % 4
        if tail:
            last = len(indices) - 1
            if indices[last] & _TAIL_SLACK_MASKS[tail]:
                raise InvalidLastSymbolError(data[last], last)

        output = bytearray()
        whole = len(indices) - tail
        for offset in range(0, whole, 4):
            group = (
                indices[offset] << 18
                | indices[offset + 1] << 12
                | indices[offset + 2] << 6
                | indices[offset + 3]
            )
            output += group.to_bytes(3, "big")

        if tail == 2:
            group = indices[whole] << 18 | indices[whole + 1] << 12
            output.append(group >> 16)
        elif tail == 3:
            group = indices[whole] << 18 | indices[whole + 1] << 12 | indices[whole + 2] << 6
            output += (group >> 8).to_bytes(2, "big")

        return bytes(output)


STANDARD_CODEC = Codec(CodecConfig(alphabet=STANDARD))
URL_SAFE_CODEC = Codec(CodecConfig(alphabet=URL_SAFE))


def encode_standard(data: BytesLike) -> str:
    """Encode bytes with the standard alphabet, padded."""
    return STANDARD_CODEC.encode(data)


def decode_standard(text: str) -> bytes:
    """Decode padded standard-alphabet text.

    Raises:
        Base64Error: If the text is malformed.
    """
    return STANDARD_CODEC.decode(text)


def encode_url_safe(data: BytesLike) -> str:
    """Encode bytes with the URL-safe alphabet, padded."""
    return URL_SAFE_CODEC.encode(data)


def decode_url_safe(text: str) -> bytes:
    """Decode padded URL-safe-alphabet text.

    Raises:
        Base64Error: If the text is malformed.
    """
    return URL_SAFE_CODEC.decode(text)
