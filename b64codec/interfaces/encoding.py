"""Encoding interfaces for b64codec.

This module defines the protocol satisfied by binary-to-text codecs.
"""

from __future__ import annotations

from typing import Protocol


class IBinaryTextCodec(Protocol):
    """Interface for binary-to-text encoding and decoding operations."""

    def encode(self, data: bytes) -> str:
        """Encode a byte buffer as text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str) -> bytes:
        """Decode text back into the byte buffer it encodes.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            Base64Error: When the text is malformed.
        """
        ...
