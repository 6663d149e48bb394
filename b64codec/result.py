"""Tagged decode results.

Decode failures crossing a host boundary travel as a DecodeResult carrying a
message rather than as an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from b64codec.codec import STANDARD_CODEC, URL_SAFE_CODEC
from b64codec.exceptions import Base64Error
from b64codec.interfaces.encoding import IBinaryTextCodec

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Invalid Base64 input: "


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of a decode: either the decoded bytes or an error message.

    Exactly one of ``value`` and ``error`` is set.

    Attributes:
        value: The decoded bytes on success.
        error: Human readable description of the failure.
    """

    value: Optional[bytes] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value and error must be set")

    @classmethod
    def success(cls, value: bytes) -> DecodeResult:
        """Build a successful result holding ``value``."""
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> DecodeResult:
        """Build a failed result carrying ``message``."""
        return cls(error=message)

    @property
    def ok(self) -> bool:
        """True when the decode succeeded."""
        return self.error is None

    def unwrap(self) -> bytes:
        """Return the decoded bytes.

        Raises:
            Base64Error: If this result is a failure, with its message.
        """
        if self.value is None:
            raise Base64Error(self.error)
        return self.value


def try_decode(codec: IBinaryTextCodec, text: str) -> DecodeResult:
    """Decode text, reporting malformed input as a failed result.

    Only Base64Error is converted; other exceptions, such as TypeError for a
    non-str argument, propagate.

    Args:
        codec: Codec to decode with.
        text: The encoded text.

    Returns:
        A successful result with the bytes, or a failure whose message is
        prefixed with ``"Invalid Base64 input: "``.
    """
    try:
        return DecodeResult.success(codec.decode(text))
    except Base64Error as e:
        logger.debug(
            "rejected base64 input length=%d error=%s", len(text), type(e).__name__
        )
        return DecodeResult.failure(f"{ERROR_PREFIX}{e}")


def try_decode_standard(text: str) -> DecodeResult:
    """Decode standard-alphabet text into a DecodeResult."""
    return try_decode(STANDARD_CODEC, text)


def try_decode_url_safe(text: str) -> DecodeResult:
    """Decode URL-safe-alphabet text into a DecodeResult."""
    return try_decode(URL_SAFE_CODEC, text)
