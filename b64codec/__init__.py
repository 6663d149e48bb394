"""Base64 codec for Python.

This package provides a strict Base64 encoder and decoder over the standard and
URL/filename-safe alphabets of RFC 4648. Decoding rejects malformed input
instead of guessing.

Main Components:
    - Codec: Generic encoder/decoder parameterized by an Alphabet
    - encode_standard / decode_standard: Standard alphabet operations
    - encode_url_safe / decode_url_safe: URL-safe alphabet operations
    - DecodeResult: Tagged result for callers that cannot take exceptions

Example:
    >>> from b64codec import decode_standard, encode_standard
    >>> encode_standard(b"Hello, Ethereum!")
    'SGVsbG8sIEV0aGVyZXVtIQ=='
    >>> decode_standard("SGVsbG8sIEV0aGVyZXVtIQ==")
    b'Hello, Ethereum!'
"""

from b64codec.alphabet import STANDARD, URL_SAFE, Alphabet
from b64codec.codec import (
    STANDARD_CODEC,
    URL_SAFE_CODEC,
    Codec,
    CodecConfig,
    decode_standard,
    decode_url_safe,
    encode_standard,
    encode_url_safe,
)
from b64codec.exceptions import (
    Base64Error,
    InvalidCharacterError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
)
from b64codec.result import (
    DecodeResult,
    try_decode,
    try_decode_standard,
    try_decode_url_safe,
)

__version__ = "0.1.0"

__all__ = [
    # Alphabets
    "Alphabet",
    "STANDARD",
    "URL_SAFE",
    # Codec
    "Codec",
    "CodecConfig",
    "STANDARD_CODEC",
    "URL_SAFE_CODEC",
    "encode_standard",
    "decode_standard",
    "encode_url_safe",
    "decode_url_safe",
    # Results
    "DecodeResult",
    "try_decode",
    "try_decode_standard",
    "try_decode_url_safe",
    # Exceptions
    "Base64Error",
    "InvalidCharacterError",
    "InvalidLastSymbolError",
    "InvalidLengthError",
    "InvalidPaddingError",
]
