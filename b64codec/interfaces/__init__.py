"""b64codec interfaces package.

This package provides protocol definitions for binary-to-text codecs.
"""

from .encoding import IBinaryTextCodec

__all__ = [
    "IBinaryTextCodec",
]
