# Core Cryptography Module
"""
SHA-256 building blocks, leaves first:
- Word functions (rotate, shift, Ch, Maj, sigmas)
- Padding
- Block parsing
- Message schedule expansion
- Compression
- Hash engine
"""

from .sha256 import (
    DIGEST_SIZE,
    iter_chaining_values,
    sha256,
    sha256_hex,
    sha256_string,
    sha256_words,
)

__all__ = [
    "DIGEST_SIZE",
    "iter_chaining_values",
    "sha256",
    "sha256_hex",
    "sha256_string",
    "sha256_words",
]
