# shacore
"""
SHA-256 (FIPS 180-4) implemented from scratch, plus a line-oriented
hex digest tool built on top of it.
"""

from .core_crypto.sha256 import sha256, sha256_hex, sha256_string

__version__ = "0.1.0"

__all__ = ["sha256", "sha256_hex", "sha256_string", "__version__"]
