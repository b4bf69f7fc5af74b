# Integration Module
"""
I/O boundary around the hash engine: hex line decoding, digest encoding,
stream processing and the self-test harness.
"""

from .hex_lines import (
    InvalidInputEncoding,
    LineResult,
    decode_hex_line,
    digest_lines,
    encode_digest,
)
from .selftest import KNOWN_VECTORS, SelfTestReport, run_self_test

__all__ = [
    'InvalidInputEncoding',
    'LineResult',
    'decode_hex_line',
    'digest_lines',
    'encode_digest',
    'KNOWN_VECTORS',
    'SelfTestReport',
    'run_self_test',
]
