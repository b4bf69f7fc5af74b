"""
SHA-256 Block Parsing

Splits a padded message into 512-bit blocks M(1)..M(N), each read as
16 big-endian 32-bit words (FIPS 180-4 5.2.1).
"""

import struct
from typing import Iterator, List, Tuple

from .constants import BLOCK_SIZE, WORDS_PER_BLOCK

Block = Tuple[int, ...]

_BLOCK_STRUCT = struct.Struct(f'>{WORDS_PER_BLOCK}I')


def _check_aligned(padded: bytes) -> None:
    if len(padded) % BLOCK_SIZE:
        raise ValueError(
            f"Padded message length {len(padded)} is not a multiple of {BLOCK_SIZE} bytes"
        )


def parse_block(chunk: bytes) -> Block:
    """Convert a 64-byte chunk into 16 32-bit words (big-endian)."""
    if len(chunk) != BLOCK_SIZE:
        raise ValueError(f"Block must be {BLOCK_SIZE} bytes, got {len(chunk)}")
    return _BLOCK_STRUCT.unpack(chunk)


def iter_blocks(padded: bytes) -> Iterator[Block]:
    """
    Yield the blocks of a padded message in order.

    Raises:
        ValueError: If the length is not a multiple of 64 bytes
    """
    _check_aligned(padded)
    for offset in range(0, len(padded), BLOCK_SIZE):
        yield _BLOCK_STRUCT.unpack_from(padded, offset)


def parse_blocks(padded: bytes) -> List[Block]:
    """
    Parse a padded message into its list of blocks.

    Args:
        padded: Output of pad_message (length divisible by 64)

    Returns:
        N = len(padded) / 64 blocks of 16 words each
    """
    return list(iter_blocks(padded))


def block_count(padded: bytes) -> int:
    """Number of blocks a padded message splits into."""
    _check_aligned(padded)
    return len(padded) // BLOCK_SIZE
