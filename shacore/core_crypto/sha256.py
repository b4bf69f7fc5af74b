"""
SHA-256 Hash Engine

Drives the pipeline for one message, starting from the IV in constants.py:
pad_message -> iter_blocks -> (expand_schedule, compress) per block.

The only state threaded between blocks is the 8-tuple chaining value, and
it lives in locals of the calling function, so independent messages can be
hashed from any number of threads.
"""

import struct
from typing import Iterator

from .blocks import iter_blocks
from .compression import ChainingValue, compress
from .constants import H_INITIAL, STATE_WORDS
from .padding import pad_message
from .schedule import expand_schedule

DIGEST_SIZE = 32

_DIGEST_STRUCT = struct.Struct(f'>{STATE_WORDS}I')


def iter_chaining_values(data: bytes) -> Iterator[ChainingValue]:
    """
    Yield every intermediate hash value H(0)..H(N) of a message.

    The first value is the initial hash value and the last one is the
    digest, so a message of N blocks yields N + 1 values.

    Args:
        data: Input bytes to hash
    """
    padded = pad_message(data)

    state: ChainingValue = H_INITIAL
    yield state

    for block in iter_blocks(padded):
        state = compress(state, expand_schedule(block))
        yield state


def sha256_words(data: bytes) -> ChainingValue:
    """Compute the SHA-256 digest of data as 8 32-bit words."""
    padded = pad_message(data)

    state: ChainingValue = H_INITIAL
    for block in iter_blocks(padded):
        state = compress(state, expand_schedule(block))
    return state


def words_to_digest(state: ChainingValue) -> bytes:
    """Serialize a chaining value as 8 big-endian words (32 bytes)."""
    return _DIGEST_STRUCT.pack(*state)


def sha256(data: bytes) -> bytes:
    """
    Digest of a complete in-memory message.

    Args:
        data: bytes, bytearray or memoryview; text must be encoded first

    Returns:
        The 32-byte digest, the final chaining value packed big-endian

    Raises:
        TypeError: If data is not bytes-like

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return words_to_digest(sha256_words(data))


def sha256_hex(data: bytes) -> str:
    """Digest of data as 64 lowercase hex digits."""
    return sha256(data).hex()


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Digest of text after encoding it.

    Args:
        text: Text to hash
        encoding: Codec applied before hashing

    Raises:
        LookupError: If the codec is unknown
    """
    return sha256(text.encode(encoding))
