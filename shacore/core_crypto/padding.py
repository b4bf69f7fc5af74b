"""
SHA-256 Message Padding

Pads a message so its length is a multiple of 512 bits (FIPS 180-4 5.1.1):
1. Append the bit '1' (the 0x80 byte, seven zero bits ride along)
2. Append zeros until length = 448 (mod 512), i.e. 56 (mod 64) in bytes
3. Append the original length in bits as a 64-bit big-endian integer

Messages of 2^64 bits or more are outside the standard's domain. Their
length field is reduced modulo 2^64, matching a 64-bit counter.
"""

import struct

from .constants import BLOCK_SIZE, LENGTH_FIELD_SIZE

MAX_BIT_LENGTH = (1 << 64) - 1

_LENGTH_STRUCT = struct.Struct('>Q')


def ensure_bytes(data) -> bytes:
    """
    Return data as immutable bytes.

    Raises:
        TypeError: If data is text or not a bytes-like object
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(
        f"Message must be bytes-like, got {type(data).__name__}; "
        "encode text first"
    )


def zero_fill_length(message_length: int) -> int:
    """Number of 0x00 bytes between the 0x80 marker and the length field."""
    return (BLOCK_SIZE - LENGTH_FIELD_SIZE - 1 - message_length) % BLOCK_SIZE


def padded_length(message_length: int) -> int:
    """Length in bytes of the padded form of a message_length-byte message."""
    if message_length < 0:
        raise ValueError("Message length must be non-negative")
    return message_length + 1 + zero_fill_length(message_length) + LENGTH_FIELD_SIZE


def pad_message(data: bytes) -> bytes:
    """
    Pad the message as FIPS 180-4 section 5.1.1 describes.

    Args:
        data: The original message bytes

    Returns:
        Padded message as bytes (length is multiple of 64 bytes / 512 bits)

    Raises:
        TypeError: If data is not bytes-like
    """
    data = ensure_bytes(data)
    bit_length = (len(data) * 8) & MAX_BIT_LENGTH

    return b''.join((
        data,
        b'\x80',
        b'\x00' * zero_fill_length(len(data)),
        _LENGTH_STRUCT.pack(bit_length),
    ))


def encoded_bit_length(padded: bytes) -> int:
    """Read back the bit length stored in the last 8 bytes of a padded message."""
    if len(padded) < LENGTH_FIELD_SIZE:
        raise ValueError("Padded message is shorter than the length field")
    return _LENGTH_STRUCT.unpack_from(padded, len(padded) - LENGTH_FIELD_SIZE)[0]
