"""
Hex Line Codec

The I/O boundary around the hash engine:
- Decodes one hex-encoded message per input line
- Encodes digests as lowercase hex (8 digits per word, no separators)
- Processes a line stream in order, reporting malformed lines without
  stopping the stream
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from ..core_crypto.sha256 import DIGEST_SIZE, iter_chaining_values, sha256, words_to_digest

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r'[0-9a-fA-F]*')


# ============================================================================
# Errors
# ============================================================================

class InvalidInputEncoding(ValueError):
    """Raised when an input line is not valid hexadecimal."""

    def __init__(self, line_number: int, line: Union[str, bytes], reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}")


# ============================================================================
# Codec
# ============================================================================

def _line_text(line: Union[str, bytes], line_number: int) -> str:
    if isinstance(line, str):
        return line
    try:
        return line.decode('ascii')
    except UnicodeDecodeError as exc:
        bad = line[exc.start]
        raise InvalidInputEncoding(
            line_number, line, f"non-ASCII byte 0x{bad:02x} at offset {exc.start}"
        ) from exc


def decode_hex_line(line: Union[str, bytes], line_number: int = 1, strip_whitespace: bool = True) -> bytes:
    """
    Decode one line of hex text into message bytes.

    Each pair of hex digits becomes one byte, most significant nibble first.
    An empty line decodes to the empty message. Lines read in binary mode
    are accepted as bytes and must be pure ASCII.

    Args:
        line: The raw input line (a trailing newline is ignored)
        line_number: 1-based position of the line, used in errors
        strip_whitespace: Ignore leading and trailing whitespace

    Returns:
        The decoded message

    Raises:
        InvalidInputEncoding: On non-ASCII bytes, odd length or non-hex characters
    """
    text = _line_text(line, line_number).rstrip('\r\n')
    if strip_whitespace:
        text = text.strip()

    if not _HEX_RE.fullmatch(text):
        bad = next(char for char in text if char not in '0123456789abcdefABCDEF')
        raise InvalidInputEncoding(line_number, line, f"non-hex character {bad!r}")
    if len(text) % 2:
        raise InvalidInputEncoding(
            line_number, line, f"odd number of hex digits ({len(text)})"
        )
    return bytes.fromhex(text)


def encode_digest(digest: bytes) -> str:
    """Render a 32-byte digest as 64 lowercase hex digits."""
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f"Digest must be {DIGEST_SIZE} bytes, got {len(digest)}")
    return digest.hex()


# ============================================================================
# Stream processing
# ============================================================================

@dataclass
class LineResult:
    """Outcome of hashing one input line."""
    line_number: int
    digest: Optional[bytes] = None
    error: Optional[InvalidInputEncoding] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def hexdigest(self) -> str:
        if self.digest is None:
            raise ValueError(f"Line {self.line_number} has no digest: {self.error}")
        return encode_digest(self.digest)


def _traced_digest(message: bytes, line_number: int) -> bytes:
    state = None
    for index, state in enumerate(iter_chaining_values(message)):
        logger.debug(
            "line %d H(%d) = %s", line_number, index,
            ' '.join(f'{word:08x}' for word in state),
        )
    return words_to_digest(state)


def digest_lines(
    lines: Iterable[Union[str, bytes]],
    strip_whitespace: bool = True,
    skip_blank_lines: bool = False,
    trace: bool = False,
) -> Iterator[LineResult]:
    """
    Hash each line of a hex-encoded message stream.

    Results come back in input order, one per line. A malformed line yields
    a result carrying its InvalidInputEncoding and the stream carries on.

    Args:
        lines: Iterable of text or byte lines (a file object works)
        strip_whitespace: Ignore whitespace around each line
        skip_blank_lines: Skip empty lines instead of hashing the empty message
        trace: Log every intermediate chaining value at DEBUG
    """
    for line_number, line in enumerate(lines, start=1):
        if skip_blank_lines and not line.strip():
            continue

        try:
            message = decode_hex_line(line, line_number, strip_whitespace)
        except InvalidInputEncoding as exc:
            yield LineResult(line_number=line_number, error=exc)
            continue

        if trace:
            digest = _traced_digest(message, line_number)
        else:
            digest = sha256(message)
        yield LineResult(line_number=line_number, digest=digest)
