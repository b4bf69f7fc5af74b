"""SHA-256 message schedule expansion (FIPS 180-4 6.2.2, step 1)."""

from typing import Sequence, Tuple

from .constants import SCHEDULE_LENGTH, WORDS_PER_BLOCK
from .words import add32, small_sigma0, small_sigma1

Schedule = Tuple[int, ...]


def expand_schedule(block: Sequence[int]) -> Schedule:
    """
    Expand 16 words into 64 words for the message schedule.

    For i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]   (mod 2^32)

    Raises:
        ValueError: If block does not hold exactly 16 words
    """
    if len(block) != WORDS_PER_BLOCK:
        raise ValueError(f"Block must have {WORDS_PER_BLOCK} words, got {len(block)}")

    w = list(block)
    for i in range(WORDS_PER_BLOCK, SCHEDULE_LENGTH):
        w.append(add32(small_sigma1(w[i - 2]), w[i - 7], small_sigma0(w[i - 15]), w[i - 16]))
    return tuple(w)
