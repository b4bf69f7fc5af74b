"""
SHA-256 Compression Function

Folds one message schedule into the chaining value (FIPS 180-4 6.2.2,
steps 2-4). The working registers a..h live only for the duration of a
call, so concurrent callers never share state.
"""

from typing import Sequence, Tuple

from .constants import K, ROUNDS, SCHEDULE_LENGTH, STATE_WORDS
from .words import MASK_32, big_sigma0, big_sigma1, ch, maj

ChainingValue = Tuple[int, int, int, int, int, int, int, int]


def compress(state: Sequence[int], w: Sequence[int]) -> ChainingValue:
    """
    Fold one expanded block into a chaining value.

    Neither argument is modified; the next chaining value comes back as a
    fresh 8-tuple with every word reduced modulo 2^32.

    Args:
        state: Chaining value H(i-1), exactly 8 words
        w: Schedule from expand_schedule, exactly 64 words

    Returns:
        Chaining value H(i)

    Raises:
        ValueError: If state or schedule has the wrong number of words
    """
    if len(state) != STATE_WORDS:
        raise ValueError(f"State must have {STATE_WORDS} words, got {len(state)}")
    if len(w) != SCHEDULE_LENGTH:
        raise ValueError(f"Schedule must have {SCHEDULE_LENGTH} words, got {len(w)}")

    a, b, c, d, e, f, g, h = state

    for i in range(ROUNDS):
        t1 = (h + big_sigma1(e) + ch(e, f, g) + K[i] + w[i]) & MASK_32
        t2 = (big_sigma0(a) + maj(a, b, c)) & MASK_32

        h = g
        g = f
        f = e
        e = (d + t1) & MASK_32
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_32

    # feed-forward
    return (
        (state[0] + a) & MASK_32,
        (state[1] + b) & MASK_32,
        (state[2] + c) & MASK_32,
        (state[3] + d) & MASK_32,
        (state[4] + e) & MASK_32,
        (state[5] + f) & MASK_32,
        (state[6] + g) & MASK_32,
        (state[7] + h) & MASK_32,
    )
