"""
SHA-256 Word Functions

The logical functions of FIPS 180-4 sections 3.2 and 4.1.2. Every function
operates on unsigned 32-bit words; Python integers are unbounded, so results
are masked back to 32 bits wherever a bit could escape.
"""

# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF
WORD_BITS = 32


def shr(n: int, x: int) -> int:
    """Logical right shift of the word x by n bits (zero fill)."""
    return (x & MASK_32) >> n


def rotr(n: int, x: int) -> int:
    """
    Rotate the word x right by n bits.

    Args:
        n: Rotation amount, 0 < n < 32
        x: 32-bit word

    Returns:
        The rotated 32-bit word
    """
    x &= MASK_32
    return ((x >> n) | (x << (WORD_BITS - n))) & MASK_32


def add32(*words: int) -> int:
    """Add any number of words modulo 2^32."""
    return sum(words) & MASK_32


def ch(x: int, y: int, z: int) -> int:
    """Choice function: for each bit, x selects y (1) or z (0)."""
    return ((x & y) ^ (~x & z)) & MASK_32


def maj(x: int, y: int, z: int) -> int:
    """Majority function: each output bit is the majority of x, y, z."""
    return ((x & y) ^ (x & z) ^ (y & z)) & MASK_32


def big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: applied to register a in every round."""
    return rotr(2, x) ^ rotr(13, x) ^ rotr(22, x)


def big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: applied to register e in every round."""
    return rotr(6, x) ^ rotr(11, x) ^ rotr(25, x)


def small_sigma0(x: int) -> int:
    """Lowercase sigma 0: used in the message schedule."""
    return rotr(7, x) ^ rotr(18, x) ^ shr(3, x)


def small_sigma1(x: int) -> int:
    """Lowercase sigma 1: used in the message schedule."""
    return rotr(17, x) ^ rotr(19, x) ^ shr(10, x)
