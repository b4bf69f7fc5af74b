"""
Unit tests for Core Crypto modules.

Tests:
- Word functions
- Padding
- Block parsing
- Message schedule expansion
- Compression
- SHA-256 hash engine
"""

import struct
from concurrent.futures import ThreadPoolExecutor

import pytest

from shacore.core_crypto.blocks import block_count, iter_blocks, parse_block, parse_blocks
from shacore.core_crypto.compression import compress
from shacore.core_crypto.constants import H_INITIAL, K
from shacore.core_crypto.padding import (
    encoded_bit_length, pad_message, padded_length, zero_fill_length
)
from shacore.core_crypto.schedule import expand_schedule
from shacore.core_crypto.sha256 import (
    DIGEST_SIZE, iter_chaining_values, sha256, sha256_hex, sha256_string,
    sha256_words, words_to_digest
)
from shacore.core_crypto.words import (
    MASK_32, add32, big_sigma0, big_sigma1, ch, maj, rotr, shr,
    small_sigma0, small_sigma1
)
from shacore.integration.selftest import reference_sha256_hex

ABC_DIGEST = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
EMPTY_DIGEST = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class TestWordFunctions:
    """Unit tests for the 32-bit word functions."""

    def test_rotr_wraps_low_bits(self):
        """Bits shifted out on the right come back on the left."""
        assert rotr(1, 1) == 0x80000000
        assert rotr(8, 0x12345678) == 0x78123456

    def test_rotr_stays_within_32_bits(self):
        assert rotr(31, 0xFFFFFFFF) == 0xFFFFFFFF
        assert rotr(4, 0xF) == 0xF0000000

    def test_shr_zero_fills(self):
        assert shr(4, 0x80000000) == 0x08000000
        assert shr(3, 0x7) == 0

    def test_add32_wraps(self):
        """Addition overflow must wrap silently."""
        assert add32(0xFFFFFFFF, 1) == 0
        assert add32(0xFFFFFFFF, 0xFFFFFFFF, 2) == 0

    def test_ch_selects(self):
        y, z = 0x12345678, 0x9ABCDEF0
        assert ch(0xFFFFFFFF, y, z) == y
        assert ch(0, y, z) == z
        assert ch(0xFFFF0000, y, z) == 0x1234DEF0

    def test_maj_votes(self):
        x, z = 0x0F0F0F0F, 0xFFFF0000
        assert maj(x, x, z) == x
        assert maj(0, 0xFFFFFFFF, z) == z

    def test_sigmas_match_definitions(self):
        x = 0xDEADBEEF
        assert big_sigma0(x) == rotr(2, x) ^ rotr(13, x) ^ rotr(22, x)
        assert big_sigma1(x) == rotr(6, x) ^ rotr(11, x) ^ rotr(25, x)
        assert small_sigma0(x) == rotr(7, x) ^ rotr(18, x) ^ (x >> 3)
        assert small_sigma1(x) == rotr(17, x) ^ rotr(19, x) ^ (x >> 10)

    def test_results_are_words(self):
        """Every function returns an unsigned 32-bit value."""
        for x in (0, 1, 0x80000000, 0xFFFFFFFF, 0x6A09E667):
            for value in (big_sigma0(x), big_sigma1(x), small_sigma0(x),
                          small_sigma1(x), ch(x, ~x, x), maj(x, ~x, x)):
                assert 0 <= value <= MASK_32


class TestPadding:
    """Unit tests for message padding."""

    def test_abc_padding(self):
        """'abc' pads to one block ending in the 24-bit length."""
        padded = pad_message(b"abc")
        assert len(padded) == 64
        assert padded[:4] == b"abc\x80"
        assert padded[4:56] == b"\x00" * 52
        assert padded[56:] == struct.pack('>Q', 24)

    def test_empty_message(self):
        padded = pad_message(b"")
        assert padded == b"\x80" + b"\x00" * 63

    @pytest.mark.parametrize("length, expected", [
        (0, 64), (55, 64), (56, 128), (63, 128), (64, 128), (119, 128), (120, 192),
    ])
    def test_padded_length_boundaries(self, length, expected):
        assert padded_length(length) == expected
        assert len(pad_message(b"a" * length)) == expected

    def test_padding_invariant(self):
        """Padded length is block aligned and ends with the bit length."""
        for length in range(0, 201):
            message = bytes(range(length))
            padded = pad_message(message)
            assert (len(padded) * 8) % 512 == 0
            assert len(padded) >= length + 9
            assert padded[:length] == message
            assert padded[length] == 0x80
            zeros = zero_fill_length(length)
            assert padded[length + 1:length + 1 + zeros] == b"\x00" * zeros
            assert encoded_bit_length(padded) == length * 8

    def test_accepts_bytes_like(self):
        assert pad_message(bytearray(b"abc")) == pad_message(b"abc")
        assert pad_message(memoryview(b"abc")) == pad_message(b"abc")

    def test_negative_length_rejected(self):
        with pytest.raises(ValueError):
            padded_length(-1)


class TestBlockParser:
    """Unit tests for block parsing."""

    def test_abc_block_words(self):
        block = parse_block(pad_message(b"abc"))
        assert len(block) == 16
        assert block[0] == 0x61626380
        assert block[1:15] == (0,) * 14
        assert block[15] == 0x18

    def test_block_count_invariant(self):
        for length in range(0, 201, 7):
            padded = pad_message(b"x" * length)
            blocks = parse_blocks(padded)
            assert len(blocks) == len(padded) // 64 == block_count(padded)
            assert all(len(block) == 16 for block in blocks)

    def test_big_endian_words(self):
        padded = bytes(range(64))
        first = parse_blocks(padded)[0]
        assert first[0] == 0x00010203
        assert first[15] == 0x3C3D3E3F

    def test_iter_blocks_in_order(self):
        padded = pad_message(b"\x01" * 56 + b"\x02" * 64)
        blocks = list(iter_blocks(padded))
        assert len(blocks) == 3
        assert blocks[0][0] == 0x01010101
        assert blocks[1][0] == 0x02020202


class TestScheduleExpander:
    """Unit tests for message schedule expansion."""

    def test_schedule_length(self):
        schedule = expand_schedule(parse_block(pad_message(b"abc")))
        assert len(schedule) == 64

    def test_first_sixteen_copied(self):
        block = parse_block(pad_message(b"abc"))
        assert expand_schedule(block)[:16] == block

    def test_abc_derived_words(self):
        """W[16] and W[17] for 'abc' as in the FIPS 180 example."""
        schedule = expand_schedule(parse_block(pad_message(b"abc")))
        assert schedule[16] == 0x61626380
        assert schedule[17] == 0x000F0000

    def test_recurrence(self):
        block = tuple((i * 0x9E3779B9) & MASK_32 for i in range(16))
        w = expand_schedule(block)
        for t in range(16, 64):
            expected = (small_sigma1(w[t - 2]) + w[t - 7]
                        + small_sigma0(w[t - 15]) + w[t - 16]) & MASK_32
            assert w[t] == expected


class TestCompression:
    """Unit tests for the compression function."""

    def test_abc_single_block(self):
        schedule = expand_schedule(parse_block(pad_message(b"abc")))
        state = compress(H_INITIAL, schedule)
        assert words_to_digest(state).hex() == ABC_DIGEST

    def test_does_not_mutate_input(self):
        state = list(H_INITIAL)
        compress(state, (0,) * 64)
        assert tuple(state) == H_INITIAL

    def test_wraparound_with_saturated_inputs(self):
        """All-ones state and schedule wrap without error."""
        state = compress((0xFFFFFFFF,) * 8, (0xFFFFFFFF,) * 64)
        assert len(state) == 8
        assert all(0 <= word <= MASK_32 for word in state)

    def test_constants_table(self):
        assert len(K) == 64
        assert K[0] == 0x428a2f98
        assert K[63] == 0xc67178f2
        assert len(H_INITIAL) == 8


class TestSHA256:
    """Unit tests for SHA-256 implementation."""

    def test_empty_string(self):
        """Test SHA-256 of empty string."""
        assert sha256_hex(b"") == EMPTY_DIGEST

    def test_abc(self):
        """Test SHA-256 of 'abc'."""
        assert sha256_hex(b"abc") == ABC_DIGEST

    def test_long_message(self):
        """Test SHA-256 of the 448-bit NIST message."""
        msg = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
        expected = "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
        assert sha256_hex(msg) == expected

    def test_million_a(self):
        """One million repetitions of 'a'."""
        expected = "cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0"
        assert sha256_hex(b"a" * 1_000_000) == expected

    def test_deterministic(self):
        """SHA-256 should be deterministic."""
        msg = b"test message"
        assert sha256(msg) == sha256(msg)

    def test_returns_32_bytes(self):
        """SHA-256 should return 32 bytes."""
        for msg in (b"", b"test", b"x" * 1000):
            assert len(sha256(msg)) == DIGEST_SIZE

    def test_different_inputs_different_hashes(self):
        """Different inputs should produce different hashes."""
        assert sha256(b"a") != sha256(b"b")

    @pytest.mark.parametrize("length", [55, 56, 63, 64, 65, 119, 120])
    def test_padding_boundaries_match_reference(self, length):
        """Messages straddling block boundaries hash like the reference."""
        msg = bytes((i * 7) & 0xFF for i in range(length))
        assert sha256_hex(msg) == reference_sha256_hex(msg)

    def test_matches_reference_for_all_short_lengths(self):
        for length in range(0, 200):
            msg = bytes(range(length))
            assert sha256_hex(msg) == reference_sha256_hex(msg)

    def test_sha256_string(self):
        assert sha256_string("abc").hex() == ABC_DIGEST
        assert sha256_string("héllo") == sha256("héllo".encode("utf-8"))

    def test_words_and_bytes_agree(self):
        words = sha256_words(b"abc")
        assert struct.pack('>8I', *words) == sha256(b"abc")

    def test_chaining_values(self):
        """H(0) is the IV and the last value is the digest."""
        values = list(iter_chaining_values(b"a" * 56))
        assert len(values) == 3
        assert values[0] == H_INITIAL
        assert values[-1] == sha256_words(b"a" * 56)

    def test_concurrent_calls_do_not_interfere(self):
        """Hashing from many threads gives the sequential results."""
        messages = [bytes([i]) * (i * 3) for i in range(64)]
        expected = [sha256(m) for m in messages]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(sha256, messages))
        assert results == expected
