"""
Self Test

Checks the from-scratch SHA-256 against:
- NIST known-answer vectors (FIPS 180-4 examples and padding boundaries)
- The SHA-256 of the `cryptography` library on random messages
"""

import logging
import secrets
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from cryptography.hazmat.primitives import hashes

from ..core_crypto.sha256 import sha256_hex

logger = logging.getLogger(__name__)


# Test vectors from NIST
KNOWN_VECTORS: List[Tuple[bytes, str]] = [
    (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    (b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmnhijklmno"
     b"ijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu",
     "cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1"),
    (b"The quick brown fox jumps over the lazy dog",
     "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
]

DEFAULT_SAMPLES = 32
MAX_SAMPLE_LENGTH = 300


def reference_sha256_hex(data: bytes) -> str:
    """SHA-256 computed by the cryptography library."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize().hex()


@dataclass
class CheckResult:
    """Result of one self-test check."""
    name: str
    message: bytes
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return self.expected == self.actual

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        preview = self.message[:24].hex()
        if len(self.message) > 24:
            preview += "..."
        return f"[{status}] {self.name} ({len(self.message)} bytes) {preview}"


@dataclass
class SelfTestReport:
    """Collected results of a self-test run."""
    checks: List[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failures(self) -> List[CheckResult]:
        return [check for check in self.checks if not check.passed]


def run_self_test(samples: int = DEFAULT_SAMPLES, max_length: Optional[int] = None) -> SelfTestReport:
    """
    Run the known-answer vectors and a randomized cross-check.

    Args:
        samples: Number of random messages to compare against cryptography
        max_length: Longest random message in bytes

    Returns:
        A SelfTestReport with one CheckResult per message
    """
    if samples < 0:
        raise ValueError("Sample count must be non-negative")
    max_length = MAX_SAMPLE_LENGTH if max_length is None else max_length

    report = SelfTestReport()

    for index, (message, expected) in enumerate(KNOWN_VECTORS, start=1):
        report.checks.append(CheckResult(
            name=f"vector {index}",
            message=message,
            expected=expected,
            actual=sha256_hex(message),
        ))

    for index in range(1, samples + 1):
        message = secrets.token_bytes(secrets.randbelow(max_length + 1))
        report.checks.append(CheckResult(
            name=f"random {index}",
            message=message,
            expected=reference_sha256_hex(message),
            actual=sha256_hex(message),
        ))

    for check in report.failures:
        logger.error("Self-test mismatch: %s expected=%s actual=%s",
                     check.name, check.expected, check.actual)
    logger.info("Self-test: %d/%d checks passed",
                len(report.checks) - len(report.failures), len(report.checks))
    return report
