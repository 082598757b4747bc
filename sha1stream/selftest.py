"""Known-answer checks for the streaming engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from sha1stream.context import init
from sha1stream.engine import final, update

logger = logging.getLogger(__name__)

KNOWN_ANSWERS: Tuple[Tuple[bytes, str], ...] = (
    (b"abc", "a9993e364706816aba3e25717850c26c9cd0d89d"),
    (
        b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
        "84983e441c3bd26ebaae4aa1f95129e5e54670f1",
    ),
    (b"aaaaaaaaaa", "3495ff69d34671d1e15b33a63c1379fdedd3a32a"),
    (b"", "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
)


@dataclass(frozen=True)
class SelfTestResult:
    message: bytes
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return self.expected == self.actual


def run_selftest(vectors: Sequence[Tuple[bytes, str]] = KNOWN_ANSWERS) -> List[SelfTestResult]:
    results = []
    for message, expected in vectors:
        ctx = init()
        update(ctx, message)
        actual = final(ctx).hex()
        result = SelfTestResult(message, expected, actual)
        if not result.passed:
            logger.error("known answer mismatch for %r: expected %s, got %s", message, expected, actual)
        results.append(result)
    return results


def selftest_passed() -> bool:
    return all(result.passed for result in run_selftest())
