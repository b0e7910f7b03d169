"""Bit-level sanity checks for extracted bytes.

Two coarse checks: a monobit proportion band and a runs statistic built
from the first transition bucket. Neither is the NIST SP 800-22 form of
the test of the same name; they flag grossly non-random output only.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import sqrt

import numpy as np

from noise_seed.errors import EmptyInput

MONOBIT_LOW = 0.45
MONOBIT_HIGH = 0.55
RUNS_CRITICAL = 1.96
RUNS_BUCKETS = 6


@dataclass
class TestResult:
    """Result of a single statistical check."""
    __test__ = False  # not a pytest class

    name: str
    passed: bool
    statistic: float
    details: str


@dataclass
class Verdict:
    """Outcome of both checks over one byte sequence."""

    monobit: TestResult
    runs: TestResult

    def as_pair(self) -> tuple[bool, bool]:
        return self.monobit.passed, self.runs.passed

    @property
    def passed(self) -> bool:
        return self.monobit.passed and self.runs.passed


def _to_bits(data: bytes | bytearray | np.ndarray) -> np.ndarray:
    """Unpack bytes into an MSB-first bit array."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        arr = np.frombuffer(bytes(data), dtype=np.uint8)
    else:
        arr = np.asarray(data).astype(np.uint8).reshape(-1)
    if arr.size == 0:
        raise EmptyInput("cannot test an empty byte sequence")
    return np.unpackbits(arr)


def monobit_test(data: bytes | bytearray | np.ndarray) -> TestResult:
    """Fraction of set bits must fall strictly inside (0.45, 0.55)."""
    bits = _to_bits(data)
    n = bits.size
    k = int(np.count_nonzero(bits))
    p = k / n
    return TestResult(
        name="Monobit",
        passed=MONOBIT_LOW < p < MONOBIT_HIGH,
        statistic=p,
        details=f"ones={k}, n={n}",
    )


def runs_test(data: bytes | bytearray | np.ndarray) -> TestResult:
    """Transition-bucket runs check.

    Walking the bitstream, the j-th transition (1-based, j <= 6) increments
    ``bucket[j - 1]``, so every bucket ends up holding 0 or 1. The statistic
    is ``|2 * bucket[0] - N| / (2 * sqrt(N))`` and the check passes below
    1.96.
    """
    bits = _to_bits(data)
    n = bits.size
    transitions = int(np.count_nonzero(bits[1:] != bits[:-1]))
    buckets = (np.arange(RUNS_BUCKETS) < transitions).astype(np.int64)
    p_value = abs(2 * int(buckets[0]) - n) / (2 * sqrt(n))
    return TestResult(
        name="Runs",
        passed=p_value < RUNS_CRITICAL,
        statistic=p_value,
        details=f"transitions={transitions}, buckets={buckets.tolist()}, n={n}",
    )


def run_all_tests(data: bytes | bytearray | np.ndarray) -> Verdict:
    """Run the monobit and runs checks."""
    return Verdict(monobit=monobit_test(data), runs=runs_test(data))
