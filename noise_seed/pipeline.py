"""Capture → condition → extract → test.

Usage::

    from noise_seed.pipeline import PipelineConfig, run
    from noise_seed.sources import MicrophoneSource

    result = run(MicrophoneSource(), PipelineConfig(output_length=32))
    print(result.hex, result.verdict.as_pair())
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from noise_seed.conditioning import as_samples, condition
from noise_seed.errors import InvalidParameter
from noise_seed.extractor import MAX_LSB, extract_random_bytes
from noise_seed.sources.base import SampleSource
from noise_seed.stats import Verdict, run_all_tests

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Tunable parameters for one pipeline run.

    ``sample_rate`` of None keeps the source's own rate (the device default
    for a microphone).
    """

    sample_rate: int | None = None
    duration: float = 5.0
    num_lsb: int = 8
    output_length: int = 5
    target_peak: float = 1.0

    def __post_init__(self) -> None:
        if self.sample_rate is not None and self.sample_rate <= 0:
            raise InvalidParameter(f"sample_rate must be positive, got {self.sample_rate}")
        if not (math.isfinite(self.duration) and self.duration > 0):
            raise InvalidParameter(f"duration must be positive, got {self.duration}")
        if not 1 <= self.num_lsb <= MAX_LSB:
            raise InvalidParameter(f"num_lsb must be in 1..{MAX_LSB}, got {self.num_lsb}")
        if self.output_length < 1:
            raise InvalidParameter(f"output_length must be >= 1, got {self.output_length}")
        if not (math.isfinite(self.target_peak) and self.target_peak > 0):
            raise InvalidParameter(f"target_peak must be positive, got {self.target_peak}")


@dataclass
class PipelineResult:
    data: bytes
    verdict: Verdict
    n_samples: int

    @property
    def hex(self) -> str:
        return self.data.hex()


def process(samples: Iterable[float] | np.ndarray, config: PipelineConfig | None = None) -> PipelineResult:
    """Run conditioning, extraction and testing on captured samples.

    A float32 array is conditioned in place; any other input is copied
    into one first.
    """
    config = config or PipelineConfig()
    if not (isinstance(samples, np.ndarray) and samples.dtype == np.float32):
        samples = as_samples(samples)
    samples = samples.reshape(-1)

    condition(samples, config.target_peak)
    logger.info("Conditioning complete (%d samples)", samples.size)

    data = extract_random_bytes(samples, config.num_lsb, config.output_length)
    verdict = run_all_tests(data)
    logger.info("Monobit p=%.4f, runs statistic=%.4f", verdict.monobit.statistic, verdict.runs.statistic)
    return PipelineResult(data=data, verdict=verdict, n_samples=int(samples.size))


def capture(source: SampleSource, config: PipelineConfig | None = None) -> np.ndarray:
    """Take one recording from *source* as a float32 array."""
    config = config or PipelineConfig()
    if config.sample_rate is not None:
        source.sample_rate = config.sample_rate
    logger.info("Recording %.2fs from %s", config.duration, source.name)
    return as_samples(source.capture(config.duration))


def run(source: SampleSource, config: PipelineConfig | None = None) -> PipelineResult:
    """Capture from *source*, then :func:`process` the recording."""
    config = config or PipelineConfig()
    return process(capture(source, config), config)


def format_report(result: PipelineResult) -> list[str]:
    """The three output lines: hex data, monobit verdict, runs verdict."""
    monobit, runs = result.verdict.as_pair()
    return [
        f"Random data (hex): {result.hex}",
        f"Monobit test passed: {monobit}",
        f"Runs test passed: {runs}",
    ]
