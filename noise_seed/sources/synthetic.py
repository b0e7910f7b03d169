"""Seeded pseudo-random noise, for running the pipeline without hardware."""

from __future__ import annotations

import numpy as np

from noise_seed.sources.base import SampleSource


class SyntheticNoiseSource(SampleSource):
    """Gaussian noise plus a constant DC offset.

    Deterministic for a given *seed*; not an entropy source.
    """

    name = "synthetic"
    description = "Seeded Gaussian noise with DC offset (testing only)"

    def __init__(
        self,
        sample_rate: int = 44100,
        seed: int | None = 0,
        offset: float = 0.01,
        amplitude: float = 0.002,
    ) -> None:
        super().__init__(sample_rate)
        self.seed = seed
        self.offset = offset
        self.amplitude = amplitude

    def is_available(self) -> bool:
        return True

    def capture(self, duration: float) -> np.ndarray:
        rng = np.random.default_rng(self.seed)
        noise = rng.normal(self.offset, self.amplitude, self.frames_for(duration))
        return noise.astype(np.float32)
