"""Signal conditioning for captured noise samples.

Removes the DC offset and normalises the peak amplitude. Both transforms
mutate the sample array in place.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

import numpy as np

from noise_seed.errors import DegenerateSignal, InvalidParameter

logger = logging.getLogger(__name__)


def as_samples(data: Iterable[float] | np.ndarray) -> np.ndarray:
    """Return *data* as a fresh, contiguous 1-D float32 array."""
    return np.array(data, dtype=np.float32).reshape(-1)


def _check(samples: np.ndarray) -> None:
    if not isinstance(samples, np.ndarray) or samples.dtype != np.float32:
        raise TypeError("samples must be a float32 numpy array (see as_samples)")
    if samples.size == 0:
        raise DegenerateSignal("empty sample sequence")
    if not np.all(np.isfinite(samples)):
        raise DegenerateSignal("sample sequence contains NaN or Inf")


def remove_dc_offset(samples: np.ndarray) -> None:
    """Subtract the arithmetic mean from every sample, in place."""
    _check(samples)
    mean = np.mean(samples, dtype=np.float64)
    samples -= np.float32(mean)
    logger.debug("Removed DC offset %.6g from %d samples", mean, samples.size)


def normalize(samples: np.ndarray, target_peak: float = 1.0) -> None:
    """Scale *samples* in place so the largest magnitude equals *target_peak*.

    Raises DegenerateSignal when every sample is zero: there is no peak to
    scale and the division would put Inf/NaN into the extracted bytes.
    """
    _check(samples)
    if not (math.isfinite(target_peak) and target_peak > 0):
        raise InvalidParameter(f"target_peak must be positive, got {target_peak!r}")
    max_abs = float(np.max(np.abs(samples)))
    if max_abs == 0.0:
        raise DegenerateSignal("signal is silent (peak amplitude is zero)")
    # float64 so a subnormal peak cannot overflow the factor
    samples[:] = (samples.astype(np.float64) * (target_peak / max_abs)).astype(np.float32)
    logger.debug("Normalised peak %.6g to %.6g", max_abs, target_peak)


def condition(samples: np.ndarray, target_peak: float = 1.0) -> None:
    """DC-offset removal followed by peak normalisation, in place."""
    remove_dc_offset(samples)
    normalize(samples, target_peak)
