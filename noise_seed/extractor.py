"""Raw byte extraction from conditioned noise samples."""

from __future__ import annotations

import logging

import numpy as np

from noise_seed.errors import InsufficientSamples, InvalidParameter

logger = logging.getLogger(__name__)

MAX_LSB = 8  # one output byte per difference


def stride_for(n_samples: int, output_length: int) -> int:
    """Distance between visited sample indices for *output_length* bytes."""
    if output_length < 1:
        raise InvalidParameter(f"output_length must be >= 1, got {output_length}")
    return max(n_samples - 1, 0) // output_length


def extract_random_bytes(samples: np.ndarray, num_lsb: int = 8, output_length: int = 5) -> bytes:
    """Derive *output_length* bytes from successive sample differences.

    Starting at index 1 and stepping by ``(n - 1) // output_length``, each
    difference ``samples[i] - samples[i - 1]`` is computed in float32, its
    IEEE-754 bit pattern read as an unsigned 32-bit integer, and the low
    *num_lsb* bits kept as one output byte. The low mantissa bits carry the
    noise; sign and exponent are discarded.

    Raises
    ------
    InvalidParameter
        *num_lsb* outside 1..8 or *output_length* below 1.
    InsufficientSamples
        Fewer than ``output_length + 1`` samples.
    """
    if not 1 <= num_lsb <= MAX_LSB:
        raise InvalidParameter(f"num_lsb must be in 1..{MAX_LSB}, got {num_lsb}")
    samples = np.asarray(samples, dtype=np.float32).reshape(-1)
    n = samples.size
    stride = stride_for(n, output_length)
    if stride == 0:
        raise InsufficientSamples(
            f"{n} samples cannot yield {output_length} bytes (need at least {output_length + 1})"
        )

    idx = np.arange(1, n, stride)[:output_length]
    if idx.size < output_length:
        raise InsufficientSamples(f"only {idx.size} of {output_length} bytes available")

    diffs = samples[idx] - samples[idx - 1]
    mask = np.uint32((1 << num_lsb) - 1)
    out = (diffs.view(np.uint32) & mask).astype(np.uint8)
    logger.debug("Extracted %d bytes (stride=%d, num_lsb=%d)", out.size, stride, num_lsb)
    return out.tobytes()
