"""Replay a recording saved with ``noise-seed run --save``."""

from __future__ import annotations

import os

import numpy as np

from noise_seed.errors import CaptureError
from noise_seed.sources.base import SampleSource

RAW_DTYPE = np.dtype("<f4")


class RawFileSource(SampleSource):
    """Headerless little-endian float32 samples read from disk.

    ``capture`` returns at most ``sample_rate * duration`` samples; a
    non-positive *duration* returns the whole file.
    """

    name = "file"
    description = "Raw float32 recording on disk"

    def __init__(self, path: str | os.PathLike, sample_rate: int = 44100) -> None:
        super().__init__(sample_rate)
        self.path = os.fspath(path)

    def is_available(self) -> bool:
        return os.path.isfile(self.path)

    def capture(self, duration: float = 0.0) -> np.ndarray:
        try:
            data = np.fromfile(self.path, dtype=RAW_DTYPE)
        except OSError as e:
            raise CaptureError(f"cannot read {self.path}: {e}") from e
        if duration > 0:
            data = data[: self.frames_for(duration)]
        return data.astype(np.float32)


def save_raw(samples: np.ndarray, path: str | os.PathLike) -> None:
    """Write *samples* in the format RawFileSource reads."""
    np.asarray(samples).astype(RAW_DTYPE).tofile(os.fspath(path))
