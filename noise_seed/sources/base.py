"""Abstract base class for sample sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class SampleSource(ABC):
    """Something that can hand over a finished recording of noise samples.

    Every source declares metadata and implements ``is_available`` and
    ``capture``.
    """

    name: str = "unnamed"
    description: str = ""

    def __init__(self, sample_rate: int | None = 44100) -> None:
        # None: resolved by the source itself at capture time
        self.sample_rate = sample_rate

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the source can operate on this machine."""
        ...

    @abstractmethod
    def capture(self, duration: float) -> np.ndarray:
        """Record for *duration* seconds.

        Returns
        -------
        numpy.ndarray
            1-D float32 array in capture order. Its length is the captured
            sample count, at most ``sample_rate * duration``.
        """
        ...

    def frames_for(self, duration: float) -> int:
        return int(self.sample_rate * duration)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r} sample_rate={self.sample_rate}>"
