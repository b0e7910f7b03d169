"""Platform detection — discover available sample sources."""

from __future__ import annotations

import logging
import platform as _platform

from noise_seed.sources import ALL_SOURCES
from noise_seed.sources.base import SampleSource

logger = logging.getLogger(__name__)


def detect_available_sources() -> list[SampleSource]:
    """Instantiate and return all sources available on this machine."""
    available: list[SampleSource] = []
    for cls in ALL_SOURCES:
        try:
            src = cls()
            if src.is_available():
                available.append(src)
        except Exception as e:
            logger.debug("Skipping %s: %s", cls.__name__, e)
    return available


def platform_info() -> dict:
    """Return basic platform metadata."""
    return {
        "system": _platform.system(),
        "machine": _platform.machine(),
        "python": _platform.python_version(),
    }
