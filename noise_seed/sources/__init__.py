"""Sample source implementations."""

from noise_seed.sources.audio import MicrophoneSource
from noise_seed.sources.base import SampleSource
from noise_seed.sources.file import RawFileSource
from noise_seed.sources.synthetic import SyntheticNoiseSource

ALL_SOURCES: list[type[SampleSource]] = [
    MicrophoneSource,
    SyntheticNoiseSource,
]

__all__ = ["SampleSource", "MicrophoneSource", "SyntheticNoiseSource", "RawFileSource", "ALL_SOURCES"]
