"""
noise-seed: raw entropy seeds from ambient analog noise.

Conditions captured audio samples, extracts low-order bits of successive
sample differences into a byte buffer, and sanity-checks the result with
monobit and runs tests. The output is raw and unhashed.
"""

__version__ = "0.1.0"

from noise_seed.conditioning import as_samples, condition, normalize, remove_dc_offset
from noise_seed.errors import (
    CaptureError,
    DegenerateSignal,
    EmptyInput,
    InsufficientSamples,
    InvalidParameter,
    NoiseSeedError,
)
from noise_seed.extractor import extract_random_bytes
from noise_seed.pipeline import PipelineConfig, PipelineResult, process, run
from noise_seed.stats import monobit_test, run_all_tests, runs_test

__all__ = [
    "CaptureError",
    "DegenerateSignal",
    "EmptyInput",
    "InsufficientSamples",
    "InvalidParameter",
    "NoiseSeedError",
    "PipelineConfig",
    "PipelineResult",
    "as_samples",
    "condition",
    "extract_random_bytes",
    "monobit_test",
    "normalize",
    "process",
    "remove_dc_offset",
    "run",
    "run_all_tests",
    "runs_test",
    "__version__",
]
