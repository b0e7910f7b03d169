"""Error kinds raised by the extraction pipeline."""


class NoiseSeedError(Exception):
    """Base class for every pipeline failure."""


class DegenerateSignal(NoiseSeedError):
    """Input is empty, silent, constant, or contains non-finite samples."""


class InvalidParameter(NoiseSeedError, ValueError):
    """A tunable parameter is outside its supported range."""


class InsufficientSamples(NoiseSeedError):
    """Too few samples to produce the requested number of bytes."""


class EmptyInput(NoiseSeedError):
    """A statistical test was handed a zero-length byte sequence."""


class CaptureError(NoiseSeedError):
    """The sample source could not deliver a recording."""
