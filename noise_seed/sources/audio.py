"""Microphone noise source (requires sounddevice)."""

from __future__ import annotations

import logging
import threading

import numpy as np

from noise_seed.errors import CaptureError
from noise_seed.sources.base import SampleSource

logger = logging.getLogger(__name__)

# Extra time allowed for the driver to deliver the last block.
GRACE_SECONDS = 1.0


class _Recording:
    """Buffer shared between the stream callback and the waiting caller."""

    def __init__(self, n_frames: int) -> None:
        self.n_frames = n_frames
        self._chunks: list[np.ndarray] = []
        self._count = 0
        self._lock = threading.Lock()
        self.done = threading.Event()

    def append(self, block: np.ndarray) -> None:
        with self._lock:
            if self._count >= self.n_frames:
                return
            block = block[: self.n_frames - self._count]
            self._chunks.append(block.copy())
            self._count += len(block)
            if self._count >= self.n_frames:
                self.done.set()

    def take(self) -> np.ndarray:
        with self._lock:
            if not self._chunks:
                return np.empty(0, dtype=np.float32)
            return np.concatenate(self._chunks).astype(np.float32, copy=False)


class MicrophoneSource(SampleSource):
    """Ambient noise from the default (or a chosen) input device.

    The stream callback runs on a PortAudio thread; it appends into a
    lock-guarded buffer and signals once the requested frame count is
    reached. ``capture`` blocks on that signal and then takes the whole
    buffer in one handoff.
    """

    name = "microphone"
    description = "Audio input device noise (float32 frames)"

    def __init__(self, sample_rate: int | None = None, device: int | str | None = None) -> None:
        super().__init__(sample_rate)
        self.device = device

    def is_available(self) -> bool:
        try:
            import sounddevice as sd

            devs = sd.query_devices()
            return any(d.get("max_input_channels", 0) > 0 for d in devs)  # type: ignore[union-attr]
        except Exception:
            return False

    def capture(self, duration: float) -> np.ndarray:
        try:
            import sounddevice as sd
        except (ImportError, OSError) as e:
            raise CaptureError(f"sounddevice is not usable: {e}") from e

        if self.sample_rate is None:
            try:
                info = sd.query_devices(self.device, "input")
                self.sample_rate = int(info["default_samplerate"])
            except (ValueError, sd.PortAudioError) as e:
                raise CaptureError(f"no input device: {e}") from e

        rec = _Recording(self.frames_for(duration))

        def _callback(indata, frames, time_info, status):
            if status:
                logger.warning("Input stream status: %s", status)
            rec.append(indata[:, 0])

        try:
            with sd.InputStream(
                samplerate=self.sample_rate,
                device=self.device,
                channels=1,
                dtype="float32",
                callback=_callback,
            ):
                finished = rec.done.wait(timeout=duration + GRACE_SECONDS)
        except sd.PortAudioError as e:
            raise CaptureError(f"input stream failed: {e}") from e

        samples = rec.take()
        if not finished:
            logger.warning("Recording ended early: %d of %d frames", len(samples), rec.n_frames)
        if len(samples) == 0:
            raise CaptureError("input device delivered no samples")
        logger.info("Recording complete: %d samples at %d Hz", len(samples), self.sample_rate)
        return samples
